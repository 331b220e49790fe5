# taxi_patterns/demo.py
"""
Сценарии демонстрации паттернов.
Каждый сценарий независим и создаёт собственные объекты.
"""

from __future__ import annotations

from typing import Callable

from taxi_patterns.common.localization import get_text
from taxi_patterns.common.logger import log_debug
from taxi_patterns.config import settings
from taxi_patterns.core.notifications import Client, Order
from taxi_patterns.core.orders import OrderContext
from taxi_patterns.core.pricing import (
    DistanceBasedPricing,
    FixedPricing,
    TimeBasedPricing,
    TripCostCalculator,
    TripData,
)
from taxi_patterns.core.processing import TaxiOrderProcess


def _print_header(key: str, lang: str) -> None:
    """Выводит заголовок сценария, отделённый пустой строкой."""
    print()
    print(get_text(key, lang))


def run_observer_demo(lang: str) -> None:
    """Observer: клиенты получают уведомления о смене статуса заказа."""
    demo = settings.demo
    clients = [Client(name, lang=lang) for name in demo.CLIENT_NAMES]

    order = Order(demo.INITIAL_STATUS, lang=lang)
    for client in clients:
        order.attach(client)

    for status in demo.STATUS_UPDATES:
        order.set_status(status)


def run_state_demo(lang: str) -> None:
    """State: заказ проходит цепочку состояний."""
    _print_header("DEMO_STATE_HEADER", lang)

    context = OrderContext(lang=lang)
    for _ in range(settings.demo.STATE_STEPS):
        context.proceed()


def run_strategy_demo(lang: str) -> None:
    """Strategy: одна поездка, три способа расчёта стоимости."""
    _print_header("DEMO_STRATEGY_HEADER", lang)

    trip = TripData(distance=settings.demo.TRIP_DISTANCE, time=settings.demo.TRIP_TIME)
    calculator = TripCostCalculator(DistanceBasedPricing())
    print(get_text("COST_BY_DISTANCE", lang, cost=calculator.calculate_cost(trip)))

    calculator.set_strategy(TimeBasedPricing())
    print(get_text("COST_BY_TIME", lang, cost=calculator.calculate_cost(trip)))

    calculator.set_strategy(FixedPricing())
    print(get_text("COST_FIXED", lang, cost=calculator.calculate_cost(trip)))


def run_template_method_demo(lang: str) -> None:
    """Template Method: оформление заказа по фиксированному шаблону."""
    _print_header("DEMO_TEMPLATE_HEADER", lang)

    TaxiOrderProcess(lang=lang).process_order()


DEMOS: tuple[Callable[[str], None], ...] = (
    run_observer_demo,
    run_state_demo,
    run_strategy_demo,
    run_template_method_demo,
)


def run_all(lang: str | None = None) -> None:
    """
    Последовательно запускает все сценарии.

    Args:
        lang: Язык вывода (по умолчанию из настроек)
    """
    if lang is None:
        lang = settings.domain.DEFAULT_LANGUAGE

    for demo in DEMOS:
        log_debug(f"Запуск сценария {demo.__name__}")
        demo(lang)
