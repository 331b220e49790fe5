# taxi_patterns/core/processing/process.py
"""
Оформление заказа (паттерн Template Method).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import final

from taxi_patterns.common.localization import get_text
from taxi_patterns.common.logger import log_debug


class OrderProcess(ABC):
    """
    Базовый процесс оформления заказа.

    Порядок шагов фиксирован в process_order(): проверка доступности,
    расчёт стоимости, подтверждение. Наследники переопределяют только шаги.
    """

    def __init__(self, lang: str | None = None) -> None:
        """
        Args:
            lang: Язык сообщений (по умолчанию из настроек)
        """
        if lang is None:
            from taxi_patterns.config import settings
            lang = settings.domain.DEFAULT_LANGUAGE
        self.lang = lang

    @final
    def process_order(self) -> None:
        """Выполняет шаги оформления в фиксированном порядке."""
        log_debug(f"{type(self).__name__}: начало оформления")
        self.check_availability()
        self.calculate_cost()
        self.confirm_order()
        log_debug(f"{type(self).__name__}: оформление завершено")

    def check_availability(self) -> None:
        """Шаг 1: проверка доступности."""
        print(get_text("PROCESS_CHECK_AVAILABILITY", self.lang))

    @abstractmethod
    def calculate_cost(self) -> None:
        """Шаг 2: расчёт стоимости. Обязателен для наследников."""
        pass

    def confirm_order(self) -> None:
        """Шаг 3: подтверждение заказа."""
        print(get_text("PROCESS_CONFIRM_ORDER", self.lang))


class TaxiOrderProcess(OrderProcess):
    """Оформление заказа такси."""

    def calculate_cost(self) -> None:
        print(get_text("PROCESS_CALCULATE_COST", self.lang))
