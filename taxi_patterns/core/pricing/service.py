# taxi_patterns/core/pricing/service.py
"""
Калькулятор стоимости поездки.
"""

from __future__ import annotations

from taxi_patterns.common.logger import log_debug
from taxi_patterns.core.pricing.models import TripData
from taxi_patterns.core.pricing.strategies import PricingStrategy


class TripCostCalculator:
    """
    Калькулятор стоимости.
    Делегирует расчёт установленной стратегии, которую можно заменить в любой момент.
    """

    def __init__(self, strategy: PricingStrategy) -> None:
        """
        Args:
            strategy: Начальная стратегия расчёта

        Raises:
            TypeError: Передана не стратегия
        """
        self._strategy = self._check(strategy)

    @property
    def strategy(self) -> PricingStrategy:
        """Установленная стратегия."""
        return self._strategy

    def set_strategy(self, strategy: PricingStrategy) -> None:
        """
        Заменяет стратегию. Действует только на последующие расчёты.

        Args:
            strategy: Новая стратегия
        """
        strategy = self._check(strategy)
        log_debug(f"Стратегия расчёта: {self._strategy!r} -> {strategy!r}")
        self._strategy = strategy

    def calculate_cost(self, data: TripData) -> float:
        """
        Рассчитывает стоимость поездки установленной стратегией.

        Args:
            data: Параметры поездки

        Returns:
            Стоимость
        """
        cost = self._strategy.calculate_cost(data)
        log_debug(f"Стоимость ({self._strategy.pricing_type}): {cost}")
        return cost

    @staticmethod
    def _check(strategy: PricingStrategy) -> PricingStrategy:
        if not isinstance(strategy, PricingStrategy):
            raise TypeError(f"Ожидалась стратегия PricingStrategy, получено: {strategy!r}")
        return strategy
