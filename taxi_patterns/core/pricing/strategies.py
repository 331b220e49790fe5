# taxi_patterns/core/pricing/strategies.py
"""
Стратегии расчёта стоимости поездки (паттерн Strategy).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from taxi_patterns.common.constants import PricingType
from taxi_patterns.core.pricing.models import TripData


class PricingStrategy(ABC):
    """
    Базовый класс стратегии.
    Стратегии не хранят изменяемого состояния: расчёт зависит только от тарифа и поездки.
    """

    @property
    @abstractmethod
    def pricing_type(self) -> PricingType:
        """Тип стратегии."""
        pass

    @abstractmethod
    def calculate_cost(self, data: TripData) -> float:
        """
        Рассчитывает стоимость поездки.

        Args:
            data: Параметры поездки

        Returns:
            Стоимость без округления
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DistanceBasedPricing(PricingStrategy):
    """Стоимость пропорциональна расстоянию."""

    def __init__(self, fare_per_km: float | None = None) -> None:
        if fare_per_km is None:
            from taxi_patterns.config import settings
            fare_per_km = settings.fares.FARE_PER_KM
        self.fare_per_km = fare_per_km

    @property
    def pricing_type(self) -> PricingType:
        return PricingType.DISTANCE

    def calculate_cost(self, data: TripData) -> float:
        return data.distance * self.fare_per_km


class TimeBasedPricing(PricingStrategy):
    """Стоимость пропорциональна времени поездки."""

    def __init__(self, fare_per_minute: float | None = None) -> None:
        if fare_per_minute is None:
            from taxi_patterns.config import settings
            fare_per_minute = settings.fares.FARE_PER_MINUTE
        self.fare_per_minute = fare_per_minute

    @property
    def pricing_type(self) -> PricingType:
        return PricingType.TIME

    def calculate_cost(self, data: TripData) -> float:
        return data.time * self.fare_per_minute


class FixedPricing(PricingStrategy):
    """Фиксированная стоимость, параметры поездки не учитываются."""

    def __init__(self, fixed_fare: float | None = None) -> None:
        if fixed_fare is None:
            from taxi_patterns.config import settings
            fixed_fare = settings.fares.FIXED_FARE
        self.fixed_fare = fixed_fare

    @property
    def pricing_type(self) -> PricingType:
        return PricingType.FIXED

    def calculate_cost(self, data: TripData) -> float:
        return float(self.fixed_fare)

