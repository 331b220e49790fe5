# taxi_patterns/core/pricing/__init__.py
"""
Расчёт стоимости поездки (паттерн Strategy).
"""

from taxi_patterns.core.pricing.models import TripData
from taxi_patterns.core.pricing.service import TripCostCalculator
from taxi_patterns.core.pricing.strategies import (
    DistanceBasedPricing,
    FixedPricing,
    PricingStrategy,
    TimeBasedPricing,
)

__all__ = [
    "DistanceBasedPricing",
    "FixedPricing",
    "PricingStrategy",
    "TimeBasedPricing",
    "TripCostCalculator",
    "TripData",
]
