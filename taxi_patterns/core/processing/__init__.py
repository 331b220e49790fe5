# taxi_patterns/core/processing/__init__.py
"""
Оформление заказа (паттерн Template Method).
"""

from taxi_patterns.core.processing.process import OrderProcess, TaxiOrderProcess

__all__ = [
    "OrderProcess",
    "TaxiOrderProcess",
]
