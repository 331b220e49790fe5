# taxi_patterns/core/orders/__init__.py
"""
Жизненный цикл заказа (паттерн State).
"""

from taxi_patterns.core.orders.states import OrderContext, OrderState

__all__ = [
    "OrderContext",
    "OrderState",
]
