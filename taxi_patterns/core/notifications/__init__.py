# taxi_patterns/core/notifications/__init__.py
"""
Компонент уведомлений (паттерн Observer).
"""

from taxi_patterns.core.notifications.observers import Client, Observer
from taxi_patterns.core.notifications.subject import Order, Subject

__all__ = [
    "Client",
    "Observer",
    "Order",
    "Subject",
]
