# taxi_patterns/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class PricingType(str, Enum):
    """Способы расчёта стоимости поездки."""
    DISTANCE = "distance"
    TIME = "time"
    FIXED = "fixed"

    def __str__(self) -> str:
        return self.value


# Имя основного логгера приложения
APP_LOGGER_NAME = "taxi_patterns"
