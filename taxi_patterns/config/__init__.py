# taxi_patterns/config/__init__.py
"""
Модуль конфигурации.
Экспортирует настройки приложения.
"""

from taxi_patterns.config.loader import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
