# taxi_patterns/config/loader.py
"""
Загрузчик конфигурации проекта.
Единственный источник истины: config.json в директории пакета.
Файл входит в дистрибутив, путь не зависит от места установки.
Отдельные параметры переопределяются из переменных окружения.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУТЕЙ
# =============================================================================

def get_project_root() -> Path:
    """Возвращает корневую директорию проекта (для поиска .env в рабочей копии)."""
    return Path(__file__).resolve().parent.parent.parent


def get_config_dir() -> Path:
    """Возвращает директорию с JSON-файлами конфигурации внутри пакета."""
    return Path(__file__).resolve().parent


def get_config_path() -> Path:
    """Возвращает путь к файлу конфигурации."""
    return get_config_dir() / "config.json"


def load_config_json() -> dict[str, Any]:
    """Загружает config.json и возвращает словарь."""
    config_path = get_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Файл конфигурации не найден: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


# =============================================================================
# PYDANTIC МОДЕЛИ КОНФИГУРАЦИИ
# =============================================================================

class SystemSettings(BaseModel):
    """Системные настройки."""
    PROJECT_NAME: str = "taxi_patterns"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"


class LoggingSettings(BaseModel):
    """Настройки логирования."""
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "colored"
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: str = "logs/app.log"
    LOG_MAX_BYTES: int = 10485760
    LOG_BACKUP_COUNT: int = 5

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Приводит уровень к верхнему регистру."""
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Разрешены только форматы colored и json."""
        if v not in ("colored", "json"):
            raise ValueError(f"Неизвестный формат логов: {v}")
        return v


class DomainSettings(BaseModel):
    """Настройки языка вывода."""
    DEFAULT_LANGUAGE: str = "ru"
    SUPPORTED_LANGUAGES: list[str] = Field(default_factory=lambda: ["ru", "en"])


class FareSettings(BaseModel):
    """Тарифы стратегий расчёта стоимости."""
    FARE_PER_KM: float = 10.0
    FARE_PER_MINUTE: float = 5.0
    FIXED_FARE: float = 50.0


class DemoSettings(BaseModel):
    """Входные данные демонстрации."""
    CLIENT_NAMES: list[str] = Field(default_factory=lambda: ["Алексей", "Мария"])
    INITIAL_STATUS: str = "создан"
    STATUS_UPDATES: list[str] = Field(default_factory=lambda: ["подтвержден", "в пути"])
    STATE_STEPS: int = 3
    TRIP_DISTANCE: float = 15.0
    TRIP_TIME: float = 30.0


class Settings(BaseSettings):
    """Главный класс настроек приложения."""
    system: SystemSettings = Field(default_factory=SystemSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    domain: DomainSettings = Field(default_factory=DomainSettings)
    fares: FareSettings = Field(default_factory=FareSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def from_config_json(cls) -> "Settings":
        """Создаёт настройки из config.json с учётом переменных окружения."""
        data = load_config_json()
        # Ключи, начинающиеся с "_", считаются комментариями
        filtered_data = {k: v for k, v in data.items() if not k.startswith("_")}

        return cls(
            system=SystemSettings(
                PROJECT_NAME=filtered_data.get("PROJECT_NAME", "taxi_patterns"),
                VERSION=filtered_data.get("VERSION", "1.0.0"),
                ENVIRONMENT=os.getenv("ENVIRONMENT", filtered_data.get("ENVIRONMENT", "development")),
            ),
            logging=LoggingSettings(
                LOG_LEVEL=os.getenv("LOG_LEVEL", filtered_data.get("LOG_LEVEL", "WARNING")),
                LOG_FORMAT=os.getenv("LOG_FORMAT", filtered_data.get("LOG_FORMAT", "colored")),
                LOG_TO_FILE=filtered_data.get("LOG_TO_FILE", False),
                LOG_FILE_PATH=filtered_data.get("LOG_FILE_PATH", "logs/app.log"),
                LOG_MAX_BYTES=filtered_data.get("LOG_MAX_BYTES", 10485760),
                LOG_BACKUP_COUNT=filtered_data.get("LOG_BACKUP_COUNT", 5),
            ),
            domain=DomainSettings(
                DEFAULT_LANGUAGE=os.getenv("DEFAULT_LANGUAGE", filtered_data.get("DEFAULT_LANGUAGE", "ru")),
                SUPPORTED_LANGUAGES=filtered_data.get("SUPPORTED_LANGUAGES", ["ru", "en"]),
            ),
            fares=FareSettings(
                FARE_PER_KM=filtered_data.get("FARE_PER_KM", 10.0),
                FARE_PER_MINUTE=filtered_data.get("FARE_PER_MINUTE", 5.0),
                FIXED_FARE=filtered_data.get("FIXED_FARE", 50.0),
            ),
            demo=DemoSettings(
                CLIENT_NAMES=filtered_data.get("CLIENT_NAMES", ["Алексей", "Мария"]),
                INITIAL_STATUS=filtered_data.get("INITIAL_STATUS", "создан"),
                STATUS_UPDATES=filtered_data.get("STATUS_UPDATES", ["подтвержден", "в пути"]),
                STATE_STEPS=filtered_data.get("STATE_STEPS", 3),
                TRIP_DISTANCE=filtered_data.get("TRIP_DISTANCE", 15.0),
                TRIP_TIME=filtered_data.get("TRIP_TIME", 30.0),
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Возвращает синглтон настроек приложения.
    """
    from dotenv import load_dotenv

    env_path = get_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Settings.from_config_json()


# Экспорт синглтона для удобного импорта
settings = get_settings()
