# tests/conftest.py
"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Generator

import pytest

from taxi_patterns.common.localization import load_lang_dict
from taxi_patterns.core.notifications import Observer
from taxi_patterns.core.pricing import TripData


# =============================================================================
# ФИКСТУРЫ КОНФИГУРАЦИИ
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Корневая директория проекта."""
    return Path(__file__).parent.parent


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Мок конфигурации для тестов."""
    return {
        "_comment": "тестовая конфигурация",
        "PROJECT_NAME": "taxi_patterns_test",
        "VERSION": "1.0.0-test",
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "debug",
        "LOG_FORMAT": "json",
        "LOG_TO_FILE": False,
        "DEFAULT_LANGUAGE": "en",
        "SUPPORTED_LANGUAGES": ["ru", "en"],
        "FARE_PER_KM": 12.0,
        "FARE_PER_MINUTE": 3.0,
        "FIXED_FARE": 80.0,
        "CLIENT_NAMES": ["Иван"],
        "INITIAL_STATUS": "новый",
        "STATUS_UPDATES": ["завершен"],
        "STATE_STEPS": 4,
        "TRIP_DISTANCE": 2.5,
        "TRIP_TIME": 7.0,
    }


@pytest.fixture
def mock_lang_dict() -> dict[str, dict[str, str]]:
    """Мок словаря локализации для тестов."""
    return {
        "WELCOME": {
            "ru": "Добро пожаловать!",
            "en": "Welcome!",
        },
        "GREETING": {
            "ru": "Привет, {name}!",
            "en": "Hello, {name}!",
        },
        "ONLY_EN": {
            "en": "English only",
        },
    }


# =============================================================================
# ФИКСТУРЫ ЛОКАЛИЗАЦИИ
# =============================================================================

@pytest.fixture(autouse=True)
def clear_lang_cache() -> Generator[None, None, None]:
    """Сбрасывает кэш словаря локализации до и после теста."""
    load_lang_dict.cache_clear()
    yield
    load_lang_dict.cache_clear()


@pytest.fixture
def temp_lang_dict_file(tmp_path: Path, mock_lang_dict: dict[str, dict[str, str]]) -> Path:
    """Создаёт временный файл локализации."""
    lang_file = tmp_path / "lang_dict.json"
    lang_file.write_text(json.dumps(mock_lang_dict, ensure_ascii=False, indent=2), encoding="utf-8")
    return lang_file


@pytest.fixture
def temp_config_file(tmp_path: Path, mock_config: dict[str, Any]) -> Path:
    """Создаёт временный файл конфигурации."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(mock_config, ensure_ascii=False, indent=2), encoding="utf-8")
    return config_file


# =============================================================================
# ФИКСТУРЫ МОДЕЛЕЙ
# =============================================================================

class RecordingObserver(Observer):
    """Наблюдатель, записывающий уведомления в общий журнал."""

    def __init__(self, name: str, journal: list[tuple[str, str]]) -> None:
        self.name = name
        self.journal = journal

    def update(self, message: str) -> None:
        self.journal.append((self.name, message))


@pytest.fixture
def journal() -> list[tuple[str, str]]:
    """Общий журнал уведомлений."""
    return []


@pytest.fixture
def make_observer(journal: list[tuple[str, str]]):
    """Фабрика записывающих наблюдателей."""
    def factory(name: str) -> RecordingObserver:
        return RecordingObserver(name, journal)
    return factory


@pytest.fixture
def sample_trip() -> TripData:
    """Поездка из демонстрации: 15 км, 30 минут."""
    return TripData(distance=15, time=30)
