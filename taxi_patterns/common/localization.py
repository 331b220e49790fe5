# taxi_patterns/common/localization.py
"""
Модуль локализации.
Тексты сообщений хранятся в lang_dict.json внутри пакета taxi_patterns.config:
{"КЛЮЧ": {"ru": "...", "en": "..."}}.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any


DEFAULT_LANGUAGE = "ru"


def get_lang_dict_path() -> Path:
    """Возвращает путь к файлу локализации."""
    return Path(__file__).resolve().parent.parent / "config" / "lang_dict.json"


@lru_cache()
def load_lang_dict() -> dict[str, dict[str, str]]:
    """
    Загружает словарь локализации из JSON файла.
    Результат кэшируется до вызова load_lang_dict.cache_clear().

    Raises:
        FileNotFoundError: Файл отсутствует
    """
    lang_path = get_lang_dict_path()
    if not lang_path.exists():
        raise FileNotFoundError(f"Файл локализации не найден: {lang_path}")

    with open(lang_path, "r", encoding="utf-8") as f:
        return json.load(f)


def _pick_translation(translations: dict[str, str], lang: str) -> str | None:
    # Запрошенный язык -> русский -> первый непустой перевод
    for candidate in (lang, DEFAULT_LANGUAGE):
        if translations.get(candidate):
            return translations[candidate]
    return next((text for text in translations.values() if text), None)


def get_text(
    key: str,
    lang: str = DEFAULT_LANGUAGE,
    default: str | None = None,
    **kwargs: Any,
) -> str:
    """
    Получает локализованный текст по ключу.

    Args:
        key: Ключ сообщения
        lang: Код языка (ru, en)
        default: Текст, если ключ или файл не найден (иначе "[KEY]")
        **kwargs: Параметры для str.format

    Returns:
        Локализованный текст

    Example:
        >>> get_text("COST_FIXED", "en", cost=50.0)
        "Fixed cost: 50.0"
    """
    fallback = default or f"[{key}]"
    try:
        translations = load_lang_dict().get(key)
    except FileNotFoundError:
        return fallback

    text = _pick_translation(translations, lang) if translations else None
    if text is None:
        return fallback

    if kwargs:
        try:
            text = text.format(**kwargs)
        except KeyError:
            pass  # Шаблон без нужного параметра выводится как есть

    return text


def get_available_languages() -> list[str]:
    """
    Возвращает отсортированный список языков, встречающихся в словаре.
    Без файла локализации доступен только язык по умолчанию.
    """
    try:
        lang_dict = load_lang_dict()
    except FileNotFoundError:
        return [DEFAULT_LANGUAGE]

    languages = {
        lang
        for translations in lang_dict.values()
        if isinstance(translations, dict)
        for lang in translations
    }
    return sorted(languages) or [DEFAULT_LANGUAGE]


def validate_lang_dict(required_languages: list[str] | None = None) -> list[str]:
    """
    Проверяет, что у каждого ключа есть перевод на все нужные языки.

    Args:
        required_languages: Обязательные языки (по умолчанию все найденные в словаре)

    Returns:
        Список ошибок (пустой, если всё в порядке)
    """
    try:
        lang_dict = load_lang_dict()
    except FileNotFoundError as e:
        return [str(e)]

    required = set(required_languages or get_available_languages())
    errors = []

    for key, translations in lang_dict.items():
        if not isinstance(translations, dict):
            errors.append(f"Ключ '{key}' имеет неверный формат")
            continue

        missing = required - {lang for lang, text in translations.items() if text}
        if missing:
            errors.append(f"Ключ '{key}' не имеет перевода для языков: {sorted(missing)}")

    return errors
