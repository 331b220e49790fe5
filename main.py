#!/usr/bin/env python3
# main.py
"""
Главная точка входа демонстрации паттернов на примере заказа такси.
Аргументы командной строки не поддерживаются.
"""

from __future__ import annotations

import sys

from taxi_patterns.common.constants import TypeMsg
from taxi_patterns.common.localization import get_available_languages, validate_lang_dict
from taxi_patterns.common.logger import log_error, log_info, log_warning, setup_logging
from taxi_patterns.config import settings
from taxi_patterns.demo import run_all


def check_localization() -> None:
    """Предупреждает о неполном словаре и неизвестном языке по умолчанию."""
    lang = settings.domain.DEFAULT_LANGUAGE
    if lang not in get_available_languages():
        log_warning(f"Язык '{lang}' отсутствует в словаре, тексты будут на русском")

    for error in validate_lang_dict(settings.domain.SUPPORTED_LANGUAGES):
        log_warning(error)


def main() -> int:
    """
    Запускает все демонстрации по очереди.

    Returns:
        Код завершения процесса
    """
    setup_logging()
    log_info(
        f"{settings.system.PROJECT_NAME} v{settings.system.VERSION} "
        f"({settings.system.ENVIRONMENT}), язык: {settings.domain.DEFAULT_LANGUAGE}",
        type_msg=TypeMsg.DEBUG,
    )
    check_localization()

    try:
        run_all()
    except Exception as e:
        log_error(f"Демонстрация прервана: {e}", exc_info=True)
        raise

    log_info("Демонстрация завершена", type_msg=TypeMsg.DEBUG)
    return 0


if __name__ == "__main__":
    sys.exit(main())
