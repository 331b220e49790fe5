# tests/test_demo.py
"""
Тесты сценариев демонстрации и точки входа.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

import main
from taxi_patterns import demo


EXPECTED_RU = [
    "Уведомление для Алексей: Статус заказа обновлен на: подтвержден",
    "Уведомление для Мария: Статус заказа обновлен на: подтвержден",
    "Уведомление для Алексей: Статус заказа обновлен на: в пути",
    "Уведомление для Мария: Статус заказа обновлен на: в пути",
    "",
    "Демонстрация паттерна State:",
    "Заказ создан.",
    "Заказ подтвержден.",
    "Такси в пути.",
    "",
    "Демонстрация паттерна Strategy:",
    "Стоимость по расстоянию: 150.0",
    "Стоимость по времени: 150.0",
    "Фиксированная стоимость: 50.0",
    "",
    "Демонстрация паттерна Template Method:",
    "Проверка доступности...",
    "Расчет стоимости...",
    "Заказ подтвержден.",
]


class TestDemos:
    """Тесты для отдельных сценариев."""

    def test_demos_order(self) -> None:
        """Сценарии идут в порядке Observer, State, Strategy, Template Method."""
        assert demo.DEMOS == (
            demo.run_observer_demo,
            demo.run_state_demo,
            demo.run_strategy_demo,
            demo.run_template_method_demo,
        )

    def test_run_all_full_transcript(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Полный вывод демонстрации на русском."""
        demo.run_all("ru")

        assert capsys.readouterr().out.splitlines() == EXPECTED_RU

    def test_run_all_default_language(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Без явного языка используется язык из настроек."""
        with patch.object(demo.settings.domain, "DEFAULT_LANGUAGE", "en"):
            demo.run_all()

        out = capsys.readouterr().out
        assert "Strategy pattern demo:" in out
        assert "Cost by distance: 150.0" in out

    def test_run_all_calls_each_demo_once(self) -> None:
        """Каждый сценарий вызывается ровно один раз с языком."""
        calls: list[str] = []
        fakes = tuple(
            (lambda lang, n=name: calls.append(f"{n}:{lang}"))
            for name in ("observer", "state", "strategy", "template")
        )

        with patch.object(demo, "DEMOS", fakes):
            demo.run_all("ru")

        assert calls == ["observer:ru", "state:ru", "strategy:ru", "template:ru"]

    def test_strategy_demo_en(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Сценарий Strategy на английском."""
        demo.run_strategy_demo("en")

        assert capsys.readouterr().out.splitlines() == [
            "",
            "Strategy pattern demo:",
            "Cost by distance: 150.0",
            "Cost by time: 150.0",
            "Fixed cost: 50.0",
        ]


class TestMain:
    """Тесты для точки входа."""

    def test_main_returns_zero(self) -> None:
        """main запускает демонстрацию и завершается с кодом 0."""
        with patch.object(main, "run_all") as mock_run_all:
            assert main.main() == 0

        mock_run_all.assert_called_once_with()

    def test_main_logs_and_reraises(self) -> None:
        """Непредвиденная ошибка логируется и пробрасывается."""
        with patch.object(main, "run_all", side_effect=RuntimeError("сбой")), \
                patch.object(main, "log_error") as mock_log_error:
            with pytest.raises(RuntimeError):
                main.main()

        mock_log_error.assert_called_once()
        assert mock_log_error.call_args.kwargs.get("exc_info") is True

    def test_runs_outside_source_tree(self, project_root: Path, tmp_path: Path) -> None:
        """Запуск из чужой директории: код 0, пустой stderr, полный вывод."""
        env = {**os.environ, "PYTHONIOENCODING": "utf-8", "DEFAULT_LANGUAGE": "ru", "LOG_LEVEL": "WARNING"}

        result = subprocess.run(
            [sys.executable, str(project_root / "main.py")],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            encoding="utf-8",
            timeout=60,
        )

        assert result.returncode == 0, result.stderr
        assert result.stderr == ""
        assert result.stdout.splitlines() == EXPECTED_RU


class TestCheckLocalization:
    """Тесты для проверки словаря при запуске."""

    def test_project_dictionary_is_silent(self) -> None:
        """Полный словарь и известный язык не дают предупреждений."""
        with patch.object(main, "log_warning") as mock_warning:
            main.check_localization()

        mock_warning.assert_not_called()

    def test_unknown_default_language(self) -> None:
        """Неизвестный язык по умолчанию вызывает предупреждение."""
        with patch.object(main.settings.domain, "DEFAULT_LANGUAGE", "de"), \
                patch.object(main, "log_warning") as mock_warning:
            main.check_localization()

        mock_warning.assert_called_once()
        assert "'de'" in mock_warning.call_args[0][0]

    def test_incomplete_dictionary(self) -> None:
        """Каждый неполный ключ даёт отдельное предупреждение."""
        errors = ["Ключ 'A' не имеет перевода для языков: ['en']", "Ключ 'B' имеет неверный формат"]

        with patch.object(main, "validate_lang_dict", return_value=errors) as mock_validate, \
                patch.object(main, "log_warning") as mock_warning:
            main.check_localization()

        mock_validate.assert_called_once_with(main.settings.domain.SUPPORTED_LANGUAGES)
        assert [c[0][0] for c in mock_warning.call_args_list] == errors
