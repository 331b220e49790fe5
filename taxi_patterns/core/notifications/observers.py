# taxi_patterns/core/notifications/observers.py
"""
Наблюдатели за заказом.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from taxi_patterns.common.localization import get_text


class Observer(ABC):
    """
    Базовый класс наблюдателя.
    Получает уведомления от субъекта, к которому подключён.
    """

    @abstractmethod
    def update(self, message: str) -> None:
        """
        Обрабатывает уведомление.

        Args:
            message: Текст уведомления
        """
        pass


class Client(Observer):
    """Клиент такси, выводящий полученные уведомления в консоль."""

    def __init__(self, name: str, lang: str | None = None) -> None:
        """
        Args:
            name: Имя клиента
            lang: Язык уведомлений (по умолчанию из настроек)
        """
        if lang is None:
            from taxi_patterns.config import settings
            lang = settings.domain.DEFAULT_LANGUAGE

        self.name = name
        self.lang = lang

    def update(self, message: str) -> None:
        print(get_text("CLIENT_NOTIFICATION", self.lang, name=self.name, message=message))

    def __repr__(self) -> str:
        return f"Client(name={self.name!r})"
