# taxi_patterns/core/notifications/subject.py
"""
Субъекты наблюдения.
Заказ рассылает изменения статуса всем подключённым наблюдателям.
"""

from __future__ import annotations

from taxi_patterns.common.localization import get_text
from taxi_patterns.common.logger import log_debug
from taxi_patterns.core.notifications.observers import Observer


class Subject:
    """
    Базовый класс наблюдаемого объекта.

    Хранит наблюдателей в порядке подключения. Время жизни наблюдателей
    субъект не контролирует: он только держит регистрацию.
    """

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        """Подключённые наблюдатели в порядке подключения."""
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        """
        Подключает наблюдателя в конец списка.
        Повторное подключение не проверяется: наблюдатель получит уведомление дважды.
        """
        self._observers.append(observer)
        log_debug(f"Наблюдатель подключён: {observer!r}")

    def detach(self, observer: Observer) -> None:
        """
        Отключает первое вхождение наблюдателя (сравнение по идентичности).
        Если наблюдатель не подключён, ничего не делает.
        """
        for index, attached in enumerate(self._observers):
            if attached is observer:
                del self._observers[index]
                log_debug(f"Наблюдатель отключён: {observer!r}")
                return

    def notify_observers(self, message: str) -> None:
        """
        Синхронно рассылает сообщение всем наблюдателям в порядке подключения.

        Args:
            message: Текст уведомления
        """
        # Подключения и отключения во время рассылки действуют со следующей рассылки
        observers = tuple(self._observers)
        log_debug(f"Рассылка уведомления {len(observers)} наблюдателям: {message}")
        for observer in observers:
            observer.update(message)


class Order(Subject):
    """Заказ такси, уведомляющий клиентов о смене статуса."""

    def __init__(self, status: str, lang: str | None = None) -> None:
        """
        Args:
            status: Начальный статус заказа
            lang: Язык уведомлений (по умолчанию из настроек)
        """
        super().__init__()
        if lang is None:
            from taxi_patterns.config import settings
            lang = settings.domain.DEFAULT_LANGUAGE

        self.status = status
        self.lang = lang

    def set_status(self, status: str) -> None:
        """
        Меняет статус и уведомляет всех наблюдателей.

        Args:
            status: Новый статус заказа
        """
        self.status = status
        self.notify_observers(get_text("ORDER_STATUS_UPDATED", self.lang, status=self.status))
