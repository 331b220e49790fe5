# taxi_patterns/core/orders/states.py
"""
Жизненный цикл заказа (паттерн State).

Состояния образуют линейную цепочку:
CREATED -> CONFIRMED -> ON_THE_WAY -> FINISHED -> FINISHED.
"""

from __future__ import annotations

from enum import Enum

from taxi_patterns.common.localization import get_text
from taxi_patterns.common.logger import log_debug


class OrderState(str, Enum):
    """Состояния заказа."""
    CREATED = "created"
    CONFIRMED = "confirmed"
    ON_THE_WAY = "on_the_way"
    FINISHED = "finished"

    def __str__(self) -> str:
        return self.value

    @property
    def next_state(self) -> OrderState:
        """Состояние, в которое заказ переходит после обработки."""
        return _TRANSITIONS[self]

    @property
    def message_key(self) -> str:
        """Ключ локализации сообщения об обработке состояния."""
        return f"STATE_{self.name}"

    @property
    def is_terminal(self) -> bool:
        return self.next_state is self

    def handle(self, context: OrderContext) -> None:
        """
        Выводит сообщение состояния и устанавливает следующее состояние в контекст.

        Args:
            context: Контекст заказа
        """
        print(get_text(self.message_key, context.lang))
        context._set_state(self.next_state)


_TRANSITIONS: dict[OrderState, OrderState] = {
    OrderState.CREATED: OrderState.CONFIRMED,
    OrderState.CONFIRMED: OrderState.ON_THE_WAY,
    OrderState.ON_THE_WAY: OrderState.FINISHED,
    OrderState.FINISHED: OrderState.FINISHED,
}


class OrderContext:
    """
    Контекст заказа.
    Хранит ровно одно текущее состояние; менять его можно только через proceed().
    """

    def __init__(self, lang: str | None = None) -> None:
        """
        Args:
            lang: Язык сообщений (по умолчанию из настроек)
        """
        if lang is None:
            from taxi_patterns.config import settings
            lang = settings.domain.DEFAULT_LANGUAGE

        self.lang = lang
        self._state = OrderState.CREATED

    @property
    def state(self) -> OrderState:
        """Текущее состояние."""
        return self._state

    @property
    def is_finished(self) -> bool:
        """Достиг ли заказ конечного состояния."""
        return self._state.is_terminal

    def proceed(self) -> None:
        """Передаёт управление обработчику текущего состояния."""
        self._state.handle(self)

    def _set_state(self, state: OrderState) -> None:
        if state is not self._state:
            log_debug(f"Переход заказа: {self._state} -> {state}")
        self._state = state
