"""Errors raised by the library and the error event."""

from __future__ import annotations

from datetime import datetime
from typing import NoReturn

__all__ = [
    "NoScreenError",
    "NoCharsetError",
    "EventQueueFullError",
    "EventError",
    "new_console_screen",
]


class NoScreenError(Exception):
    """No suitable screen, console or terminal device is available."""

    def __init__(self, message: str = "no suitable screen available") -> None:
        super().__init__(message)


class NoCharsetError(Exception):
    """The locale's character set has no registered encoding."""

    def __init__(self, message: str = "character set not supported") -> None:
        super().__init__(message)


class EventQueueFullError(Exception):
    """The event queue cannot accept more events."""

    def __init__(self, message: str = "event queue full") -> None:
        super().__init__(message)


class EventError(Exception):
    """An event that carries an error payload."""

    def __init__(self, err: BaseException) -> None:
        super().__init__(err)
        self.err = err
        self._when = datetime.now()

    def when(self) -> datetime:
        """The time the event was created."""
        return self._when

    def __str__(self) -> str:
        return str(self.err)


def new_console_screen() -> NoReturn:
    """Open a console screen; no console screen is supported here."""
    raise NoScreenError()