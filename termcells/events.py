"""Base event types: timestamps, focus changes and interrupts."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable

__all__ = ["Event", "EventHandler", "EventTime", "EventFocus", "EventInterrupt"]


@runtime_checkable
class Event(Protocol):
    """Anything that reports when it happened."""

    def when(self) -> datetime:
        ...


@runtime_checkable
class EventHandler(Protocol):
    """Handles events, returning True when an event was consumed."""

    def handle_event(self, event: Event) -> bool:
        ...


class EventTime:
    """A simple event that records when it occurred."""

    def __init__(self, when: Optional[datetime] = None) -> None:
        self._when = datetime.now() if when is None else when

    def when(self) -> datetime:
        """The time the event occurred."""
        return self._when

    def set_event_time(self, t: datetime) -> None:
        """Set the time the event occurred."""
        self._when = t

    def set_event_now(self) -> None:
        """Set the time the event occurred to now."""
        self.set_event_time(datetime.now())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(when={self._when!r})"


class EventFocus(EventTime):
    """Sent when the terminal window gains or loses focus."""

    def __init__(self, focused: bool) -> None:
        super().__init__()
        self.focused = focused

    def __repr__(self) -> str:
        return f"EventFocus(focused={self.focused!r})"


class EventInterrupt:
    """A generic wakeup event carrying an arbitrary payload."""

    def __init__(self, data: Any = None) -> None:
        self._when = datetime.now()
        self._data = data

    def when(self) -> datetime:
        """The time the event was created."""
        return self._when

    def data(self) -> Any:
        """The payload of the event."""
        return self._data

    def __repr__(self) -> str:
        return f"EventInterrupt(data={self._data!r})"