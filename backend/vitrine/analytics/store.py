"""Event store contract and an in-memory implementation."""

from collections import Counter
from datetime import datetime
from typing import Protocol

from vitrine.analytics.events import VisitEvent
from vitrine.analytics.window import TimeWindow, filter_window


class EventStore(Protocol):
    """Append-only log of visit events.

    Errors raised by an implementation (connection loss, timeouts) are
    propagated to the caller unchanged.
    """

    async def append(self, event: VisitEvent) -> int: ...

    async def count(self) -> int: ...

    async def count_where(self, path: str) -> int: ...

    async def select_where(self, start: datetime, end: datetime) -> list[VisitEvent]: ...

    async def path_counts(self) -> dict[str, int]:
        """Visits per path over the whole history, paths in first-seen order."""
        ...


class InMemoryEventStore:
    """List-backed event store. Single writer, any number of readers."""

    def __init__(self, events: list[VisitEvent] | None = None):
        self._events: list[VisitEvent] = []
        for event in events or []:
            self._store(event)

    def _store(self, event: VisitEvent) -> int:
        event_id = len(self._events) + 1
        self._events.append(event.model_copy(update={"id": event_id}))
        return event_id

    async def append(self, event: VisitEvent) -> int:
        return self._store(event)

    async def count(self) -> int:
        return len(self._events)

    async def count_where(self, path: str) -> int:
        return sum(1 for event in self._events if event.path == path)

    async def select_where(self, start: datetime, end: datetime) -> list[VisitEvent]:
        return filter_window(self._events, TimeWindow(start=start, end=end))

    async def path_counts(self) -> dict[str, int]:
        return dict(Counter(event.path for event in self._events))
