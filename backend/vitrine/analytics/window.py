"""Time window resolution and selection for window-scoped aggregators."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from vitrine.analytics.events import VisitEvent, ensure_utc
from vitrine.core.exceptions import InvalidWindowError

DEFAULT_LOOKBACK_DAYS = 30


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_days(days: object) -> int:
    """Return ``days`` if it is a usable lookback, else raise InvalidWindowError."""
    # bool is an int subclass; True is not a day count
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidWindowError(f"days must be an integer, got {days!r}")
    if days < 1:
        raise InvalidWindowError(f"days must be at least 1, got {days}")
    return days


@dataclass(frozen=True)
class TimeWindow:
    """Inclusive ``[start, end]`` range in UTC. An inverted range selects nothing."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", ensure_utc(self.start))
        object.__setattr__(self, "end", ensure_utc(self.end))

    @classmethod
    def lookback(cls, days: int, now: datetime | None = None) -> "TimeWindow":
        """Resolve ``days`` to ``[now - days, now]``."""
        days = validate_days(days)
        end = ensure_utc(now) if now is not None else utcnow()
        return cls(start=end - timedelta(days=days), end=end)

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    def contains(self, ts: datetime) -> bool:
        return self.start <= ensure_utc(ts) <= self.end


def filter_window(events: Iterable[VisitEvent], window: TimeWindow) -> list[VisitEvent]:
    """Select the events whose timestamp falls inside ``window``."""
    if window.is_empty:
        return []
    return [event for event in events if window.contains(event.timestamp)]
