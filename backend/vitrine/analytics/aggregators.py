"""Pure reducers over sequences of visit events.

Each function produces one facet of the analytics summary and can be fed
synthetic events directly. None of them touch storage.
"""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from vitrine.analytics.events import DeviceType, VisitEvent
from vitrine.analytics.window import TimeWindow, filter_window
from vitrine.schemas.analytics import DailyVisits, DeviceBreakdown, PopularPage

POPULAR_PAGES_LIMIT = 10

_KNOWN_DEVICES = frozenset(device.value for device in DeviceType)


def total_visits(events: Sequence[VisitEvent]) -> int:
    """Number of events in the window."""
    return len(events)


def average_session_duration(events: Sequence[VisitEvent]) -> int:
    """Mean session duration in whole seconds.

    Missing durations count as zero and stay in the denominator. The mean is
    rounded half up, matching a numeric-to-integer cast. Empty input gives 0.
    """
    if not events:
        return 0
    total = sum(event.session_duration or 0 for event in events)
    count = len(events)
    return (2 * total + count) // (2 * count)


def device_breakdown(events: Iterable[VisitEvent]) -> DeviceBreakdown:
    """Count events per known device type; anything else is dropped."""
    counts = Counter(
        event.device_type for event in events if event.device_type in _KNOWN_DEVICES
    )
    return DeviceBreakdown(
        desktop=counts[DeviceType.DESKTOP.value],
        mobile=counts[DeviceType.MOBILE.value],
        tablet=counts[DeviceType.TABLET.value],
    )


def rank_pages(
    counts: Mapping[str, int], limit: int = POPULAR_PAGES_LIMIT
) -> list[PopularPage]:
    """Top ``limit`` paths from per-path counts, descending.

    The sort is stable, so ties keep the mapping's order.
    """
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [PopularPage(path=path, visits=visits) for path, visits in ranked[:limit]]


def popular_pages(
    events: Iterable[VisitEvent], limit: int = POPULAR_PAGES_LIMIT
) -> list[PopularPage]:
    """Rank paths by visit count, descending. Ties keep first-seen order."""
    return rank_pages(Counter(event.path for event in events), limit=limit)


def visits_by_day(events: Iterable[VisitEvent], window: TimeWindow) -> list[DailyVisits]:
    """Bucket events by UTC calendar day within ``window``.

    The series is sparse: days without events are omitted.
    """
    buckets = Counter(event.timestamp.date() for event in filter_window(events, window))
    return [DailyVisits(date=day, visits=buckets[day]) for day in sorted(buckets)]
