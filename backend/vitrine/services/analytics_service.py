import logging
from collections.abc import Callable
from datetime import datetime

from vitrine.analytics.aggregators import (
    POPULAR_PAGES_LIMIT,
    average_session_duration,
    device_breakdown,
    rank_pages,
    total_visits,
    visits_by_day,
)
from vitrine.analytics.store import EventStore
from vitrine.analytics.window import (
    DEFAULT_LOOKBACK_DAYS,
    TimeWindow,
    utcnow,
    validate_days,
)
from vitrine.schemas.analytics import AnalyticsSummary, DailyVisits, PopularPage

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Service for analytics queries over an event store."""

    def __init__(
        self,
        store: EventStore,
        clock: Callable[[], datetime] = utcnow,
        default_days: int = DEFAULT_LOOKBACK_DAYS,
        popular_limit: int = POPULAR_PAGES_LIMIT,
    ):
        self.store = store
        self.clock = clock
        self.default_days = validate_days(default_days)
        self.popular_limit = popular_limit

    async def get_analytics_summary(self, days: int | None = None) -> AnalyticsSummary:
        """Compose the dashboard summary for the last ``days`` days.

        Popular pages are ranked over the whole history; every other facet is
        scoped to ``[now - days, now]``. The window is read once and shared by
        the window-scoped reducers. The ranking reads per-path counts, so its
        cost follows the number of distinct paths rather than the visit
        volume. Store errors propagate and no partial summary is returned.
        """
        days = self.default_days if days is None else validate_days(days)
        window = TimeWindow.lookback(days, now=self.clock())

        events = await self.store.select_where(window.start, window.end)
        page_counts = await self.store.path_counts()

        summary = AnalyticsSummary(
            total_visits=total_visits(events),
            average_session_duration=average_session_duration(events),
            device_breakdown=device_breakdown(events),
            popular_pages=rank_pages(page_counts, limit=self.popular_limit),
            visits_by_day=visits_by_day(events, window),
        )
        logger.debug(
            "Computed summary for %d days: %d visits, %d distinct paths",
            days,
            summary.total_visits,
            len(page_counts),
        )
        return summary

    async def get_popular_pages(self) -> list[PopularPage]:
        """Get the all-time most visited paths."""
        return rank_pages(await self.store.path_counts(), limit=self.popular_limit)

    async def get_visits_by_time_range(self, start: datetime, end: datetime) -> list[DailyVisits]:
        """Get daily visit counts in ``[start, end]``. An inverted range is empty."""
        window = TimeWindow(start=start, end=end)
        if window.is_empty:
            return []
        events = await self.store.select_where(window.start, window.end)
        return visits_by_day(events, window)

    async def get_site_visits_count(self) -> int:
        return await self.store.count()

    async def get_site_visits_by_page(self, path: str) -> int:
        return await self.store.count_where(path)
