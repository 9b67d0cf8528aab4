import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.analytics.events import VisitEvent, ensure_utc
from vitrine.analytics.store import EventStore
from vitrine.analytics.window import utcnow
from vitrine.models.site_visit import SiteVisit

logger = logging.getLogger(__name__)


class SqlEventStore:
    """Event store over the ``site_visits`` table.

    The session is owned by the caller; ``append`` only flushes so the id is
    assigned, committing is left to the request scope.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def append(self, event: VisitEvent) -> int:
        visit = SiteVisit(
            path=event.path,
            timestamp=event.timestamp,
            session_duration=event.session_duration,
            device_type=event.device_type,
        )
        self.db.add(visit)
        await self.db.flush()
        return visit.id

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(SiteVisit))
        return result.scalar_one()

    async def count_where(self, path: str) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(SiteVisit).where(SiteVisit.path == path)
        )
        return result.scalar_one()

    async def select_where(self, start: datetime, end: datetime) -> list[VisitEvent]:
        start, end = ensure_utc(start), ensure_utc(end)
        if start > end:
            return []
        result = await self.db.execute(
            select(SiteVisit)
            .where(SiteVisit.timestamp >= start, SiteVisit.timestamp <= end)
            .order_by(SiteVisit.timestamp, SiteVisit.id)
        )
        return [VisitEvent.model_validate(row) for row in result.scalars().all()]

    async def path_counts(self) -> dict[str, int]:
        # One row per distinct path, in the order each path was first recorded
        result = await self.db.execute(
            select(SiteVisit.path, func.count(SiteVisit.id))
            .group_by(SiteVisit.path)
            .order_by(func.min(SiteVisit.id))
        )
        return {path: visits for path, visits in result.all()}


class VisitService:
    """Service for recording page visits."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    async def create_site_visit(
        self,
        path: str,
        session_duration: int | None = None,
        device_type: str | None = None,
    ) -> VisitEvent:
        """Record a page view stamped with the current UTC instant."""
        event = VisitEvent(
            path=path,
            timestamp=self.clock(),
            session_duration=session_duration,
            device_type=device_type,
        )
        event_id = await self.store.append(event)
        logger.debug("Recorded visit %s to %s", event_id, path)
        return event.model_copy(update={"id": event_id})
