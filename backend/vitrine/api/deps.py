import redis.asyncio as redis
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.core.config import settings
from vitrine.core.redis import get_redis_dep
from vitrine.db.session import get_db
from vitrine.services.analytics_service import AnalyticsService
from vitrine.services.cache_service import SummaryCache
from vitrine.services.event_service import SqlEventStore, VisitService


async def get_event_store(db: AsyncSession = Depends(get_db)) -> SqlEventStore:
    """Dependency providing a request-scoped SQL event store."""
    return SqlEventStore(db)


async def get_analytics_service(
    store: SqlEventStore = Depends(get_event_store),
) -> AnalyticsService:
    return AnalyticsService(
        store,
        default_days=settings.ANALYTICS_DEFAULT_DAYS,
        popular_limit=settings.POPULAR_PAGES_LIMIT,
    )


async def get_visit_service(store: SqlEventStore = Depends(get_event_store)) -> VisitService:
    return VisitService(store)


async def get_summary_cache(client: redis.Redis = Depends(get_redis_dep)) -> SummaryCache:
    return SummaryCache(client, ttl_seconds=settings.ANALYTICS_CACHE_TTL_SECONDS)
