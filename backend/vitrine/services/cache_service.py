import logging
from datetime import datetime

import redis.asyncio as redis
from pydantic import TypeAdapter, ValidationError

from vitrine.analytics.events import ensure_utc
from vitrine.core.redis import safe_redis_get, safe_redis_incr, safe_redis_setex
from vitrine.schemas.analytics import AnalyticsSummary, DailyVisits

logger = logging.getLogger(__name__)

GENERATION_KEY = "analytics:generation"

_daily_visits_adapter = TypeAdapter(list[DailyVisits])


class SummaryCache:
    """Redis cache for computed analytics results.

    Every key embeds the current generation; ``invalidate`` bumps it after a
    visit is recorded so all earlier entries become unreachable and expire on
    their own TTL. Redis failures degrade to cache misses.

    A request resolves its key once, before reading the store, and writes back
    under that same key. A result computed while a visit was being recorded is
    then stored under the old generation, where no later lookup can find it.
    """

    def __init__(self, client: redis.Redis, ttl_seconds: int):
        self.client = client
        self.ttl_seconds = ttl_seconds

    @property
    def enabled(self) -> bool:
        return self.ttl_seconds > 0

    async def _generation(self) -> str:
        return await safe_redis_get(GENERATION_KEY, client=self.client) or "0"

    async def _get(self, key: str) -> str | None:
        if not self.enabled:
            return None
        return await safe_redis_get(key, client=self.client)

    async def _set(self, key: str, payload: str) -> None:
        if self.enabled:
            await safe_redis_setex(key, self.ttl_seconds, payload, client=self.client)

    async def summary_key(self, days: int) -> str:
        return f"analytics:summary:{await self._generation()}:{days}"

    async def visits_key(self, start: datetime, end: datetime) -> str:
        return (
            f"analytics:visits:{await self._generation()}:"
            f"{ensure_utc(start).isoformat()}:{ensure_utc(end).isoformat()}"
        )

    async def get_summary(self, key: str) -> AnalyticsSummary | None:
        raw = await self._get(key)
        if raw is None:
            return None
        try:
            return AnalyticsSummary.model_validate_json(raw)
        except ValidationError:
            logger.warning("Discarding malformed cached summary at %s", key)
            return None

    async def set_summary(self, key: str, summary: AnalyticsSummary) -> None:
        await self._set(key, summary.model_dump_json())

    async def get_visits(self, key: str) -> list[DailyVisits] | None:
        raw = await self._get(key)
        if raw is None:
            return None
        try:
            return _daily_visits_adapter.validate_json(raw)
        except ValidationError:
            logger.warning("Discarding malformed cached visits at %s", key)
            return None

    async def set_visits(self, key: str, visits: list[DailyVisits]) -> None:
        await self._set(key, _daily_visits_adapter.dump_json(visits).decode())

    async def invalidate(self) -> None:
        """Orphan every cached result by advancing the generation."""
        if await safe_redis_incr(GENERATION_KEY, client=self.client) is None:
            logger.warning("Analytics cache invalidation failed; entries expire after TTL")
