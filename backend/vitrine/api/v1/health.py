import logging

import redis.asyncio as redis
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from vitrine.api.deps import get_event_store
from vitrine.core.exceptions import ServiceUnavailableError
from vitrine.core.redis import get_redis_dep, safe_redis_ping
from vitrine.schemas.common import MessageResponse, ReadinessResponse
from vitrine.services.event_service import SqlEventStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=MessageResponse)
async def health_check():
    """Basic health check endpoint."""
    return {"message": "healthy"}


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    store: SqlEventStore = Depends(get_event_store),
    client: redis.Redis = Depends(get_redis_dep),
):
    """Readiness check - the event store must answer a count query.

    The result cache is optional, so an unreachable Redis is reported but does
    not fail readiness.
    """
    try:
        visits = await store.count()
    except SQLAlchemyError:
        logger.error("Readiness check failed: event store unavailable")
        raise ServiceUnavailableError(detail="Service not ready") from None

    cache = "ok" if await safe_redis_ping(client=client) else "unavailable"
    if cache != "ok":
        logger.warning("Readiness check: analytics cache unavailable, serving uncached")
    return ReadinessResponse(message="ready", visits=visits, cache=cache)
