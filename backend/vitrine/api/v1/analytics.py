from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request

from vitrine.api.deps import get_analytics_service, get_summary_cache
from vitrine.core.config import settings
from vitrine.core.limiter import limiter
from vitrine.schemas.analytics import (
    AnalyticsSummary,
    PopularPagesResponse,
    VisitCountResponse,
    VisitsByDayResponse,
)
from vitrine.services.analytics_service import AnalyticsService
from vitrine.services.cache_service import SummaryCache

router = APIRouter()


@router.get("/summary", response_model=AnalyticsSummary)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
async def get_analytics_summary(
    request: Request,
    days: int | None = Query(None, description="Lookback window in days (default 30)"),
    service: AnalyticsService = Depends(get_analytics_service),
    cache: SummaryCache = Depends(get_summary_cache),
):
    """Get the dashboard summary for the last ``days`` days."""
    resolved_days = service.default_days if days is None else days
    key = await cache.summary_key(resolved_days)
    cached = await cache.get_summary(key)
    if cached is not None:
        return cached

    summary = await service.get_analytics_summary(resolved_days)
    await cache.set_summary(key, summary)
    return summary


@router.get("/popular-pages", response_model=PopularPagesResponse)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
async def get_popular_pages(
    request: Request,
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Get the all-time most visited pages."""
    return PopularPagesResponse(data=await service.get_popular_pages())


@router.get("/visits", response_model=VisitsByDayResponse)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
async def get_visits_by_time_range(
    request: Request,
    start: datetime = Query(...),
    end: datetime = Query(...),
    service: AnalyticsService = Depends(get_analytics_service),
    cache: SummaryCache = Depends(get_summary_cache),
):
    """Get daily visit counts for an explicit range (inclusive, UTC days)."""
    key = await cache.visits_key(start, end)
    cached = await cache.get_visits(key)
    if cached is not None:
        return VisitsByDayResponse(data=cached)

    data = await service.get_visits_by_time_range(start, end)
    await cache.set_visits(key, data)
    return VisitsByDayResponse(data=data)


@router.get("/visits/count", response_model=VisitCountResponse)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
async def get_site_visits_count(
    request: Request,
    path: str | None = Query(None, min_length=1, max_length=255),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Get the total number of recorded visits, or the count for one path."""
    if path is None:
        return VisitCountResponse(visits=await service.get_site_visits_count())
    return VisitCountResponse(path=path, visits=await service.get_site_visits_by_page(path))
