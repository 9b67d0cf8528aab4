import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.api.deps import get_summary_cache, get_visit_service
from vitrine.db.session import get_db
from vitrine.schemas.visit import SiteVisitIn, SiteVisitResponse
from vitrine.services.cache_service import SummaryCache
from vitrine.services.event_service import VisitService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=SiteVisitResponse, status_code=status.HTTP_201_CREATED)
async def create_site_visit(
    data: SiteVisitIn,
    service: VisitService = Depends(get_visit_service),
    db: AsyncSession = Depends(get_db),
    cache: SummaryCache = Depends(get_summary_cache),
):
    """Record a page visit. The timestamp is assigned by the server."""
    visit = await service.create_site_visit(
        path=data.path,
        session_duration=data.session_duration,
        device_type=data.device_type,
    )
    # Cache generation moves only once the visit is committed
    await db.commit()
    await cache.invalidate()
    return visit
