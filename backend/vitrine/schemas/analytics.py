import datetime as dt

from pydantic import BaseModel

from vitrine.schemas.common import CamelModel


class DeviceBreakdown(BaseModel):
    """Visit counts per recognised device category."""

    desktop: int = 0
    mobile: int = 0
    tablet: int = 0


class PopularPage(BaseModel):
    """A path ranked by all-time visit count."""

    path: str
    visits: int


class DailyVisits(BaseModel):
    """Visit count for a single UTC calendar day."""

    date: dt.date
    visits: int


class AnalyticsSummary(CamelModel):
    """Composite analytics report for an admin dashboard."""

    total_visits: int
    average_session_duration: int
    device_breakdown: DeviceBreakdown
    popular_pages: list[PopularPage]
    visits_by_day: list[DailyVisits]


class PopularPagesResponse(BaseModel):
    """Popular pages response."""

    data: list[PopularPage]


class VisitsByDayResponse(BaseModel):
    """Visits-by-day response for an explicit range."""

    data: list[DailyVisits]


class VisitCountResponse(BaseModel):
    """Visit count, optionally scoped to a single path."""

    path: str | None = None
    visits: int
