from datetime import datetime

from pydantic import ConfigDict, Field

from vitrine.schemas.common import CamelModel


class SiteVisitIn(CamelModel):
    """Schema for recording a single page visit."""

    path: str = Field(..., min_length=1, max_length=255)
    session_duration: int | None = Field(None, ge=0)
    device_type: str | None = Field(None, max_length=32)


class SiteVisitResponse(CamelModel):
    """Schema for a recorded page visit."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    path: str
    timestamp: datetime
    session_duration: int | None
    device_type: str | None
