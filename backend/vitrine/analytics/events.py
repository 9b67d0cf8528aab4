from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DeviceType(str, Enum):
    """Device categories counted by the device breakdown."""

    DESKTOP = "desktop"
    MOBILE = "mobile"
    TABLET = "tablet"


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class VisitEvent(BaseModel):
    """A single page view. Immutable once recorded."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int | None = None
    path: str = Field(..., min_length=1)
    timestamp: datetime
    session_duration: int | None = Field(None, ge=0)
    device_type: str | None = None

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored as UTC.
        return ensure_utc(v)
