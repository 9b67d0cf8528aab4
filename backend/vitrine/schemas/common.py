from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys, accepting either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReadinessResponse(BaseModel):
    """Readiness report: the event store must answer, the cache may be degraded."""

    message: str
    visits: int
    cache: str
