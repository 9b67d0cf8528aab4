from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base HTTP error raised by services and routes."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail)


class ServiceUnavailableError(AppException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Service unavailable"


class InvalidWindowError(ValueError):
    """Raised when a lookback window is malformed (non-integer or < 1 day)."""
