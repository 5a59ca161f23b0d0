from typing import Optional


class RanchbookError(Exception):
    """Base for failures rendered as ``{message, error}`` envelopes."""

    status_code = 500
    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None):
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)

    def to_payload(self) -> dict:
        payload = {"message": self.message}
        if self.error:
            payload["error"] = self.error
        return payload


class ValidationFailed(RanchbookError):
    status_code = 400
    default_message = "Validation failed"


class Unauthenticated(RanchbookError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(RanchbookError):
    status_code = 403
    default_message = "Insufficient permissions"


class NotFound(RanchbookError):
    status_code = 404
    default_message = "Not found"


class NoDataToExport(RanchbookError):
    status_code = 404
    default_message = "No data to export"


class Conflict(RanchbookError):
    status_code = 409
    default_message = "Conflict"


class MalformedExport(RanchbookError):
    status_code = 500
    default_message = "Export records do not share one shape"


class StorageUnavailable(RanchbookError):
    status_code = 500
    default_message = "Storage is unavailable"


__all__ = [
    "Conflict",
    "Forbidden",
    "MalformedExport",
    "NoDataToExport",
    "NotFound",
    "RanchbookError",
    "StorageUnavailable",
    "Unauthenticated",
    "ValidationFailed",
]
