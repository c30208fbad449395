from __future__ import annotations
from types import MappingProxyType

UNKNOWN_ERROR = "UNKNOWN_ERROR"

# Upstream status -> explanation
ERROR_REASONS = MappingProxyType(
    {
        "INVALID_REQUEST": "The provided request was invalid",
        "MAX_ELEMENTS_EXCEEDED": "Exceeded max number of origins or destinations",
        "OVER_QUERY_LIMIT": "Too many requests have been received from your application",
        "REQUEST_DENIED": "The service denied use of the distance calculation for your application",
        UNKNOWN_ERROR: "An unknown error occurred, it may succeed if you try again",
    }
)


class AppError(Exception):
    """Base app error."""


class ConfigurationError(AppError):
    """Raised when the client is constructed with an unusable configuration."""


class DistanceMatrixRequestError(AppError):
    """Raised when a distance-matrix request fails."""

    def __init__(self, reason: str = UNKNOWN_ERROR):
        known = isinstance(reason, str) and reason in ERROR_REASONS
        self.reason = reason if known else UNKNOWN_ERROR
        super().__init__(ERROR_REASONS[self.reason])

    @property
    def message(self) -> str:
        return ERROR_REASONS[self.reason]


class TransportError(DistanceMatrixRequestError):
    """Network failure, non-200 answer, or a body we could not use."""

    def __init__(self):
        super().__init__(UNKNOWN_ERROR)


class ApiError(DistanceMatrixRequestError):
    """The service answered with a non-OK status."""

    def __init__(self, status: object):
        self.status = status
        super().__init__(status or UNKNOWN_ERROR)
