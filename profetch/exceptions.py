"""Custom exception hierarchy for profetch."""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of ways a profile fetch can fail."""
    TRANSPORT = "transport"
    INVALID_RESPONSE = "invalid_response"
    MISSING_DATA = "missing_data"
    DECODING_FAILED = "decoding_failed"
    INVALID_REQUEST = "invalid_request"
    CANCELLED = "cancelled"
    UNEXPECTED = "unexpected"


class ProfetchError(Exception):
    """Base exception for all profetch errors."""


class ConfigError(ProfetchError):
    """Invalid configuration."""


class ProfileFetchError(ProfetchError):
    """Base for failures raised by the fetch pipeline itself."""

    kind: ErrorKind


class InvalidRequestError(ProfileFetchError):
    """Request could not be built, e.g. a token that is not a valid header value."""

    kind = ErrorKind.INVALID_REQUEST


class InvalidResponseError(ProfileFetchError):
    """Response absent, not HTTP, or status outside 200-299."""

    kind = ErrorKind.INVALID_RESPONSE

    def __init__(self, message: str = "Invalid response", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MissingDataError(ProfileFetchError):
    """Successful response carried no body."""

    kind = ErrorKind.MISSING_DATA


class DecodingFailedError(ProfileFetchError):
    """Body did not match the expected profile schema."""

    kind = ErrorKind.DECODING_FAILED
