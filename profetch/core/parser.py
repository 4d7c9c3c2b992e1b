"""JSON body parsing for profile responses."""

from pydantic import ValidationError

from profetch.exceptions import DecodingFailedError, MissingDataError
from profetch.models.profile import ProfileResult

# Bodies that count as "no data" even on a 2xx response
_EMPTY_BODIES = (b"", b"null")


def validate_body(body: bytes | None) -> bytes:
    """
    Ensure a response body carries something to decode.

    Args:
        body: Raw response bytes

    Returns:
        The same bytes

    Raises:
        MissingDataError: If the body is absent, blank, or JSON ``null``
    """
    if body is None or body.strip() in _EMPTY_BODIES:
        raise MissingDataError("Response body is empty")
    return body


def parse_profile_result(body: bytes) -> ProfileResult:
    """
    Decode a JSON body into a ProfileResult.

    Raises:
        DecodingFailedError: If the body is not JSON or does not match the schema
    """
    try:
        return ProfileResult.model_validate_json(body)
    except ValidationError as e:
        raise DecodingFailedError(f"Profile payload did not match schema ({e.error_count()} errors)") from e
