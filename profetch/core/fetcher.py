"""HTTP fetcher for the profile endpoint."""

import httpx

from profetch import __version__
from profetch.config import FetcherConfig
from profetch.exceptions import InvalidRequestError, InvalidResponseError

DEFAULT_USER_AGENT = f"profetch/{__version__}"

# Characters that would split or truncate a header line
_FORBIDDEN_HEADER_CHARS = frozenset("\r\n\x00")


def _check_header_value(name: str, value: str) -> str:
    """Reject values httpx cannot encode as an ASCII header."""
    if not value.isascii() or _FORBIDDEN_HEADER_CHARS.intersection(value):
        raise InvalidRequestError(f"{name} contains characters not allowed in an HTTP header")
    return value


def build_profile_request(
    client: httpx.AsyncClient,
    token: str,
    config: FetcherConfig,
) -> httpx.Request:
    """
    Build the GET request for the authenticated user's profile.

    Args:
        client: Client the request will be sent with
        token: Bearer token, sent verbatim
        config: FetcherConfig providing the URL and user agent

    Returns:
        Unsent httpx.Request

    Raises:
        InvalidRequestError: If the token or user agent is not a valid header value
    """
    headers = {
        "Authorization": f"Bearer {_check_header_value('Token', token)}",
        "Accept": "application/json",
        "User-Agent": _check_header_value("User agent", config.user_agent or DEFAULT_USER_AGENT),
    }
    return client.build_request("GET", config.profile_url, headers=headers)


def validate_response(response: object) -> httpx.Response:
    """
    Check that a response is an HTTP response with a 2xx status.

    Args:
        response: Whatever the transport produced

    Returns:
        The same response, narrowed to httpx.Response

    Raises:
        InvalidResponseError: If the response is absent, not HTTP, or not 2xx
    """
    if not isinstance(response, httpx.Response):
        raise InvalidResponseError("No HTTP response received")

    status = response.status_code
    if not 200 <= status <= 299:
        raise InvalidResponseError(f"Unexpected HTTP status {status}", status_code=status)

    return response
