"""Pipeline orchestrator - coordinates request, validation, decoding."""

import asyncio
from typing import Callable

import httpx
import structlog

from profetch.config import FetcherConfig
from profetch.logging import get_logger, configure_logging
from profetch.core.fetcher import build_profile_request, validate_response
from profetch.core.parser import validate_body, parse_profile_result
from profetch.core.transformer import transform_profile
from profetch.models.profile import Profile
from profetch.models.result import ProfileOutcome
from profetch.exceptions import (
    DecodingFailedError,
    InvalidRequestError,
    InvalidResponseError,
    MissingDataError,
    ProfileFetchError,
)

ProfileCallback = Callable[[ProfileOutcome], None]


class ProfileFetcher:
    """
    Fetches the authenticated user's profile.

    The HTTP client can be injected; otherwise one is created on entering
    the async context manager and closed on exit.

    Example:
        async with ProfileFetcher() as fetcher:
            profile = await fetcher.fetch(token)
            print(profile.name)
    """

    def __init__(
        self,
        config: FetcherConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize fetcher with optional configuration and client.

        Args:
            config: FetcherConfig instance, uses defaults if None
            client: HTTP client to use; the caller keeps ownership
        """
        self.config = config or FetcherConfig()
        self._client = client
        self._owns_client = False
        self._tasks: set[asyncio.Task] = set()
        self._log = get_logger("fetcher")

    async def __aenter__(self) -> "ProfileFetcher":
        """Async context manager entry - initialize resources."""
        configure_logging(self.config)
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout_seconds)
            self._owns_client = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup resources."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("ProfileFetcher has no HTTP client; use 'async with' or pass one in")
        return self._client

    async def fetch(self, token: str) -> Profile:
        """
        Fetch and decode the profile.

        Args:
            token: Bearer token for the Authorization header

        Returns:
            Decoded Profile

        Raises:
            httpx.RequestError: Transport failure, unmodified
            InvalidRequestError: Token is not a valid header value
            InvalidResponseError: Status outside 200-299
            MissingDataError: Empty body
            DecodingFailedError: Body does not match the schema
        """
        if not structlog.is_configured():
            configure_logging(self.config)

        log = self._log.bind(url=self.config.profile_url)
        try:
            request = build_profile_request(self.client, token, self.config)
        except InvalidRequestError as e:
            log.warning("invalid_request", error=str(e))
            raise

        log.info("fetch_start")

        try:
            response = await self.client.send(request)
        except httpx.RequestError as e:
            log.error("transport_error", error_type=type(e).__name__, error=str(e))
            raise

        try:
            response = validate_response(response)
        except InvalidResponseError as e:
            log.warning("invalid_response", status=e.status_code)
            raise

        try:
            body = validate_body(response.content)
        except MissingDataError:
            log.warning("missing_data", status=response.status_code)
            raise

        try:
            result = parse_profile_result(body)
        except DecodingFailedError as e:
            log.warning("decode_failed", error=str(e.__cause__))
            raise

        profile = transform_profile(result)
        log.info("fetch_complete", profile_id=profile.id)
        return profile

    async def fetch_outcome(self, token: str) -> ProfileOutcome:
        """
        Fetch the profile, returning failures instead of raising them.

        Only transport and pipeline errors are captured; anything else
        propagates.
        """
        try:
            return ProfileOutcome.ok(await self.fetch(token))
        except (httpx.RequestError, ProfileFetchError) as e:
            return ProfileOutcome.failed(e)

    def fetch_profile(self, token: str, on_complete: ProfileCallback) -> asyncio.Task:
        """
        Start a profile fetch and report the result through a callback.

        Must be called from a running event loop. ``on_complete`` is invoked
        exactly once, on that loop's thread, after the request finishes.
        The fetcher holds a reference to the task until it is done.

        Args:
            token: Bearer token for the Authorization header
            on_complete: Receives the ProfileOutcome

        Returns:
            The scheduled task, already running

        Raises:
            RuntimeError: If the fetcher has no HTTP client
        """
        self.client  # fail now rather than inside the task
        loop = asyncio.get_running_loop()
        task = loop.create_task(self.fetch_outcome(token))

        def _deliver(done: asyncio.Task) -> None:
            if done.cancelled():
                outcome = ProfileOutcome.failed(asyncio.CancelledError())
            elif done.exception() is not None:
                outcome = ProfileOutcome.failed(done.exception())
            else:
                outcome = done.result()
            on_complete(outcome)

        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(_deliver)
        return task
