"""Fetch outcome wrapper."""

import asyncio
from dataclasses import dataclass

import httpx

from profetch.exceptions import ErrorKind, ProfileFetchError
from profetch.models.profile import Profile


@dataclass(frozen=True)
class ProfileOutcome:
    """
    Success-or-error value delivered to a fetch callback.

    Exactly one of ``profile`` and ``error`` is set.
    """

    profile: Profile | None = None
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if (self.profile is None) == (self.error is None):
            raise ValueError("ProfileOutcome needs exactly one of profile or error")

    @classmethod
    def ok(cls, profile: Profile) -> "ProfileOutcome":
        return cls(profile=profile)

    @classmethod
    def failed(cls, error: BaseException) -> "ProfileOutcome":
        return cls(error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """
        Error kind, or None on success.

        Only httpx request errors count as transport failures; anything
        else outside the pipeline taxonomy is UNEXPECTED.
        """
        if self.error is None:
            return None
        if isinstance(self.error, ProfileFetchError):
            return self.error.kind
        if isinstance(self.error, httpx.RequestError):
            return ErrorKind.TRANSPORT
        if isinstance(self.error, asyncio.CancelledError):
            return ErrorKind.CANCELLED
        return ErrorKind.UNEXPECTED

    def unwrap(self) -> Profile:
        """Return the profile or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.profile
