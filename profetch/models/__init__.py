"""Pydantic models for profetch."""

from profetch.models.profile import Profile, ProfileResult
from profetch.models.result import ProfileOutcome

__all__ = [
    "Profile",
    "ProfileResult",
    "ProfileOutcome",
]
