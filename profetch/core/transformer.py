"""Transformation from wire payload to client profile."""

from profetch.models.profile import Profile, ProfileResult


def transform_profile(result: ProfileResult) -> Profile:
    """
    Transform a decoded API payload into a Profile.

    Args:
        result: ProfileResult decoded from the response body

    Returns:
        Immutable Profile
    """
    return Profile.from_result(result)
