"""Profile data models."""

from pydantic import BaseModel, ConfigDict, StrictStr


class ProfileResult(BaseModel):
    """Wire shape of the profile payload returned by the API."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr
    name: StrictStr
    email: str | None = None
    avatar_url: str | None = None


class Profile(BaseModel):
    """Client-facing user profile."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str | None = None
    avatar_url: str | None = None

    @classmethod
    def from_result(cls, result: ProfileResult) -> "Profile":
        """Build a Profile from a decoded API payload."""
        return cls(
            id=result.id,
            name=result.name.strip(),
            email=result.email,
            avatar_url=result.avatar_url,
        )
