"""profetch - authenticated user profile client."""

__version__ = "0.1.0"

from profetch.models.profile import Profile, ProfileResult
from profetch.models.result import ProfileOutcome
from profetch.config import FetcherConfig
from profetch.exceptions import (
    ErrorKind,
    ProfetchError,
    ProfileFetchError,
    InvalidResponseError,
    MissingDataError,
    DecodingFailedError,
)
from profetch.core.orchestrator import ProfileFetcher
from profetch.core.exporter import to_json, to_dict, save_json, load_json

__all__ = [
    # Main interface
    "ProfileFetcher",
    "FetcherConfig",
    # Models
    "Profile",
    "ProfileResult",
    "ProfileOutcome",
    # Errors
    "ErrorKind",
    "ProfetchError",
    "ProfileFetchError",
    "InvalidResponseError",
    "MissingDataError",
    "DecodingFailedError",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "load_json",
    "__version__",
]
