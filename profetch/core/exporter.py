"""Export utilities for fetched profiles."""

from pathlib import Path

from profetch.models.profile import Profile


def to_json(profile: Profile, indent: int = 2) -> str:
    """
    Convert Profile to JSON string.

    Args:
        profile: Profile to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return profile.model_dump_json(indent=indent)


def to_dict(profile: Profile) -> dict:
    """Convert Profile to a JSON-compatible dictionary."""
    return profile.model_dump(mode="json")


def save_json(
    profile: Profile,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save Profile to JSON file.

    Args:
        profile: Profile to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(profile, indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> Profile:
    """Load Profile from JSON file."""
    path = Path(filepath)
    return Profile.model_validate_json(path.read_text(encoding="utf-8"))
