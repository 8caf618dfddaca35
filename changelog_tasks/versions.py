"""Version parsing helpers backed by ``packaging.version``."""

from __future__ import annotations

from packaging.version import InvalidVersion, Version

from changelog_tasks.errors import InvalidVersionError


def try_parse_version(value: str) -> Version | None:
    """Parse a caption as a version.

    Returns:
        The parsed version, or None if the caption is a label such as
        "Unreleased".
    """
    try:
        return Version(value)
    except InvalidVersion:
        return None


def parse_version(value: str | Version) -> Version:
    """Parse a version that the caller requires to be valid.

    Raises:
        InvalidVersionError: If the value is not a version.
    """
    if isinstance(value, Version):
        return value
    version = try_parse_version(value)
    if version is None:
        raise InvalidVersionError(value)
    return version


def is_newer(tag: str | Version, last: str | Version) -> bool:
    """Return True if ``tag`` sorts strictly after ``last``."""
    return parse_version(tag) > parse_version(last)
