"""Version parsing and bumping utilities.

Versions are strict MAJOR.MINOR.PATCH triples. Anything else is rejected
rather than padded or truncated, so a bump never invents components.
"""

from __future__ import annotations

import semver

from .errors import VersionFormatError


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    Only plain "a.b.c" with non-negative integer components is accepted.
    Prerelease/build metadata is not supported.

    Raises:
        VersionFormatError: If the string is not exactly three
            dot-separated integers.
    """
    parts = str(version_str).split(".")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise VersionFormatError(
            f"Expected MAJOR.MINOR.PATCH, got {version_str!r}"
        )
    major, minor, patch = (int(p) for p in parts)
    return semver.Version(major, minor, patch)


def bump(version_str: str, release: str | None = "") -> str:
    """Bump a version according to the release type.

    The release type is case-insensitive. Unrecognized or empty values
    fall through to a patch bump.

    Examples:
        bump("1.2.3", "major") → "2.0.0"
        bump("1.2.3", "minor") → "1.3.0"
        bump("1.2.3") → "1.2.4"
        bump("1.2.3", "nightly") → "1.2.4"
    """
    version = parse_version(version_str)
    kind = (release or "").lower()
    if kind == "major":
        return str(version.bump_major())
    if kind == "minor":
        return str(version.bump_minor())
    return str(version.bump_patch())
