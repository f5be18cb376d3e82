# SPDX-License-Identifier: MIT
"""Version bumping.

Incrementing always discards the previous pre-release and build metadata
unless new values are supplied, so ``1.0.0-alpha`` bumped by ``patch`` is
``1.0.1``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from .semver import parse_version, stringify

BUMP_TYPES = ("major", "minor", "patch")


def increment(
    version: str,
    bump: str,
    prerelease: Optional[str] = None,
    build: Optional[str] = None,
) -> str:
    """Return the next version for a bump class.

    Args:
        version: Version string to increment
        bump: One of "major", "minor" or "patch"
        prerelease: Replacement pre-release identifier, if any
        build: Replacement build metadata, if any

    Returns:
        The incremented version string

    Raises:
        ParseError: If version is invalid, or the supplied pre-release or
            build metadata would produce an invalid version
        ValueError: If bump is not a known bump class

    Examples:
        >>> increment("1.2.3", "major")
        '2.0.0'
        >>> increment("1.2.3", "minor")
        '1.3.0'
        >>> increment("1.2.3", "patch", "rc")
        '1.2.4-rc'
    """
    if bump not in BUMP_TYPES:
        raise ValueError(f"Unknown bump type {bump!r}, expected one of: {', '.join(BUMP_TYPES)}")

    current = parse_version(version)

    if bump == "major":
        bumped = replace(current, major=current.major + 1, minor=0, patch=0)
    elif bump == "minor":
        bumped = replace(current, minor=current.minor + 1, patch=0)
    else:
        bumped = replace(current, patch=current.patch + 1)

    bumped = replace(
        bumped,
        prerelease=(prerelease,) if prerelease else None,
        build=build or None,
    )

    result = stringify(bumped)
    if prerelease or build:
        # Supplied fragments must still form a valid version
        parse_version(result)
    return result
