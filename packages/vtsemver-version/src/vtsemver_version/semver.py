# SPDX-License-Identifier: MIT
"""Strict semantic version parsing and serialization.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +001
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

INVALID_VERSION_MESSAGE = "Invalid version string"


class ParseError(Exception):
    """Raised when a version string does not match the expected grammar.

    Attributes:
        value: The rejected input
        message: Human-readable description of the failure
    """

    def __init__(self, value: object, message: str = INVALID_VERSION_MESSAGE):
        self.value = value
        self.message = message
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifiers (e.g. ("alpha", "1"))
        build: Optional build metadata, kept verbatim (e.g. "build.123")
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[tuple[str, ...]] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        return stringify(self)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build]). Surrounding
            whitespace is ignored.

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=None)

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease=('rc', '1'), build='build.456')
    """
    if not isinstance(version_string, str):
        raise ParseError(version_string)

    match = SEMVER_PATTERN.match(version_string.strip())
    if not match:
        raise ParseError(version_string)

    prerelease = match.group("prerelease")
    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=tuple(prerelease.split(".")) if prerelease else None,
        build=match.group("buildmetadata"),
    )


def stringify(version: Version) -> str:
    """Render a Version back to its canonical string form.

    Examples:
        >>> stringify(Version(1, 2, 3, ("alpha", "1"), "build"))
        '1.2.3-alpha.1+build'
    """
    text = f"{version.major}.{version.minor}.{version.patch}"
    if version.prerelease:
        text += "-" + ".".join(version.prerelease)
    if version.build:
        text += f"+{version.build}"
    return text


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Never raises; non-string input is simply invalid.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True
