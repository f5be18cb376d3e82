# SPDX-License-Identifier: MIT
"""Public version names such as ``Aurora-1.0`` or ``Aurora-1.1-beta``.

A public version is a theme name followed by a two-part ``X.Y`` number and
an optional ``alpha``, ``beta`` or ``rc`` status. Only themes approved by the
release registry are accepted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from .registry import DEFAULT_REGISTRY, ReleaseRegistry
from .semver import ParseError, parse_version

PUBLIC_VERSION_PATTERN = re.compile(
    r"^(?P<theme>[A-Z][a-zA-Z]+)-(?P<version>\d+\.\d+)(?:-(?P<status>alpha|beta|rc))?$",
    re.ASCII,
)

INVALID_PUBLIC_VERSION_MESSAGE = "Invalid public version string"

STABLE = "stable"


@dataclass(frozen=True, slots=True)
class PublicVersion:
    """A parsed public version.

    Attributes:
        theme: Approved theme name
        version: Two-part "X.Y" version number
        status: "alpha", "beta", "rc", or "stable" when no status was given
    """

    theme: str
    version: str
    status: str = STABLE

    def __str__(self) -> str:
        return stringify_public_version(self)


@dataclass(frozen=True, slots=True)
class VersionMapping:
    """Join of an internal version with its public name."""

    internal_version: str
    public_version: str
    release_date: str
    theme: str
    status: str


@dataclass(frozen=True)
class PublicVersionScheme:
    """Public version grammar bound to a set of approved themes.

    Examples:
        >>> scheme = PublicVersionScheme(("Aurora", "Borealis"))
        >>> scheme.parse("Borealis-2.1-rc")
        PublicVersion(theme='Borealis', version='2.1', status='rc')
    """

    approved_themes: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "approved_themes", tuple(self.approved_themes))

    @classmethod
    def from_registry(cls, registry: ReleaseRegistry) -> "PublicVersionScheme":
        return cls(registry.approved_themes)

    def parse(self, version_string: str) -> PublicVersion:
        """Parse a public version string.

        Raises:
            ParseError: If the string does not match the grammar or uses a
                theme that is not approved
        """
        if not isinstance(version_string, str):
            raise ParseError(version_string, INVALID_PUBLIC_VERSION_MESSAGE)

        match = PUBLIC_VERSION_PATTERN.match(version_string.strip())
        if not match:
            raise ParseError(version_string, INVALID_PUBLIC_VERSION_MESSAGE)

        theme = match.group("theme")
        if theme not in self.approved_themes:
            raise ParseError(
                version_string,
                f"Invalid theme name. Must be one of: {', '.join(self.approved_themes)}",
            )

        return PublicVersion(
            theme=theme,
            version=match.group("version"),
            status=match.group("status") or STABLE,
        )

    def is_valid(self, version_string: str) -> bool:
        try:
            self.parse(version_string)
        except ParseError:
            return False
        return True


DEFAULT_SCHEME = PublicVersionScheme.from_registry(DEFAULT_REGISTRY)


def _scheme_for(themes: Optional[Iterable[str] | PublicVersionScheme]) -> PublicVersionScheme:
    if themes is None:
        return DEFAULT_SCHEME
    if isinstance(themes, PublicVersionScheme):
        return themes
    if isinstance(themes, str):
        # A single theme name, not an iterable of characters
        return PublicVersionScheme((themes,))
    return PublicVersionScheme(tuple(themes))


def parse_public_version(
    version_string: str,
    scheme: Optional[Iterable[str] | PublicVersionScheme] = None,
) -> PublicVersion:
    """Parse a public version string such as "Aurora-1.1-beta".

    Args:
        version_string: The public version to parse
        scheme: A PublicVersionScheme, a single theme name, or an iterable
            of approved theme names; defaults to the themes of the builtin
            registry

    Raises:
        ParseError: If the string is malformed or the theme is not approved

    Examples:
        >>> parse_public_version("Aurora-1.0")
        PublicVersion(theme='Aurora', version='1.0', status='stable')
        >>> parse_public_version("Aurora-1.1-beta").status
        'beta'
    """
    return _scheme_for(scheme).parse(version_string)


def stringify_public_version(version: PublicVersion) -> str:
    """Render a PublicVersion, omitting the implied "stable" status.

    Examples:
        >>> stringify_public_version(PublicVersion("Aurora", "1.0"))
        'Aurora-1.0'
        >>> stringify_public_version(PublicVersion("Aurora", "1.1", "beta"))
        'Aurora-1.1-beta'
    """
    text = f"{version.theme}-{version.version}"
    if version.status and version.status != STABLE:
        text += f"-{version.status}"
    return text


def is_valid_public_version(
    version_string: str,
    scheme: Optional[Iterable[str] | PublicVersionScheme] = None,
) -> bool:
    """Check if a string is a valid public version. Never raises."""
    return _scheme_for(scheme).is_valid(version_string)


def create_version_mapping(
    internal_version: str,
    public_version: str,
    release_date: str,
    scheme: Optional[Iterable[str] | PublicVersionScheme] = None,
) -> VersionMapping:
    """Join an internal semantic version with its public name.

    Both strings are validated independently; no registry lookup is made to
    check that they belong together.

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> create_version_mapping("1.1.0-beta.1", "Aurora-1.1-beta", "2024-03-01").status
        'beta'
    """
    parse_version(internal_version)
    public = parse_public_version(public_version, scheme)

    return VersionMapping(
        internal_version=internal_version,
        public_version=public_version,
        release_date=release_date,
        theme=public.theme,
        status=public.status,
    )
