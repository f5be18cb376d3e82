# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and bumping for VTubersTV releases.

This package implements strict SemVer 2.0.0 parsing and precedence, a simple
version incrementer, and the themed public version names (``Aurora-1.0``)
used for announced releases.

Example:
    >>> from vtsemver_version import (
    ...     parse_version, compare_versions, increment, is_valid_public_version
    ... )
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> compare_versions("1.0.0-alpha", "1.0.0")
    -1
    >>>
    >>> increment("1.2.3", "patch", "rc")
    '1.2.4-rc'
    >>>
    >>> is_valid_public_version("Aurora-1.0")
    True
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    ParseError,
    parse_version,
    stringify,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    satisfies,
)
from .increment import (
    increment,
    BUMP_TYPES,
)
from .registry import (
    APPROVED_THEMES,
    DEFAULT_REGISTRY,
    RELEASE_STATUSES,
    VERSION_HISTORY,
    PublicVersionData,
    RegistryError,
    ReleaseRegistry,
    ReleaseTheme,
    load_registry,
)
from .public import (
    DEFAULT_SCHEME,
    PUBLIC_VERSION_PATTERN,
    PublicVersion,
    PublicVersionScheme,
    VersionMapping,
    create_version_mapping,
    is_valid_public_version,
    parse_public_version,
    stringify_public_version,
)

__all__ = [
    # Version parsing
    "Version",
    "ParseError",
    "parse_version",
    "stringify",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    "satisfies",
    # Version bumping
    "increment",
    "BUMP_TYPES",
    # Release registry
    "APPROVED_THEMES",
    "DEFAULT_REGISTRY",
    "RELEASE_STATUSES",
    "VERSION_HISTORY",
    "PublicVersionData",
    "RegistryError",
    "ReleaseRegistry",
    "ReleaseTheme",
    "load_registry",
    # Public versions
    "DEFAULT_SCHEME",
    "PUBLIC_VERSION_PATTERN",
    "PublicVersion",
    "PublicVersionScheme",
    "VersionMapping",
    "create_version_mapping",
    "is_valid_public_version",
    "parse_public_version",
    "stringify_public_version",
]
