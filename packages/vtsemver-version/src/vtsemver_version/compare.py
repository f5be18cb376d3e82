# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence rules.

Numeric pre-release identifiers sort before alphanumeric ones, alphanumeric
identifiers sort by code point, and a release sorts after all of its
pre-releases. Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Union

from .semver import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    if isinstance(version, Version):
        return version
    # parse_version rejects non-string input with ParseError
    return parse_version(version)


def _compare_identifiers(a: str, b: str) -> int:
    is_num1 = a.isdigit()
    is_num2 = b.isdigit()

    if is_num1 and is_num2:
        n1, n2 = int(a), int(b)
        if n1 != n2:
            return -1 if n1 < n2 else 1
        return 0
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return -1
    if is_num2:
        return 1
    if a != b:
        return -1 if a < b else 1
    return 0


def _compare_prerelease(
    pre1: tuple[str, ...] | None, pre2: tuple[str, ...] | None
) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        result = _compare_identifiers(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-beta")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Releases become (1,) to sort after any (0, ...) pre-release key
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease:
            if part.isdigit():
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def satisfies(version: Union[str, Version], version_range: Union[str, Version]) -> bool:
    """Check whether a version matches an exact MAJOR.MINOR.PATCH range.

    Only exact versions are understood; operator syntax such as ``^1.2.3`` or
    ``~1.2`` is rejected as an invalid version. Pre-release and build
    metadata are not considered.

    Raises:
        ParseError: If either argument is not a valid semantic version

    Examples:
        >>> satisfies("1.2.3", "1.2.3")
        True
        >>> satisfies("1.2.3-rc.1", "1.2.3")
        True
        >>> satisfies("1.2.3", "1.2.4")
        False
    """
    v = _coerce(version)
    target = _coerce(version_range)
    return (v.major, v.minor, v.patch) == (target.major, target.minor, target.patch)
