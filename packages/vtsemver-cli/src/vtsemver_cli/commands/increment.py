# SPDX-License-Identifier: MIT
"""Increment a semantic version."""

from __future__ import annotations

import logging
from typing import Optional

import click

from vtsemver_version import BUMP_TYPES, ParseError
from vtsemver_version import increment as increment_version

from ..main import echo_error, echo_info

logger = logging.getLogger(__name__)


@click.command()
@click.argument("version", required=False)
@click.argument("bump", required=False, metavar="(major|minor|patch)")
@click.option("--pre", "prerelease", metavar="ID", help="Pre-release identifier for the new version.")
@click.option("--build", metavar="META", help="Build metadata for the new version.")
def increment(
    version: Optional[str],
    bump: Optional[str],
    prerelease: Optional[str],
    build: Optional[str],
) -> None:
    """Increment a version number.

    Any pre-release or build metadata of the current version is dropped;
    use --pre and --build to set new values.

    \b
    Examples:
        semver increment 1.0.0 major
        semver increment 1.0.0 minor --pre=beta
        semver increment 1.0.0 patch --build=20240301
    """
    if not version or not bump:
        echo_error("Version and increment type (major|minor|patch) are required")
        raise SystemExit(1)

    if bump not in BUMP_TYPES:
        echo_error(f"Increment type must be one of: {', '.join(BUMP_TYPES)}")
        raise SystemExit(1)

    try:
        new_version = increment_version(version, bump, prerelease, build)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1) from e

    logger.debug("Incremented %s (%s) to %s", version, bump, new_version)
    echo_info(new_version)
