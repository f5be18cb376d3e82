# SPDX-License-Identifier: MIT
"""Compare two semantic versions."""

from __future__ import annotations

import logging
from typing import Optional

import click

from vtsemver_version import ParseError, compare_versions

from ..main import echo_error, echo_info

logger = logging.getLogger(__name__)

_RELATIONS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("version1", required=False)
@click.argument("version2", required=False)
def compare(version1: Optional[str], version2: Optional[str]) -> None:
    """Compare two semantic versions.

    Prints the relation between the versions using <, > or =. Build
    metadata does not take part in the comparison.

    \b
    Examples:
        semver compare 1.0.0 2.0.0
        semver compare 1.0.0-alpha 1.0.0-beta
    """
    if not version1 or not version2:
        echo_error("Two version arguments are required")
        raise SystemExit(1)

    try:
        result = compare_versions(version1, version2)
    except ParseError as e:
        logger.debug("Cannot compare %r with %r: %s", version1, version2, e)
        echo_error(str(e))
        raise SystemExit(1) from e

    echo_info(f"{version1} {_RELATIONS[result]} {version2}")
