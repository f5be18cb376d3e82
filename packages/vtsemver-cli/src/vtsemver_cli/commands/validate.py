# SPDX-License-Identifier: MIT
"""Validate a semantic or public version string."""

from __future__ import annotations

import logging
from typing import Optional

import click

from vtsemver_version import is_valid_semver

from ..main import Context, echo_error, echo_failure, echo_success, pass_context

logger = logging.getLogger(__name__)


@click.command()
@click.argument("version", required=False)
@pass_context
def validate(ctx: Context, version: Optional[str]) -> None:
    """Validate a semantic version string.

    Internal versions are checked against SemVer 2.0.0 first; anything else
    is checked as a public version whose theme must be approved by the
    release registry.

    \b
    Examples:
        semver validate 1.0.0
        semver validate 2.1.0-beta.1
        semver validate Aurora-1.0
    """
    if not version:
        echo_error("Version argument is required")
        raise SystemExit(1)

    if is_valid_semver(version):
        echo_success(f"✓ Valid semantic version: {version}")
        return

    scheme = ctx.scheme()
    logger.debug("Not a semantic version, trying themes: %s", ", ".join(scheme.approved_themes))

    if scheme.is_valid(version):
        echo_success(f"✓ Valid public version: {version}")
        return

    echo_failure(f"✗ Invalid version: {version}")
    raise SystemExit(1)
