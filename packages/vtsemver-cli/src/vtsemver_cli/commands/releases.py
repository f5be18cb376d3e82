# SPDX-License-Identifier: MIT
"""List releases from the release registry."""

from __future__ import annotations

from typing import Optional

import click

from vtsemver_version import RELEASE_STATUSES, PublicVersionData

from ..main import Context, echo_error, echo_info, pass_context


def _format_entry(entry: PublicVersionData) -> str:
    line = f"{entry.public_version}  {entry.internal_version}  {entry.release_date}  {entry.status}"
    if entry.deprecation_date:
        line += f" (until {entry.deprecation_date})"
    return line


@click.command()
@click.option(
    "--status",
    type=click.Choice(RELEASE_STATUSES),
    help="Only list releases with this status.",
)
@click.option(
    "--latest",
    is_flag=True,
    help="Only show the most recent stable release.",
)
@pass_context
def releases(ctx: Context, status: Optional[str], latest: bool) -> None:
    """List known releases and their public versions.

    \b
    Examples:
        semver releases
        semver releases --status stable
        semver releases --latest
    """
    registry = ctx.registry()

    if latest:
        entry = registry.get_latest_stable_version()
        if entry is None:
            echo_error("No stable release found")
            raise SystemExit(1)
        echo_info(_format_entry(entry))
        return

    entries = registry.get_versions_by_status(status) if status else list(registry.entries)
    if not entries:
        echo_error("No releases found")
        raise SystemExit(1)

    for entry in entries:
        echo_info(_format_entry(entry))
