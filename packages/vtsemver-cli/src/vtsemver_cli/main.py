# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from vtsemver_version import PublicVersionScheme, RegistryError, ReleaseRegistry

from . import __version__
from .config import ENV_REGISTRY, ENV_VERBOSE, CLIConfig, ConfigError, load_config

logger = logging.getLogger(__name__)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None
        self.registry_path: Optional[Path] = None
        self._registry: Optional[ReleaseRegistry] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            try:
                self.config = load_config(self.project_dir)
            except ConfigError as e:
                echo_error(str(e))
                raise SystemExit(1) from e
            if self.registry_path is not None:
                self.config.registry_path = self.registry_path
            if self.config.verbose and not self.verbose:
                self.verbose = True
                configure_logging(True)
        return self.config

    def registry(self) -> ReleaseRegistry:
        """Load the active release registry, caching the result."""
        if self._registry is None:
            try:
                self._registry = self.load_config().load_registry()
            except RegistryError as e:
                echo_error(str(e))
                raise SystemExit(1) from e
            logger.debug("Approved themes: %s", ", ".join(self._registry.approved_themes))
        return self._registry

    def scheme(self) -> PublicVersionScheme:
        """Public version scheme for the active registry's themes."""
        return PublicVersionScheme.from_registry(self.registry())


pass_context = click.make_pass_decorator(Context, ensure=True)


class ClickHandler(logging.Handler):
    """Logging handler that writes records to stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.secho(self.format(record), fg="bright_black", err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr when verbose output is requested."""
    if not verbose:
        return

    root = logging.getLogger()
    if not any(isinstance(handler, ClickHandler) for handler in root.handlers):
        handler = ClickHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_failure(message: str) -> None:
    """Print a failed check result to stderr."""
    click.secho(message, fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


class SemverGroup(click.Group):
    """Command group that exits with status 1 for unknown commands and
    usage errors such as missing option values or extra arguments.
    """

    def make_context(
        self,
        info_name: Optional[str],
        args: list[str],
        parent: Optional[click.Context] = None,
        **extra: object,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[Optional[str], Optional[click.Command], list[str]]:
        cmd_name = args[0] if args else ""
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            echo_error(f"Unknown command: {cmd_name}")
            echo_info("\nRun 'semver --help' to see available commands.")
            ctx.exit(1)
        return super().resolve_command(ctx, args)


@click.group(
    cls=SemverGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    envvar=ENV_VERBOSE,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Look for pyproject.toml starting from this directory.",
)
@click.option(
    "--registry",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=ENV_REGISTRY,
    help="Release registry JSON file defining the approved themes.",
)
@click.pass_context
def cli(
    click_ctx: click.Context,
    verbose: bool,
    directory: Optional[Path],
    registry: Optional[Path],
) -> None:
    """VTubersTV semantic version tool.

    Validate, compare and increment semantic versions and themed public
    versions such as Aurora-1.0.

    \b
    Examples:
        semver validate 2.1.0-beta.1
        semver validate Aurora-1.0
        semver compare 1.0.0-alpha 1.0.0-beta
        semver increment 1.0.0 minor --pre=beta
        semver releases --latest
    """
    ctx = click_ctx.ensure_object(Context)
    ctx.verbose = verbose
    ctx.project_dir = directory
    ctx.registry_path = registry
    configure_logging(verbose)

    if click_ctx.invoked_subcommand is None:
        echo_info(click_ctx.get_help())
        click_ctx.exit(0)


# Import and register commands
from .commands import validate, compare, increment, releases

cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(increment.increment)
cli.add_command(releases.releases)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except RegistryError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
