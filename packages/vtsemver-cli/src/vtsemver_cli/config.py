# SPDX-License-Identifier: MIT
"""CLI configuration from pyproject.toml and the environment."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from vtsemver_version import DEFAULT_REGISTRY, ReleaseRegistry, load_registry

logger = logging.getLogger(__name__)

ENV_REGISTRY = "VTSEMVER_REGISTRY"
ENV_VERBOSE = "VTSEMVER_VERBOSE"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """Settings for the semver command.

    Attributes:
        project_dir: Directory the configuration was resolved against
        registry_path: Release registry JSON file, or None for the builtin one
        verbose: Whether debug logging is enabled
    """

    project_dir: Path
    registry_path: Optional[Path] = None
    verbose: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from the [tool.vtsemver] table of pyproject.toml.

        Raises:
            ConfigError: If the file is not valid TOML
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any], project_dir: Path) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        tool_vtsemver = pyproject.get("tool", {}).get("vtsemver", {})

        registry = tool_vtsemver.get("registry")
        if registry is not None and not isinstance(registry, str):
            raise ConfigError("[tool.vtsemver].registry must be a string path")

        verbose = tool_vtsemver.get("verbose", False)
        if not isinstance(verbose, bool):
            raise ConfigError("[tool.vtsemver].verbose must be a boolean")

        return cls(
            project_dir=project_dir,
            registry_path=project_dir / registry if registry else None,
            verbose=verbose,
        )

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Override settings from VTSEMVER_* environment variables."""
        env = os.environ if environ is None else environ

        if registry := env.get(ENV_REGISTRY):
            self.registry_path = Path(registry)
        if env.get(ENV_VERBOSE, "").lower() == "true":
            self.verbose = True

    def load_registry(self) -> ReleaseRegistry:
        """Return the configured release registry.

        Raises:
            RegistryError: If the configured registry file is invalid
        """
        if self.registry_path is None:
            return DEFAULT_REGISTRY
        return load_registry(self.registry_path)


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current == current.parent:
            return None
        current = current.parent


def load_config(
    project_dir: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> CLIConfig:
    """Resolve CLI configuration.

    Settings come from pyproject.toml (when a project is found) and are then
    overridden by environment variables.

    Args:
        project_dir: Project directory (defaults to searching upwards from cwd)
        environ: Environment mapping (defaults to os.environ)

    Raises:
        ConfigError: If pyproject.toml cannot be parsed
    """
    root = find_project_root(project_dir)

    if root is not None:
        logger.debug("Reading configuration from %s", root / "pyproject.toml")
        config = CLIConfig.from_pyproject(root)
    else:
        config = CLIConfig(project_dir=Path(project_dir) if project_dir else Path.cwd())

    config.apply_env(environ)
    logger.debug("Registry: %s", config.registry_path or "<builtin>")
    return config
