# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from vtsemver_cli.main import ClickHandler


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VTSEMVER_* settings from the outer environment out of tests."""
    monkeypatch.delenv("VTSEMVER_REGISTRY", raising=False)
    monkeypatch.delenv("VTSEMVER_VERBOSE", raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo verbose logging set up by a previous invocation."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, ClickHandler):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    """Write a release registry with two themes."""
    path = tmp_path / "releases.json"
    path.write_text(
        json.dumps(
            [
                {
                    "internalVersion": "1.0.0",
                    "publicVersion": "Aurora-1.0",
                    "releaseDate": "2024-01-15",
                    "theme": {
                        "name": "Aurora",
                        "description": "The first version of VTubersTV",
                        "color": "#7B68EE",
                        "inspiration": "Northern Lights",
                    },
                    "status": "deprecated",
                    "deprecationDate": "2025-01-15",
                    "securityUpdates": False,
                },
                {
                    "internalVersion": "2.0.0",
                    "publicVersion": "Nebula-2.0",
                    "releaseDate": "2025-03-01",
                    "theme": {
                        "name": "Nebula",
                        "description": "Second generation streaming",
                        "color": "#4B0082",
                    },
                    "status": "stable",
                    "securityUpdates": True,
                },
            ]
        )
    )
    return path


@pytest.fixture
def temp_project(tmp_path: Path, registry_file: Path) -> Path:
    """Create a project directory whose pyproject.toml points at the registry."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        f"""[project]
name = "stream-app"
version = "2.0.0"

[tool.vtsemver]
registry = "{registry_file.as_posix()}"
"""
    )
    return project_dir
