# SPDX-License-Identifier: MIT
"""Tests for top-level CLI behaviour and the releases command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from vtsemver_cli.main import cli


class TestTopLevel:
    """Tests for help, version and command dispatch."""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, cli_runner: CliRunner, flag: str) -> None:
        result = cli_runner.invoke(cli, [flag])

        assert result.exit_code == 0
        assert "Usage:" in result.output
        for command in ("validate", "compare", "increment", "releases"):
            assert command in result.output

    def test_no_command_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_command_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["increment", "-h"])

        assert result.exit_code == 0
        assert "--pre" in result.output
        assert "--build" in result.output

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["frobnicate", "1.0.0"])

        assert result.exit_code == 1
        assert "Unknown command: frobnicate" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "semver" in result.output

    def test_verbose_logs_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "increment", "1.0.0", "patch"])

        assert result.exit_code == 0
        assert "1.0.1" in result.output
        assert "DEBUG vtsemver_cli.commands.increment: Incremented 1.0.0 (patch) to 1.0.1" in result.output

    def test_verbose_from_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0", "1.0.0"], env={"VTSEMVER_VERBOSE": "true"})

        assert result.exit_code == 1
        assert "DEBUG" in result.output


class TestReleasesCommand:
    """Tests for semver releases command."""

    def test_builtin_registry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["releases"])

        assert result.exit_code == 0
        assert result.output.strip() == "Aurora-1.0  1.0.0  2024-01-15  stable"

    def test_latest(self, cli_runner: CliRunner, registry_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--registry", str(registry_file), "releases", "--latest"])

        assert result.exit_code == 0
        assert result.output.strip() == "Nebula-2.0  2.0.0  2025-03-01  stable"

    def test_status_filter(self, cli_runner: CliRunner, registry_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--registry", str(registry_file), "releases", "--status", "deprecated"]
        )

        assert result.exit_code == 0
        assert "Aurora-1.0  1.0.0  2024-01-15  deprecated (until 2025-01-15)" in result.output
        assert "Nebula" not in result.output

    def test_no_matches(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["releases", "--status", "beta"])

        assert result.exit_code == 1
        assert "No releases found" in result.output

    def test_missing_registry_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--registry", str(tmp_path / "nope.json"), "releases"])

        assert result.exit_code == 1
        assert "Registry file not found" in result.output


class TestUsageErrors:
    """Usage errors exit with status 1, like other argument problems."""

    def test_option_missing_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["increment", "1.0.0", "major", "--pre"])

        assert result.exit_code == 1
        assert "requires an argument" in result.output

    def test_extra_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["increment", "1.0.0", "major", "extra"])

        assert result.exit_code == 1
        assert "unexpected extra argument" in result.output

    def test_unknown_command_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--foo", "1.0.0", "2.0.0"])

        assert result.exit_code == 1
        assert "No such option" in result.output

    def test_unknown_global_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--bogus", "validate", "1.0.0"])

        assert result.exit_code == 1
        assert "No such option" in result.output

    def test_bad_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["releases", "--status", "retired"])

        assert result.exit_code == 1

    def test_bad_registry_date_reported(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test an impossible date is reported when the registry loads."""
        path = tmp_path / "releases.json"
        path.write_text(
            '[{"internalVersion": "1.0.0", "publicVersion": "Aurora-1.0",'
            ' "releaseDate": "2024-13-45", "theme": {"name": "Aurora",'
            ' "description": "First", "color": "#7B68EE"}, "status": "stable",'
            ' "securityUpdates": true}]'
        )

        result = cli_runner.invoke(cli, ["--registry", str(path), "releases", "--latest"])

        assert result.exit_code == 1
        assert "[0].releaseDate" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
