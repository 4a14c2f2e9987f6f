"""Unit tests for CLI commands.

Tests CLI behavior using Click's CliRunner for isolated, fast testing.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from etcd_workbench import __version__
from etcd_workbench.cli import cli
from etcd_workbench.config import RuntimeConfig


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config file with auth enabled."""
    path = tmp_path / "etcd-workbench.json"
    path.write_text(
        json.dumps(
            {
                "server": {"port": 9100, "data_dir": str(tmp_path / "data")},
                "auth": {"enable": True, "users": ["admin:s3cret"]},
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def started(monkeypatch: pytest.MonkeyPatch) -> list[RuntimeConfig]:
    """Replace run_server with a recorder."""
    calls: list[RuntimeConfig] = []

    async def fake_run_server(config: RuntimeConfig) -> None:
        calls.append(config)

    monkeypatch.setattr("etcd_workbench.cli.commands.start.run_server", fake_run_server)
    return calls


class TestVersion:
    """Tests for --version flag."""

    def test_version_flag_shows_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_command_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "start" in result.output


class TestStart:
    """Tests for the start command."""

    def test_starts_with_file_config(self, runner: CliRunner, config_file: Path, started: list[RuntimeConfig]) -> None:
        result = runner.invoke(cli, ["start", "--config", str(config_file)])

        assert result.exit_code == 0, result.output
        assert len(started) == 1
        assert started[0].port == 9100
        assert started[0].users == {"admin": "s3cret"}

    def test_port_and_host_override(self, runner: CliRunner, config_file: Path, started: list[RuntimeConfig]) -> None:
        result = runner.invoke(cli, ["start", "-c", str(config_file), "--port", "9200", "--host", "127.0.0.1"])

        assert result.exit_code == 0, result.output
        assert started[0].port == 9200
        assert started[0].host == "127.0.0.1"

    def test_missing_config_uses_defaults_and_warns(
        self, runner: CliRunner, tmp_path: Path, started: list[RuntimeConfig]
    ) -> None:
        result = runner.invoke(cli, ["start", "-c", str(tmp_path / "absent.json")])

        assert result.exit_code == 0, result.output
        assert started[0].port == 8080
        assert "Authentication is disabled" in result.output

    def test_invalid_config_exits_1(self, runner: CliRunner, tmp_path: Path, started: list[RuntimeConfig]) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{oops", encoding="utf-8")

        result = runner.invoke(cli, ["start", "-c", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output
        assert started == []


class TestConfigShow:
    """Tests for config show."""

    def test_masks_secrets(self, runner: CliRunner, config_file: Path) -> None:
        result = runner.invoke(cli, ["config", "show", "-c", str(config_file)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["port"] == 9100
        assert data["users"] == {"admin": "********"}
        assert data["config_encrypt_key"] == "********"
        assert "s3cret" not in result.output
