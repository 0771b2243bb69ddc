"""Tests for the Typer command-line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from eksphemeral import __version__, main
from eksphemeral.app import EphemeralClustersApp
from eksphemeral.controllers.control_plane.exceptions import ServiceError, TransportError
from eksphemeral.models.state.config_manager import ConfigManager, ConfigSaveError

runner = CliRunner()


@pytest.fixture
def cli_client(fake_client, monkeypatch):
    """Route every subcommand to the in-memory control plane."""
    monkeypatch.setattr(main, "_build_client", lambda settings: fake_client)
    return fake_client


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI callback reconfigures root logging; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def no_config(tmp_path: Path) -> list[str]:
    return ["--config", str(tmp_path / "missing.yaml")]


class TestVersion:
    """Tests for --version."""

    def test_version(self) -> None:
        """--version prints the package version."""
        result = runner.invoke(main.app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestListCommand:
    """Tests for the list subcommand."""

    def test_list_table(self, cli_client, no_config, detail_factory) -> None:
        """Clusters are listed in a table; failed lookups are skipped."""
        cli_client.ids = ["a", "b"]
        cli_client.details["a"] = detail_factory("a", "alpha")

        result = runner.invoke(main.app, [*no_config, "list"])

        assert result.exit_code == 0
        assert "NAME" in result.output
        assert "alpha" in result.output
        assert "v1.14" in result.output
        assert cli_client.calls_to("get_detail") == ["a", "b"]

    def test_list_empty(self, cli_client, no_config) -> None:
        """An empty inventory prints a notice."""
        result = runner.invoke(main.app, [*no_config, "list"])
        assert result.exit_code == 0
        assert "No clusters found" in result.output

    def test_list_transport_error(self, cli_client, no_config) -> None:
        """A control plane failure exits with code 1."""
        cli_client.errors["list_clusters"] = TransportError("Cannot reach control plane")
        result = runner.invoke(main.app, [*no_config, "list"])
        assert result.exit_code == 1


class TestShowCommand:
    """Tests for the show subcommand."""

    def test_show(self, cli_client, no_config, detail_factory) -> None:
        """show prints the detail and the cluster summary."""
        cli_client.details["abc"] = detail_factory("abc", "demo")
        result = runner.invoke(main.app, [*no_config, "show", "abc"])
        assert result.exit_code == 0
        assert "demo" in result.output
        assert "Cluster summary" in result.output

    def test_show_unknown(self, cli_client, no_config) -> None:
        """An unknown id exits with code 1."""
        result = runner.invoke(main.app, [*no_config, "show", "nope"])
        assert result.exit_code == 1


class TestCreateCommand:
    """Tests for the create subcommand."""

    def test_create_from_file(self, cli_client, no_config, tmp_path: Path) -> None:
        """A valid spec file creates a cluster."""
        spec_file = tmp_path / "cluster.json"
        spec_file.write_text(
            json.dumps(
                {
                    "name": "c1",
                    "numworkers": 3,
                    "kubeversion": "1.14",
                    "timeout": 60,
                    "owner": "a@b.com",
                }
            ),
            encoding="utf-8",
        )
        result = runner.invoke(main.app, [*no_config, "create", str(spec_file)])
        assert result.exit_code == 0
        assert "c1-9f8" in result.output
        assert cli_client.calls_to("create_cluster")[0].name == "c1"

    def test_create_missing_file(self, cli_client, no_config, tmp_path: Path) -> None:
        """A missing spec file exits with code 2."""
        result = runner.invoke(main.app, [*no_config, "create", str(tmp_path / "none.json")])
        assert result.exit_code == 2
        assert cli_client.calls == []

    def test_create_invalid_spec(self, cli_client, no_config, tmp_path: Path) -> None:
        """A spec with a non-numeric worker count exits with code 2."""
        spec_file = tmp_path / "cluster.json"
        spec_file.write_text(json.dumps({"name": "c1", "numworkers": "x"}), encoding="utf-8")
        result = runner.invoke(main.app, [*no_config, "create", str(spec_file)])
        assert result.exit_code == 2
        assert cli_client.calls == []

    def test_create_rejected(self, cli_client, no_config, tmp_path: Path) -> None:
        """A server rejection exits with code 1."""
        cli_client.errors["create_cluster"] = ServiceError("quota exceeded", 400)
        spec_file = tmp_path / "cluster.json"
        spec_file.write_text(
            json.dumps(
                {
                    "name": "c1",
                    "numworkers": 1,
                    "kubeversion": "1.14",
                    "timeout": 10,
                    "owner": "a@b.com",
                }
            ),
            encoding="utf-8",
        )
        result = runner.invoke(main.app, [*no_config, "create", str(spec_file)])
        assert result.exit_code == 1


class TestProlongAndConfig:
    """Tests for prolong and config subcommands."""

    def test_prolong(self, cli_client, no_config) -> None:
        """prolong passes the minutes and prints the acknowledgement."""
        result = runner.invoke(main.app, [*no_config, "prolong", "abc", "45"])
        assert result.exit_code == 0
        assert cli_client.calls_to("prolong_cluster") == [("abc", 45)]
        assert cli_client.prolong_ack in result.output

    def test_config(self, cli_client, no_config) -> None:
        """config prints the connection command."""
        result = runner.invoke(main.app, [*no_config, "config", "abc"])
        assert result.exit_code == 0
        assert "aws eks update-kubeconfig --name abc" in result.output


class TestSettingsOverrides:
    """Tests for --url and --config handling."""

    def test_url_overrides_file(self, monkeypatch, no_config) -> None:
        """--url wins over the settings file."""
        seen = []

        def fake_build(settings):
            seen.append(settings.control_plane_url)
            raise TransportError("stop here")

        monkeypatch.setattr(main, "_build_client", fake_build)
        result = runner.invoke(main.app, [*no_config, "--url", "http://cp.test/", "list"])
        assert seen == ["http://cp.test"]
        assert result.exit_code == 1


class TestInteractiveLaunch:
    """Tests for the default (no subcommand) path."""

    def test_tui_launch_has_no_stderr_handler(self, monkeypatch, no_config) -> None:
        """Launching the TUI never attaches a stderr log handler."""
        launched = []
        monkeypatch.setattr(EphemeralClustersApp, "run", lambda self: launched.append(self))
        result = runner.invoke(main.app, no_config)
        handlers = list(logging.getLogger().handlers)

        assert result.exit_code == 0
        assert len(launched) == 1
        assert not any(type(handler) is logging.StreamHandler for handler in handlers)


class TestInitConfigCommand:
    """Tests for the init-config subcommand."""

    def test_writes_effective_settings(self, tmp_path: Path) -> None:
        """The settings in effect, including --url, are saved and reload."""
        target = tmp_path / "settings.yaml"
        result = runner.invoke(
            main.app,
            ["--config", str(target), "--url", "http://cp.test:8080/", "init-config"],
        )
        assert result.exit_code == 0
        assert "Settings written to" in result.output
        assert ConfigManager.load(target).control_plane_url == "http://cp.test:8080"

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """An existing file is left alone without --force."""
        target = tmp_path / "settings.yaml"
        target.write_text("prolong_minutes: 15\n", encoding="utf-8")

        result = runner.invoke(main.app, ["--config", str(target), "init-config"])

        assert result.exit_code == 1
        assert "already exists" in " ".join(result.output.split())
        assert target.read_text(encoding="utf-8") == "prolong_minutes: 15\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force rewrites the file from the loaded settings."""
        target = tmp_path / "settings.yaml"
        target.write_text("prolong_minutes: 15\n", encoding="utf-8")

        result = runner.invoke(
            main.app,
            ["--config", str(target), "--url", "http://cp.test", "init-config", "--force"],
        )

        assert result.exit_code == 0
        saved = ConfigManager.load(target)
        assert saved.prolong_minutes == 15
        assert saved.control_plane_url == "http://cp.test"

    def test_save_failure_exits_1(self, monkeypatch, no_config) -> None:
        """A write failure is reported and exits with code 1."""

        def failing_save(settings, path=None):
            raise ConfigSaveError("Cannot write settings to /ro: read-only")

        monkeypatch.setattr(ConfigManager, "save", failing_save)
        result = runner.invoke(main.app, [*no_config, "init-config"])
        assert result.exit_code == 1
        assert "read-only" in result.output
