"""
Minimal smoke tests for the lift CLI.

Tests basic functionality:
- App runs and shows help
- plan prints the progression in table, plain and JSON form
- plates prints a per-side breakdown
- Bad input exits non-zero with an error
"""

import json

import pytest
from typer.testing import CliRunner

from lift.cli.main import app
from lift.core.engine.config_loader import CONFIG_ENV_VAR


runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep the developer's ~/.lift/config.yaml out of the tests."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "plan" in result.output
        assert "plates" in result.output

    def test_plan_table(self):
        result = runner.invoke(app, ["plan", "85", "--sets", "5"])
        assert result.exit_code == 0
        for text in ("45x5x2", "60x4x1", "70x3x1", "80x2x1", "85x5x3"):
            assert text in result.output

    def test_plan_plain(self):
        result = runner.invoke(app, ["plan", "85", "-s", "5", "--plain"])
        assert result.exit_code == 0
        lines = [line.strip() for line in result.output.splitlines()]
        assert lines == [
            "45x5x2 []",
            "60x4x1 [5.0, 2.5]",
            "70x3x1 [10.0, 2.5]",
            "80x2x1 [10.0, 5.0, 2.5]",
            "85x5x3 [10.0, 5.0, 5.0]",
        ]

    def test_plan_json(self):
        result = runner.invoke(app, ["plan", "105", "--sets", "5", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["bar"] == 45
        assert data["distribution"] == "sin"
        assert [s["weight"] for s in data["sets"]] == [45, 65, 85, 100, 105]
        assert data["sets"][-1]["plates"] == [25.0, 5.0]

    def test_plan_linear(self):
        result = runner.invoke(app, ["plan", "85", "-s", "5", "-d", "linear", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [s["weight"] for s in data["sets"]] == [45, 55, 65, 75, 85]

    def test_plan_uses_configured_defaults(self, isolated_home):
        cfg_dir = isolated_home / ".lift"
        cfg_dir.mkdir()
        (cfg_dir / "config.yaml").write_text("defaults:\n  sets: 3\n", encoding="utf-8")

        result = runner.invoke(app, ["plan", "135", "--json"])
        assert result.exit_code == 0
        assert len(json.loads(result.output)["sets"]) == 3

    def test_plan_custom_bar(self):
        result = runner.invoke(app, ["plan", "75", "--bar", "35", "-s", "2", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [s["weight"] for s in data["sets"]] == [35, 75]
        assert data["sets"][-1]["plates"] == [10.0, 5.0, 5.0]

    def test_plates(self):
        result = runner.invoke(app, ["plates", "135", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["plates"] == [45.0]

    def test_plates_table(self):
        result = runner.invoke(app, ["plates", "45"])
        assert result.exit_code == 0
        assert "bar only" in result.output

    def test_plates_shows_added_weight(self):
        result = runner.invoke(app, ["plates", "135"])
        assert result.exit_code == 0
        assert "+90" in result.output

    def test_plan_default_sets(self):
        result = runner.invoke(app, ["plan", "225", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [s["weight"] for s in data["sets"]] == [45, 135, 200, 225]

    def test_config(self):
        result = runner.invoke(app, ["config", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["bar"] == 45
        assert data["distribution"] == "sin"


class TestCLIErrors:
    """Invalid input is reported and exits non-zero."""

    def test_work_set_below_bar(self):
        result = runner.invoke(app, ["plan", "30"])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "Work set" in result.output

    def test_plates_below_bar(self):
        result = runner.invoke(app, ["plates", "30"])
        assert result.exit_code == 1
        assert "Total weight" in result.output
        assert "Work set" not in result.output

    def test_unloadable_hint_uses_inventory_limit(self):
        result = runner.invoke(app, ["plan", "400", "-s", "2"])
        assert result.exit_code == 1
        assert "up to 255" in result.output

    def test_unloadable_work_set(self):
        result = runner.invoke(app, ["plan", "87", "-s", "5"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_too_many_sets(self):
        result = runner.invoke(app, ["plan", "135", "--sets", "7"])
        assert result.exit_code != 0

    def test_unknown_distribution(self):
        result = runner.invoke(app, ["plan", "135", "-d", "cubic"])
        assert result.exit_code == 1
        assert "cubic" in result.output

    def test_plates_out_of_range(self):
        result = runner.invoke(app, ["plates", "400"])
        assert result.exit_code == 1
        assert "no solution found" in result.output

    def test_bad_config_warns(self, isolated_home):
        cfg_dir = isolated_home / ".lift"
        cfg_dir.mkdir()
        (cfg_dir / "config.yaml").write_text("defaults:\n  sets: 12\n", encoding="utf-8")

        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "Warning" in result.output
