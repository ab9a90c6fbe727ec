"""
Tests for the YAML config loader.

Each test points $LIFT_CONFIG (or HOME) at a temporary directory so the
developer's own ~/.lift/config.yaml never leaks in.
"""

import pytest

from lift.core.engine.config_loader import (
    CONFIG_ENV_VAR,
    LiftConfig,
    _deep_merge,
    config_from_dict,
    get_user_yaml_path,
    load_lift_config,
)
from lift.core.models import Distribution


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Empty HOME and no $LIFT_CONFIG."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path


def _write(path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestBundledDefaults:
    def test_bundled_values(self):
        cfg = load_lift_config()
        assert cfg.bar == 45
        assert cfg.sets == 4
        assert cfg.distribution is Distribution.SIN
        assert cfg.source.endswith("lift.yaml")

    def test_dataclass_defaults_match_bundled(self):
        bundled = load_lift_config()
        builtin = LiftConfig()
        assert (bundled.bar, bundled.sets, bundled.distribution) == (
            builtin.bar,
            builtin.sets,
            builtin.distribution,
        )


class TestUserOverride:
    def test_home_override_partial(self, isolated_home):
        """Only listed keys change; the rest come from the bundled file."""
        _write(isolated_home / ".lift" / "config.yaml", "defaults:\n  bar: 20\n")
        cfg = load_lift_config()
        assert cfg.bar == 20
        assert cfg.sets == 4
        assert cfg.distribution is Distribution.SIN

    def test_env_var_wins(self, isolated_home, monkeypatch):
        _write(isolated_home / ".lift" / "config.yaml", "defaults:\n  bar: 20\n")
        env_file = _write(
            isolated_home / "other.yaml",
            "defaults:\n  sets: 6\n  distribution: linear\n",
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))

        cfg = load_lift_config()
        assert cfg.bar == 45
        assert cfg.sets == 6
        assert cfg.distribution is Distribution.LINEAR
        assert cfg.source == str(env_file)

    def test_missing_env_file_is_ignored(self, isolated_home, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(isolated_home / "nope.yaml"))
        assert get_user_yaml_path() is None
        assert load_lift_config().bar == 45

    def test_empty_file(self, isolated_home):
        _write(isolated_home / ".lift" / "config.yaml", "")
        assert load_lift_config().sets == 4

    def test_parse_error_warns_and_falls_back(self, isolated_home):
        _write(isolated_home / ".lift" / "config.yaml", "defaults: [1, 2\n")
        with pytest.warns(UserWarning, match="ignoring config override"):
            cfg = load_lift_config()
        assert cfg.bar == 45

    def test_out_of_range_sets_warns(self, isolated_home):
        _write(isolated_home / ".lift" / "config.yaml", "defaults:\n  sets: 9\n")
        with pytest.warns(UserWarning, match="defaults.sets"):
            cfg = load_lift_config()
        assert cfg.sets == 4

    def test_unknown_distribution_warns(self, isolated_home):
        _write(isolated_home / ".lift" / "config.yaml", "defaults:\n  distribution: cubic\n")
        with pytest.warns(UserWarning, match="cubic"):
            cfg = load_lift_config()
        assert cfg.distribution is Distribution.SIN


class TestConfigFromDict:
    def test_empty_uses_builtins(self):
        assert config_from_dict({}) == LiftConfig()

    def test_rejects_negative_bar(self):
        with pytest.raises(ValueError, match="defaults.bar"):
            config_from_dict({"defaults": {"bar": -5}})

    def test_rejects_bool_sets(self):
        with pytest.raises(ValueError, match="defaults.sets"):
            config_from_dict({"defaults": {"sets": True}})

    def test_rejects_non_mapping(self):
        with pytest.raises(ValueError, match="mapping"):
            config_from_dict({"defaults": [1, 2]})

    def test_deep_merge_is_non_destructive(self):
        base = {"defaults": {"bar": 45, "sets": 4}}
        merged = _deep_merge(base, {"defaults": {"bar": 35}})
        assert merged == {"defaults": {"bar": 35, "sets": 4}}
        assert base["defaults"]["bar"] == 45
