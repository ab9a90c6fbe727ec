"""
YAML → typed config loader.

Loads user defaults (bar weight, number of sets, distribution) from
lift.yaml (bundled with the package) and merges user overrides from
~/.lift/config.yaml, or from the file named by $LIFT_CONFIG.

Usage:
    from lift.core.engine.config_loader import load_lift_config
    cfg = load_lift_config()
    sets = build_progression(cfg.bar, 225, cfg.sets, cfg.distribution)

The bundled file must parse.  If the user override file has parse errors
or invalid values, a warning is issued and the file is ignored.
"""

from __future__ import annotations

import importlib.resources
import os
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..config import DEFAULT_BAR, DEFAULT_DISTRIBUTION, DEFAULT_SETS, MAX_SETS, MIN_SETS
from ..models import Distribution

CONFIG_ENV_VAR = "LIFT_CONFIG"


@dataclass(frozen=True)
class LiftConfig:
    """Effective user defaults for the CLI."""

    bar: int = DEFAULT_BAR
    sets: int = DEFAULT_SETS
    distribution: Distribution = Distribution(DEFAULT_DISTRIBUTION)
    source: str = "built-in defaults"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML mapping; an empty file yields {}."""
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def config_from_dict(data: dict[str, Any], source: str = "") -> LiftConfig:
    """
    Build a LiftConfig from the ``defaults`` section of a parsed YAML dict.

    Missing keys take the built-in defaults.

    Raises:
        ValueError: If a value has the wrong type or is out of range
    """
    section = data.get("defaults", {}) or {}
    if not isinstance(section, dict):
        raise ValueError("'defaults' must be a mapping")

    bar = section.get("bar", DEFAULT_BAR)
    sets = section.get("sets", DEFAULT_SETS)
    dist_name = section.get("distribution", DEFAULT_DISTRIBUTION)

    if isinstance(bar, bool) or not isinstance(bar, int) or bar < 0:
        raise ValueError(f"defaults.bar must be a non-negative integer, got {bar!r}")
    if isinstance(sets, bool) or not isinstance(sets, int) or not MIN_SETS <= sets <= MAX_SETS:
        raise ValueError(
            f"defaults.sets must be an integer in [{MIN_SETS}, {MAX_SETS}], got {sets!r}"
        )
    if not isinstance(dist_name, str):
        raise ValueError(f"defaults.distribution must be a string, got {dist_name!r}")

    return LiftConfig(
        bar=bar,
        sets=sets,
        distribution=Distribution.from_name(dist_name),
        source=source or "built-in defaults",
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_bundled_yaml_path() -> Path:
    """Return the path to the bundled lift.yaml."""
    ref = importlib.resources.files("lift").joinpath("lift.yaml")
    with importlib.resources.as_file(ref) as p:
        return p


def get_user_yaml_path() -> Path | None:
    """
    Return the user override file if it exists, else None.

    $LIFT_CONFIG wins over ~/.lift/config.yaml.
    """
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        p = Path(env).expanduser()
        return p if p.exists() else None
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".lift" / "config.yaml"
    return p if p.exists() else None


def load_lift_config() -> LiftConfig:
    """
    Load and merge configuration from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/lift/lift.yaml
    2. User override ($LIFT_CONFIG or ~/.lift/config.yaml)

    Returns:
        The effective LiftConfig
    """
    bundled = get_bundled_yaml_path()
    raw = _load_yaml_file(bundled)
    config = config_from_dict(raw, source=str(bundled))

    user = get_user_yaml_path()
    if user is None:
        return config

    try:
        merged = _deep_merge(raw, _load_yaml_file(user))
        return config_from_dict(merged, source=str(user))
    except (yaml.YAMLError, ValueError) as exc:
        warnings.warn(
            f"lift: ignoring config override '{user}': {exc}",
            stacklevel=2,
        )
        return config
