"""YAML configuration for episode-guide.

Config lives at ``$XDG_CONFIG_HOME/episode-guide/config.yaml``. Missing or
unreadable files fall back to the defaults; partial files are deep-merged
over them.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "episodes_path": "~/.config/episode-guide/data/episodes.json",
    "standalone_path": "~/.config/episode-guide/data/movies.json",
    "write_defaults": True,
    "debug": False,
    "log_file": "~/.config/episode-guide/debug.log",
    "theme": "default",
}


def get_config_dir() -> Path:
    """Get the episode-guide config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "episode-guide"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config.yaml merged over the defaults."""
    config_path = path or get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            return copy.deepcopy(DEFAULT_CONFIG)
        return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError):
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(cfg: dict[str, Any], path: Path | None = None) -> None:
    """Save the config."""
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(cfg, f, default_flow_style=False, sort_keys=False)


def _expand(raw: str) -> Path:
    return Path(os.path.expanduser(str(raw)))


def get_episodes_path(cfg: dict[str, Any] | None = None) -> Path:
    if cfg is None:
        cfg = load_config()
    return _expand(cfg.get("episodes_path", DEFAULT_CONFIG["episodes_path"]))


def get_standalone_path(cfg: dict[str, Any] | None = None) -> Path:
    if cfg is None:
        cfg = load_config()
    return _expand(cfg.get("standalone_path", DEFAULT_CONFIG["standalone_path"]))


def get_log_path(cfg: dict[str, Any] | None = None) -> Path:
    """Get the path to the debug log file."""
    if cfg is None:
        cfg = load_config()
    return _expand(cfg.get("log_file", DEFAULT_CONFIG["log_file"]))


def is_debug_enabled(cfg: dict[str, Any] | None = None) -> bool:
    """Check if debug mode is enabled."""
    if cfg is None:
        cfg = load_config()
    return bool(cfg.get("debug", False))
