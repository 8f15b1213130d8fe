"""Configuration: file names, constants, and config loading (global + project overrides)."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

# Files read from the Godot project root
EXPORT_PRESETS_FILE = "export_presets.cfg"
GODOT_PROJECT_FILE = "project.godot"

# project.godot lookup for the itch.io destination
GLOBAL_SECTION = "global"
ITCH_PROJECT_KEY = "itch_project"

# GitHub Actions passes the `relative_project_path` input through this variable
PROJECT_PATH_ENV = "INPUT_RELATIVE_PROJECT_PATH"

CONFIG_FILENAME = "config.json"
PROJECT_CONFIG_FILENAME = ".godot-exports.json"


# Global config location
def _global_config_dir() -> Path:
    return Path.home() / ".godot-exports"


def global_config_path() -> Path:
    """Path to global config file (~/.godot-exports/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration."""
    return {
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.godot-exports/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.godot-exports.json)."""
    return project_root / PROJECT_CONFIG_FILENAME


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.godot-exports/config.json) + project overrides.

    If project_root is None, only global config (and defaults) are used.
    """
    merged = load_global_config()
    if project_root is not None:
        project_data = _load_json(project_config_path(project_root.resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged


def resolve_path(path: Path) -> Path:
    """Resolve path to absolute, normalized."""
    return path.resolve()


def project_root_from(path: Path | str | None) -> Path:
    """
    Absolute project root for a command.

    An explicit path wins; otherwise INPUT_RELATIVE_PROJECT_PATH, otherwise the
    current directory. An empty action input counts as unset.
    """
    if path is None or str(path) == "":
        path = os.environ.get(PROJECT_PATH_ENV) or "."
    return resolve_path(Path(path))
