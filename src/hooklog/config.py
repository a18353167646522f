"""Configuration for hooklog registries.

Three-layer config resolution (highest priority wins):
  1. Explicit overrides — keyword arguments passed in code
  2. Project config — .hooklog.json in the working directory or a parent
  3. Global config — ~/.hooklog/config.json

Recognized keys (JSON may spell them with dashes or underscores):
    levels           list of level names or {"name": ...} records
    mirror_to_sink   forward every entry to a console sink
    expose_globally  bind the registry as builtins.Log
    default_sink     sink name used when a level has no sink of its own
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, List

from .sinks import DEFAULT_SINKS


DEFAULT_LEVELS = ['info', 'log', 'debug', 'warn', 'error']

PROJECT_CONFIG_NAME = ".hooklog.json"

# Options that only make sense as Python objects, never read from files
CODE_ONLY_OPTIONS = {"sinks"}


@dataclass
class LogConfig:
    """Options for a LogRegistry.

    ``sinks`` is code-only (callables cannot come from JSON).
    """
    levels: List[Any] = field(default_factory=lambda: list(DEFAULT_LEVELS))
    mirror_to_sink: bool = False
    expose_globally: bool = False
    sinks: Dict[str, Callable[[Any], None]] = field(
        default_factory=lambda: dict(DEFAULT_SINKS))
    default_sink: str = 'info'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Build a LogConfig from a plain dict, ignoring unknown keys.

        Code-only options (``sinks``) are ignored too, since the dict
        usually comes from a JSON file.
        """
        known = {f.name for f in fields(cls)} - CODE_ONLY_OPTIONS
        kwargs = {}
        for key, value in data.items():
            attr = key.replace("-", "_")
            if attr in known and value is not None:
                kwargs[attr] = value
        return cls(**kwargs)


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.hooklog/)."""
    return Path.home() / ".hooklog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .hooklog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .hooklog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def _normalize_keys(data):
    return {key.replace("-", "_"): value for key, value in data.items()}


def resolve_config(start_dir=None, **overrides) -> LogConfig:
    """Resolve a LogConfig using three-layer precedence.

    For each option, checks (in order):
      1. overrides (keyword arguments that are not None)
      2. Project .hooklog.json
      3. Global ~/.hooklog/config.json

    Options found in none of them keep the LogConfig default. ``sinks``
    is only taken from overrides.
    """
    project_cfg, _ = load_project_config(start_dir)
    sinks = overrides.pop("sinks", None)

    merged = _normalize_keys(load_global_config())
    merged.update(_normalize_keys(project_cfg))
    merged.update({key: value for key, value in overrides.items()
                   if value is not None})
    config = LogConfig.from_dict(merged)
    if sinks is not None:
        config.sinks = dict(sinks)
    return config
