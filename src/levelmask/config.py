"""Configuration management for levelmask.

Layered level resolution (highest priority wins):
  1. Explicit value — passed by the caller (e.g., from a CLI flag)
  2. Environment — LEVELMASK_LEVEL
  3. Project config — .levelmask.json in the working tree
  4. Global config — ~/.levelmask/config.json

The `level` key holds anything Level() accepts that JSON can express:

    {"level": "gte.info lte.error"}
    {"level": ["debug", "error"]}
    {"level": 2}
    {"level": {"gte": "info", "lte": "error"}}

Config files may also carry `verbosity` and `channels` for the
diagnostic output (see init_output_from_config).
"""

import json
import os
from pathlib import Path

from levelmask.level import Level
from levelmask.lib.log_lib import (
    KNOWN_CHANNELS, get_output, init_output, parse_channel_spec, trace,
)
from levelmask.lib.log_lib.levels import DETAIL

ENV_VAR = "LEVELMASK_LEVEL"
PROJECT_CONFIG_NAME = ".levelmask.json"
MODIFIER_KEYS = ("at", "gt", "gte", "lt", "lte")


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.levelmask/)."""
    return Path.home() / ".levelmask"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .levelmask.json.

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
    """Load a JSON object from path, returning {} when missing or unusable."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        get_output().emit(DETAIL, "ignoring malformed config {path}: {err}",
                          channel='config', path=path, err=e)
        return {}
    if not isinstance(data, dict):
        get_output().emit(DETAIL, "ignoring config {path}: top level is not an object",
                          channel='config', path=path)
        return {}
    return data


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .levelmask.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


def load_config(start_dir=None):
    """Merge global and project config; project keys win."""
    merged = dict(load_global_config())
    project_cfg, _ = load_project_config(start_dir)
    merged.update(project_cfg)
    return merged


# ---------------------------------------------------------------------------
# Level resolution
# ---------------------------------------------------------------------------
def level_from_value(value):
    """Build a Level from a config value.

    Objects are read as keyword modifiers; unknown keys are reported on
    the 'config' channel and skipped. Any other value goes to Level().
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, dict):
        modifiers = {}
        for key, arg in value.items():
            if key in MODIFIER_KEYS:
                modifiers[key] = arg
            else:
                get_output().emit(DETAIL, "ignoring unknown level key {key!r}",
                                  channel='config', key=key)
        return Level(**modifiers)
    return Level(value)


@trace
def resolve_level(value=None, start_dir=None):
    """Resolve a Level using layered precedence.

    Args:
        value: Explicit Level or spec; wins when not None
        start_dir: Where to start looking for .levelmask.json

    Returns:
        The resolved Level (unrestricted when nothing is configured)
    """
    out = get_output()

    # Layer 1: explicit
    if value is not None:
        out.emit(DETAIL, "level from caller: {value!r}", channel='config', value=value)
        return level_from_value(value)

    # Layer 2: environment
    env_val = os.environ.get(ENV_VAR, "").strip()
    if env_val:
        out.emit(DETAIL, "level from ${var}: {value!r}", channel='config',
                 var=ENV_VAR, value=env_val)
        return Level(env_val)

    # Layer 3: project config
    project_cfg, project_path = load_project_config(start_dir)
    if project_cfg.get("level") is not None:
        out.emit(DETAIL, "level from {path}", channel='config', path=project_path)
        return level_from_value(project_cfg["level"])

    # Layer 4: global config
    global_cfg = load_global_config()
    if global_cfg.get("level") is not None:
        out.emit(DETAIL, "level from {path}", channel='config',
                 path=get_global_config_path())
        return level_from_value(global_cfg["level"])

    return Level()


def _config_channels(value):
    """Split a config `channels` value into specs and rejected entries.

    Accepts a comma-separated string or a list; anything else, and any
    non-string list entry, is rejected.
    """
    if value is None:
        return [], []
    if isinstance(value, str):
        return [s for s in value.split(",") if s.strip()], []
    if not isinstance(value, list):
        return [], [value]
    specs = [s for s in value if isinstance(s, str)]
    rejected = [s for s in value if not isinstance(s, str)]
    return specs, rejected


def init_output_from_config(start_dir=None, verbosity=None, channels=None):
    """Initialize diagnostic output, filling gaps from config files.

    Explicit verbosity/channels win over the config's `verbosity` and
    `channels` keys. Unusable config values are dropped and reported on
    the 'config' channel of the new manager.
    """
    cfg = load_config(start_dir)
    rejected = []
    if verbosity is None:
        verbosity = cfg.get("verbosity", 0)
        if not isinstance(verbosity, int) or isinstance(verbosity, bool):
            rejected.append(("verbosity", verbosity))
            verbosity = 0
    if channels is None:
        channels, bad = _config_channels(cfg.get("channels"))
        rejected.extend(("channels", value) for value in bad)

    out = init_output(verbosity=verbosity, channels=channels)
    for key, value in rejected:
        out.emit(DETAIL, "ignoring config {key} value {value!r}",
                 channel='config', key=key, value=value)
    for spec in channels:
        name = parse_channel_spec(spec).name
        if name and name not in KNOWN_CHANNELS:
            out.emit(DETAIL, "unknown channel {name!r} in config",
                     channel='config', name=name)
    return out


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, project_dir=None):
    """Write .levelmask.json to project_dir (default: cwd)."""
    target = Path(project_dir or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(data):
    """Write the global config file."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = get_global_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path
