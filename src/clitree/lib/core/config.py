# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

import os
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

DEFAULT_HELP_FLAG = "-h"
DEFAULT_HELP_OPTION = "-h, --help"

# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If CLITREE_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) ${XDG_CONFIG_HOME:-~/.config}/clitree/config.yml
        2) sys.prefix/etc/clitree/config.yml
        3) /etc/clitree/config.yml
    """
    env_file = os.environ.get("CLITREE_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_cfg = (Path(xdg_home) if xdg_home else Path.home() / ".config") / "clitree" / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "clitree" / "config.yml"
    etc_cfg = Path("/etc/clitree/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    Resolution order (first existing wins, except explicit override is returned even
    if missing to make intent visible to the user):
    - CLITREE_CONFIG_FILE env (returned as-is)
    - ${XDG_CONFIG_HOME:-~/.config}/clitree/config.yml (user override)
    - sys.prefix/etc/clitree/config.yml (pip wheels)
    - /etc/clitree/config.yml (system default)
    If none exist, return the first (user) path so `clitree config` shows
    where to create one.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[0]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"Global config must be a mapping: {cfg_path}")
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``ls: "oops"``),
    returns ``{}`` to avoid ``AttributeError`` in callers that expect ``.get()``.
    """
    value = load_global_config().get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Target CLI ----------


def get_target_command(override: str | None = None) -> str | None:
    """Command line of the CLI whose structure is discovered.

    Order: explicit *override* (``--target``), CLITREE_TARGET, ``target.command``.
    """
    if override:
        return override
    env = os.environ.get("CLITREE_TARGET")
    if env:
        return env
    value = get_global_section("target").get("command")
    return str(value) if value else None


def get_help_flag() -> str:
    return str(get_global_section("target").get("help_flag") or DEFAULT_HELP_FLAG)


def get_help_option() -> str:
    """Rendered long form of the help flag as it appears under ``Options:``."""
    return str(get_global_section("target").get("help_option") or DEFAULT_HELP_OPTION)


def get_help_timeout() -> float | None:
    value = get_global_section("target").get("timeout")
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise SystemExit(f"target.timeout must be a number, got {value!r}")
    return timeout if timeout > 0 else None


def get_root_command_entries() -> list[Any] | None:
    """Raw ``commands`` catalog from the global config, or None if absent."""
    value = load_global_config().get("commands")
    if value is None:
        return None
    if not isinstance(value, list):
        raise SystemExit("commands: must be a list of command names or mappings")
    return value


# ---------- Listing defaults ----------

_LIST_KEYS = {
    "indent": int,
    "prefix": str,
    "include_help": bool,
    "color": bool,
    "skip_cache": bool,
}


def get_list_defaults() -> dict[str, Any]:
    """Return the ``ls:`` section restricted to known keys with checked types."""
    section = get_global_section("ls")
    defaults: dict[str, Any] = {}
    for key, kind in _LIST_KEYS.items():
        if key not in section or section[key] is None:
            continue
        value = section[key]
        # bool is a subclass of int; reject it where a number is expected
        if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
            raise SystemExit(f"ls.{key} must be of type {kind.__name__}, got {value!r}")
        if key == "indent" and value < 0:
            raise SystemExit(f"ls.indent must not be negative, got {value}")
        defaults[key] = value
    return defaults
