# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Informational CLI commands: config overview and root-command catalog."""

from __future__ import annotations

import argparse
import os

from ...lib.core.catalog import CommandDefinition, catalog_from_help
from ...lib.core.config import (
    get_help_flag,
    get_help_option,
    get_target_command,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
)
from ...lib.core.paths import cache_path as _cache_path, log_path as _log_path
from ...lib.structure.discovery import HelpProviderError, format_help_command
from ...ui_utils.terminal import (
    gray as _gray,
    green as _green,
    supports_color as _supports_color,
    yes_no as _yes_no,
)
from ._common import build_provider, load_catalog

_ENV_VARS = (
    "CLITREE_CONFIG_FILE",
    "CLITREE_CONFIG_DIR",
    "CLITREE_STATE_DIR",
    "CLITREE_TARGET",
    "XDG_CONFIG_HOME",
    "NO_COLOR",
    "FORCE_COLOR",
)


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register informational subcommands (config, catalog)."""
    subparsers.add_parser("config", help="Show configuration, cache and log paths")
    subparsers.add_parser("catalog", help="Show the root commands used for discovery")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle config and catalog commands.  Returns True if handled."""
    if args.cmd == "config":
        _print_config(getattr(args, "target", None))
        return True
    if args.cmd == "catalog":
        _print_catalog(args)
        return True
    return False


def _print_config(target_override: str | None) -> None:
    """Display configuration, cache and log paths."""
    color_enabled = _supports_color()
    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(gcfg.is_file(), color_enabled)})"
    )
    paths = _global_config_search_paths()
    if len(paths) > 1:
        print("- Global config search order:")
        for p in paths:
            print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(p.is_file(), color_enabled)})")

    target = get_target_command(target_override)
    if target:
        print(f"- Target CLI: {target}")
        example = format_help_command(target, "<command>", get_help_flag())
        print(f"- Help invocation: {_gray(example, color_enabled)}")
    else:
        print("- Target CLI: (not configured)")
    print(f"- Options section ends at: {get_help_option()!r}")

    print()
    print("Output (write):")
    cache = _cache_path()
    print(
        f"- Command cache: {_gray(str(cache), color_enabled)} "
        f"(exists: {_yes_no(cache.is_file(), color_enabled)})"
    )
    print(f"- Debug log: {_gray(str(_log_path()), color_enabled)}")

    overrides = [(var, os.environ[var]) for var in _ENV_VARS if var in os.environ]
    if overrides:
        print()
        print("Environment overrides:")
        for var, val in overrides:
            print(f"- {var}={_gray(val, color_enabled)}")


def _print_definitions(
    definitions: list[CommandDefinition], color_enabled: bool, indent: int = 0
) -> None:
    for d in definitions:
        line = f"{' ' * indent}- {_green(d.command, color_enabled)}"
        if d.description:
            line += f"  {_gray(d.description, color_enabled)}"
        print(line)
        _print_definitions(d.children, color_enabled, indent + 4)


def _print_catalog(args: argparse.Namespace) -> None:
    color_enabled = _supports_color()
    definitions = load_catalog()
    if definitions:
        print(f"Root commands (from {_global_config_path()}):")
        _print_definitions(definitions, color_enabled)
        return

    provider = build_provider(args)
    try:
        names = catalog_from_help(provider, get_help_option())
    except HelpProviderError as e:
        raise SystemExit(str(e))
    if not names:
        print(f"No root commands found in the help output of {provider.target}")
        return
    print(f"Root commands (from {provider.target} help):")
    for name in names:
        print(f"- {_green(name, color_enabled)}")
