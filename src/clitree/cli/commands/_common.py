# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Helpers shared by CLI commands: collaborator construction from config."""

from __future__ import annotations

import argparse

from ...lib.core.catalog import CommandDefinition, load_definitions
from ...lib.core.config import (
    get_help_flag,
    get_help_timeout,
    get_root_command_entries,
    get_target_command,
    global_config_path,
)
from ...lib.structure.discovery import SubprocessHelpProvider


def build_provider(args: argparse.Namespace) -> SubprocessHelpProvider:
    """Help-text provider for the configured target CLI."""
    target = get_target_command(getattr(args, "target", None))
    if not target or not target.strip():
        raise SystemExit(
            "No target CLI configured. Pass --target, set CLITREE_TARGET, "
            f"or add target.command to {global_config_path()}"
        )
    return SubprocessHelpProvider(target, get_help_flag(), get_help_timeout())


def load_catalog() -> list[CommandDefinition] | None:
    """Configured root-command definitions, or None when the config has none."""
    entries = get_root_command_entries()
    if entries is None:
        return None
    try:
        return load_definitions(entries)
    except ValueError as e:
        raise SystemExit(f"Invalid commands catalog in {global_config_path()}: {e}")
