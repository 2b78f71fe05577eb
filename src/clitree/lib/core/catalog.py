# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Root-command catalog.

The catalog is the authoritative list of top-level commands used both as
the starting points of discovery and to decide whether a cached structure
is stale. It comes from the ``commands:`` section of the global config when
present, otherwise from the ``Commands:`` section of the target's top-level
help.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..structure.discovery import HelpTextProvider
from ..structure.extract import parse_children
from .config import DEFAULT_HELP_OPTION


@dataclass
class CommandDefinition:
    """A declared command with an optional description and nested children."""

    command: str
    description: str = ""
    children: list[CommandDefinition] = field(default_factory=list)


def _load_definition(entry: Any, where: str) -> CommandDefinition:
    if isinstance(entry, str):
        if not entry.strip():
            raise ValueError(f"{where}: command name must not be empty")
        return CommandDefinition(command=entry.strip())
    if not isinstance(entry, dict):
        raise ValueError(f"{where}: expected a name or a mapping, got {entry!r}")

    name = entry.get("command")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{where}: missing 'command' in {entry!r}")
    description = entry.get("description") or ""
    children = entry.get("children") or []
    if not isinstance(children, list):
        raise ValueError(f"{where}.{name}: 'children' must be a list")
    return CommandDefinition(
        command=name.strip(),
        description=str(description),
        children=[
            _load_definition(child, f"{where}.{name}.children[{i}]")
            for i, child in enumerate(children)
        ],
    )


def load_definitions(entries: list[Any]) -> list[CommandDefinition]:
    """Build definitions from raw config entries (names or mappings, nested)."""
    return [_load_definition(entry, f"commands[{i}]") for i, entry in enumerate(entries)]


def definition_names(definitions: list[CommandDefinition]) -> list[str]:
    return [d.command for d in definitions]


def catalog_from_help(
    provider: HelpTextProvider, help_option: str = DEFAULT_HELP_OPTION
) -> list[str]:
    """Root names listed in the target's top-level help."""
    return parse_children(provider.get_help(""), False, help_option)


def resolve_root_names(
    provider: HelpTextProvider,
    definitions: list[CommandDefinition] | None = None,
    help_option: str = DEFAULT_HELP_OPTION,
) -> list[str]:
    """Configured root names if any are declared, otherwise those from help."""
    if definitions:
        return definition_names(definitions)
    return catalog_from_help(provider, help_option)
