# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""In-memory registry of discovered commands.

Nodes are kept in a flat list and linked to their parent by name only;
children are found by scanning for a matching ``parent``. Command names are
assumed unique across the whole tree.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CommandNode:
    """One command: its own name segment, its flags, and its parent's name."""

    name: str
    options: list[str] = field(default_factory=list)
    parent: str | None = None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def to_record(self) -> dict[str, Any]:
        """Serialize using the cache file's ``{command, options, parent}`` keys."""
        return {"command": self.name, "options": list(self.options), "parent": self.parent}

    @classmethod
    def from_record(cls, record: Any) -> CommandNode:
        """Build a node from a cache record, raising ``ValueError`` on bad shapes."""
        if not isinstance(record, dict):
            raise ValueError(f"expected an object, got {type(record).__name__}")
        name = record.get("command")
        if not isinstance(name, str) or not name:
            raise ValueError(f"record has no command name: {record!r}")
        options = record.get("options") or []
        if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
            raise ValueError(f"options of {name!r} must be a list of strings")
        parent = record.get("parent")
        if parent is not None and not isinstance(parent, str):
            raise ValueError(f"parent of {name!r} must be a string or null")
        return cls(name=name, options=list(options), parent=parent)


def split_path(path: str) -> tuple[str, str | None]:
    """Return ``(name, parent)`` for a space-joined command path."""
    segments = path.split()
    if not segments:
        raise ValueError("command path must not be empty")
    if len(segments) == 1:
        return segments[0], None
    return segments[-1], segments[-2]


class StructureRegistry:
    """Flat, insertion-ordered collection of :class:`CommandNode`."""

    def __init__(self, nodes: Iterable[CommandNode] = ()) -> None:
        self._nodes: list[CommandNode] = []
        for node in nodes:
            self._replace_or_append(node)

    def __iter__(self) -> Iterator[CommandNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return self.get(name) is not None  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"StructureRegistry({self._nodes!r})"

    def get(self, name: str) -> CommandNode | None:
        for node in self._nodes:
            if node.name == name:
                return node
        return None

    def upsert(self, path: str, options: Iterable[str]) -> CommandNode:
        """Insert the node for *path*, or merge it into an existing one.

        The last path segment is the node name and the one before it is the
        parent. A merge drops the existing entry and appends a replacement
        that takes the new parent but keeps the previously stored options;
        the freshly parsed *options* are discarded.
        """
        name, parent = split_path(path)
        existing = self.get(name)
        if existing is None:
            node = CommandNode(name=name, options=list(options), parent=parent)
            self._nodes.append(node)
            return node

        self._nodes = [n for n in self._nodes if n.name != name]
        node = CommandNode(name=name, options=list(existing.options), parent=parent)
        self._nodes.append(node)
        return node

    def children_of(self, name: str) -> list[CommandNode]:
        return [node for node in self._nodes if node.parent == name]

    def roots(self) -> list[CommandNode]:
        """Nodes without a parent, or every node when none is a root."""
        roots = [node for node in self._nodes if node.parent is None]
        return roots if roots else list(self._nodes)

    def root_names(self) -> list[str]:
        """Names of the nodes that really have no parent (no fallback)."""
        return [node.name for node in self._nodes if node.parent is None]

    def to_records(self) -> list[dict[str, Any]]:
        return [node.to_record() for node in self._nodes]

    @classmethod
    def from_records(cls, records: Any) -> StructureRegistry:
        """Rebuild a registry from cache records.

        A repeated name replaces the earlier node in place so the one-node-per-name
        rule holds even for hand-edited files.
        """
        if not isinstance(records, list):
            raise ValueError(f"expected a list of commands, got {type(records).__name__}")
        return cls(CommandNode.from_record(record) for record in records)

    def _replace_or_append(self, node: CommandNode) -> None:
        for index, current in enumerate(self._nodes):
            if current.name == node.name:
                self._nodes[index] = node
                return
        self._nodes.append(node)
