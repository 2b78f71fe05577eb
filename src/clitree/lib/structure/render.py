# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Indented listing of a command registry."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._util.ansi import green, yellow
from .registry import CommandNode, StructureRegistry

DEFAULT_INDENT = 4
DEFAULT_PREFIX = "- [ ] "

Writer = Callable[[str], None]


def format_line(value: str, indent: int = 0, prefix: str = DEFAULT_PREFIX) -> str:
    return f"{' ' * indent}{prefix}{value}"


class TreeRenderer:
    """Writes each command, then its subcommands, then its options.

    Subcommands sit two indent steps below their parent and options one step
    below, so options read as belonging to the command above its children.
    """

    def __init__(
        self,
        registry: StructureRegistry,
        indent_step: int = DEFAULT_INDENT,
        prefix: str = DEFAULT_PREFIX,
        highlight: bool = True,
        write: Writer = print,
    ) -> None:
        self.registry = registry
        self.indent_step = indent_step
        self.prefix = prefix
        self.highlight = highlight
        self.write = write

    def render(self, indent: int = 0) -> None:
        self._render_nodes(self.registry.roots(), indent)

    def lines(self, indent: int = 0) -> list[str]:
        """Rendered lines as a list instead of writing them."""
        collected: list[str] = []
        write, self.write = self.write, collected.append
        try:
            self.render(indent)
        finally:
            self.write = write
        return collected

    def _render_nodes(self, nodes: Iterable[CommandNode], indent: int) -> None:
        for node in nodes:
            self.write(format_line(green(node.name, self.highlight), indent, self.prefix))
            self._render_nodes(
                self.registry.children_of(node.name), indent + self.indent_step * 2
            )
            option_indent = indent + self.indent_step
            for option in node.options:
                self.write(format_line(yellow(option, self.highlight), option_indent, self.prefix))


def render(
    registry: StructureRegistry,
    indent_step: int = DEFAULT_INDENT,
    prefix: str = DEFAULT_PREFIX,
    highlight: bool = True,
    write: Writer = print,
) -> None:
    TreeRenderer(registry, indent_step, prefix, highlight, write).render()
