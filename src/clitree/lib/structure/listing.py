# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""The ``ls`` flow: reuse or rebuild the cached structure, then print it.

1. Read the cache unless ``skip_cache`` is set.
2. Compare its root commands with the catalog; any difference means stale.
3. Missing, unreadable or stale cache: rediscover everything.
4. Print the tree.
5. Persist it if it was rediscovered.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields, replace

from .._util.logging_utils import _log_debug
from ..core.config import DEFAULT_HELP_OPTION
from .cache import CacheStore, root_differences
from .discovery import HelpTextProvider, discover
from .registry import StructureRegistry
from .render import DEFAULT_INDENT, DEFAULT_PREFIX, TreeRenderer, Writer


@dataclass(frozen=True)
class ListOptions:
    include_help: bool = False
    indent: int = DEFAULT_INDENT
    use_color: bool = True
    prefix: str = DEFAULT_PREFIX
    skip_cache: bool = False

    def merged(self, **updated: object) -> ListOptions:
        """Copy with every non-None value of *updated* applied."""
        names = {f.name for f in fields(self)}
        unknown = set(updated) - names
        if unknown:
            raise TypeError(f"Unknown list options: {', '.join(sorted(unknown))}")
        return replace(self, **{k: v for k, v in updated.items() if v is not None})


DEFAULT_OPTIONS = ListOptions()
STALE_MESSAGE = (
    "Detected changes in parent commands that are not yet saved to the cache file - rebuilding."
)


def _noop(message: str) -> None:
    pass


class ListCommands:
    """One listing run: holds the options, collaborators and resulting registry."""

    def __init__(
        self,
        root_names: Sequence[str],
        provider: HelpTextProvider,
        store: CacheStore,
        options: ListOptions = DEFAULT_OPTIONS,
        *,
        help_option: str = DEFAULT_HELP_OPTION,
        write: Writer = print,
        on_info: Callable[[str], None] = _noop,
        on_success: Callable[[str], None] = _noop,
    ) -> None:
        self.root_names = list(root_names)
        self.provider = provider
        self.store = store
        self.options = options
        self.help_option = help_option
        self.write = write
        self._on_info = on_info
        self._on_success = on_success
        self.registry = StructureRegistry()
        self.rebuilt = False

    def run(self) -> StructureRegistry:
        self.parse_or_read_cache()
        TreeRenderer(
            self.registry,
            indent_step=self.options.indent,
            prefix=self.options.prefix,
            highlight=self.options.use_color,
            write=self.write,
        ).render()
        if self.rebuilt and self.store.save(self.registry):
            self._on_success("Cached file successfully updated.")
        return self.registry

    def parse_or_read_cache(self) -> StructureRegistry:
        cached = self._read_cache()
        if cached is not None and not self._is_stale(cached):
            self.registry = cached
            return self.registry

        self.registry = discover(
            self.root_names,
            self.provider,
            include_help=self.options.include_help,
            help_option=self.help_option,
        )
        self.rebuilt = True
        return self.registry

    def _read_cache(self) -> StructureRegistry | None:
        if self.options.skip_cache:
            self._on_info("Skipping cache if it exists...")
            return None
        return self.store.load()

    def _is_stale(self, cached: StructureRegistry) -> bool:
        added, removed = root_differences(cached, self.root_names)
        if not (added or removed):
            return False
        _log_debug(f"ls: cache stale added={sorted(added)} removed={sorted(removed)}")
        self._on_info(STALE_MESSAGE)
        return True
