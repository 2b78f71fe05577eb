# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""JSON cache of the discovered command structure.

The file is a pretty-printed array of ``{command, options, parent}``
objects. It has no format version; a shape that cannot be read back is
treated like a corrupt file and forces rediscovery.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from pathlib import Path

from .._util.fs import write_text_atomic
from .._util.logging_utils import _log_debug
from ..core.paths import cache_path
from .registry import StructureRegistry

Reporter = Callable[[str], None]


def _ignore(message: str) -> None:
    pass


class CacheStore:
    """Loads and saves a :class:`StructureRegistry` at a fixed path.

    Neither operation raises for IO or parse problems: ``load`` returns None
    and ``save`` returns False, after reporting through *on_error*.
    """

    def __init__(
        self,
        path: Path | None = None,
        *,
        on_info: Reporter = _ignore,
        on_error: Reporter = _ignore,
    ) -> None:
        self.path = path if path is not None else cache_path()
        self._on_info = on_info
        self._on_error = on_error

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> StructureRegistry | None:
        if not self.exists():
            _log_debug(f"cache: no file at {self.path}")
            self._on_info("No cached file found, building from scratch.")
            return None

        self._on_info("Found command list cache, attempting to read...")
        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
            registry = StructureRegistry.from_records(records)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            _log_debug(f"cache: unreadable {self.path}: {e}")
            self._on_error(
                f"There was an error attempting to read or deserialize the file at {self.path} - {e}"
            )
            return None

        _log_debug(f"cache: loaded {len(registry)} commands from {self.path}")
        return registry

    def save(self, registry: StructureRegistry) -> bool:
        self._on_info(f"Writing command list to cached file at {self.path}...")
        try:
            write_text_atomic(self.path, json.dumps(registry.to_records(), indent=4) + "\n")
        except OSError as e:
            _log_debug(f"cache: write failed {self.path}: {e}")
            self._on_error(f"There was an error writing to {self.path} - {e}")
            return False
        _log_debug(f"cache: wrote {len(registry)} commands to {self.path}")
        return True


def root_differences(
    registry: StructureRegistry, root_names: Iterable[str]
) -> tuple[set[str], set[str]]:
    """Return ``(added, removed)`` root names of the catalog relative to *registry*.

    *added* are catalog names missing from the cache, *removed* are cached
    roots the catalog no longer lists.
    """
    catalog = set(root_names)
    cached = set(registry.root_names())
    return catalog - cached, cached - catalog


def is_stale(registry: StructureRegistry, root_names: Iterable[str]) -> bool:
    added, removed = root_differences(registry, root_names)
    return bool(added or removed)
