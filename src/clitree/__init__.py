# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""clitree package.

Modules:
- clitree.cli: CLI entry point package (clitree)
- clitree.lib.core: Paths, configuration, root-command catalog
- clitree.lib.structure: Help-text parsing, discovery, registry, cache, rendering
- clitree.lib._util: Internal helpers (ansi, fs, logging)
- clitree.ui_utils: Terminal output helpers
"""

__all__ = [
    "cli",
    "lib",
    "ui_utils",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("clitree")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["project"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
