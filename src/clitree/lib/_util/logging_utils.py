# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a simple debug line to the clitree log.

    Used for diagnostics that should not clutter the console: cache misses,
    help invocations, sections that could not be located in help output.

    Writes timestamped lines to ``state_root()/clitree.log``. Fully
    exception-safe: any IO error is silently ignored so this function never
    raises or affects callers.
    """
    try:
        import time

        from ..core.paths import log_path as _log_path

        log_path = _log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
