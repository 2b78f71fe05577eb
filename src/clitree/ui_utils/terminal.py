# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Terminal ANSI formatting and console message helpers.

Core color functions (``supports_color``, ``color``, ``yellow``, ``green``,
``red``, ``gray``) are defined in ``clitree.lib._util.ansi`` so that
service-layer modules can use them without a cross-layer dependency.
This module re-exports them and adds status-message helpers that write to
stderr, keeping stdout for the listing itself.
"""

import sys

from clitree.lib._util.ansi import (  # noqa: F401  -- re-exports
    color,
    gray,
    green,
    red,
    supports_color,
    yellow,
)


def yes_no(value: bool, enabled: bool) -> str:
    """Return green ``"yes"`` or red ``"no"`` based on *value* when *enabled*."""
    return color("yes" if value else "no", "32" if value else "31", enabled)


def info(message: str) -> None:
    print(message, file=sys.stderr)


def error(message: str) -> None:
    print(red(message, supports_color(sys.stderr)), file=sys.stderr)


def success(message: str) -> None:
    print(green(message, supports_color(sys.stderr)), file=sys.stderr)
