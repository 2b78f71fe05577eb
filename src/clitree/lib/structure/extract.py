# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Extraction of command and option names from help output.

The target CLI is expected to print commander-style help::

    Usage: tool deploy [options] [command]

    Options:
      -h, --help      display help for command

    Commands:
      aws-s3          Run deployments for AWS S3
      help [command]  display help for command

Both sections list one item per line, indented by exactly two spaces, with
the description separated from the name by at least two spaces.
"""

from .._util.logging_utils import _log_debug
from ..core.config import DEFAULT_HELP_OPTION

COMMANDS_START = "Commands:"
COMMANDS_END = "help [command]"
OPTIONS_START = "Options:"
NAME_SEPARATOR = "  "


def _find_line(lines: list[str], sentinel: str) -> int:
    for index, line in enumerate(lines):
        if sentinel in line:
            return index
    return -1


def _name_column(line: str) -> str:
    fields = line.split(NAME_SEPARATOR)
    return fields[1] if len(fields) > 1 else ""


def extract_section(
    text: str,
    start: str,
    end: str,
    include_help: bool = False,
    help_option: str = DEFAULT_HELP_OPTION,
) -> list[str]:
    """Return the item names listed between the *start* and *end* sentinel lines.

    The slice runs from the line after the first one containing *start*
    through the first line containing *end*, inclusive. Blank names and lines
    carrying a tab (continuation of a custom description) are dropped. Unless
    *include_help* is set, the ``help [command]`` entry and the *help_option*
    entry are removed as well.

    A sentinel that cannot be found yields an empty list rather than an error.
    """
    lines = text.split("\n")
    start_index = _find_line(lines, start)
    end_index = _find_line(lines, end)
    if start_index < 0 or end_index < 0:
        _log_debug(
            f"extract_section: sentinel not found start={start!r}({start_index}) "
            f"end={end!r}({end_index})"
        )
        return []

    names = [_name_column(line) for line in lines[start_index + 1 : end_index + 1]]
    names = [name for name in names if name.strip() and "\t" not in name]

    if not include_help:
        names = [name for name in names if name not in (help_option, COMMANDS_END)]
    return names


def parse_children(
    text: str, include_help: bool = False, help_option: str = DEFAULT_HELP_OPTION
) -> list[str]:
    """Names listed in the ``Commands:`` section of *text*."""
    return extract_section(text, COMMANDS_START, COMMANDS_END, include_help, help_option)


def parse_options(
    text: str, include_help: bool = False, help_option: str = DEFAULT_HELP_OPTION
) -> list[str]:
    """Flags listed in the ``Options:`` section of *text*, ending at *help_option*."""
    return extract_section(text, OPTIONS_START, help_option, include_help, help_option)
