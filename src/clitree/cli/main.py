#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

import argparse

import argcomplete

from .. import __version__
from .commands import info, ls

_COMMAND_MODULES = (ls, info)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="clitree",
        description="clitree – discover, cache and list the command tree of a multi-command CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Quick start:\n"
            "  1. Point at a CLI:  clitree --target 'node dist/and-cli.js' catalog\n"
            "  2. List it:         clitree --target 'node dist/and-cli.js' ls\n"
            "  3. Refresh:         clitree ls --skip-cache\n"
            "\n"
            "The target is run as '<target> <command path> -h' once per command.\n"
            "Set target.command in the global config (see 'clitree config') to\n"
            "avoid repeating --target.\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"clitree {__version__}")
    parser.add_argument(
        "--target",
        help="Command line of the CLI to inspect (overrides CLITREE_TARGET and target.command)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)
    for module in _COMMAND_MODULES:
        module.register(sub)

    argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)

    for module in _COMMAND_MODULES:
        if module.dispatch(args):
            return
    parser.error("Unknown command")


if __name__ == "__main__":
    main()
