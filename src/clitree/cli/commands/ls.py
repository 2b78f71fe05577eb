# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""The ``ls`` command: list every command and option of the target CLI."""

from __future__ import annotations

import argparse

from ...lib.core.catalog import resolve_root_names
from ...lib.core.config import get_help_option, get_list_defaults
from ...lib.structure.cache import CacheStore
from ...lib.structure.discovery import HelpProviderError
from ...lib.structure.listing import DEFAULT_OPTIONS, ListCommands, ListOptions
from ...ui_utils.terminal import error, info, success, supports_color
from ._common import build_provider, load_catalog

NAMES = ("ls", "commands")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``ls`` subcommand (alias ``commands``)."""
    p_ls = subparsers.add_parser(
        "ls",
        aliases=["commands"],
        help="List all commands/options",
        description=(
            "Discover the target CLI's commands by running their help output, "
            "cache the result and print it as an indented list."
        ),
    )
    p_ls.add_argument(
        "-i",
        "--indent",
        type=_non_negative_int,
        default=None,
        help=f"Number of spaces to indent each level (default: {DEFAULT_OPTIONS.indent})",
    )
    p_ls.add_argument(
        "--include-help",
        action="store_true",
        default=None,
        help="Include the help option for each command",
    )
    p_ls.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Do not colorize command/options in output",
    )
    p_ls.add_argument(
        "-p",
        "--prefix",
        default=None,
        help=f'Prefix to display before each command/option (default: "{DEFAULT_OPTIONS.prefix}")',
    )
    p_ls.add_argument(
        "--skip-cache",
        action="store_true",
        default=None,
        help="Skip attempting to read cached command list file",
    )


def resolve_options(args: argparse.Namespace) -> ListOptions:
    """Defaults, overlaid by the ``ls:`` config section, overlaid by flags."""
    cfg = get_list_defaults()
    return DEFAULT_OPTIONS.merged(
        include_help=cfg.get("include_help"),
        indent=cfg.get("indent"),
        use_color=cfg.get("color", supports_color()),
        prefix=cfg.get("prefix"),
        skip_cache=cfg.get("skip_cache"),
    ).merged(
        include_help=args.include_help,
        indent=args.indent,
        use_color=args.color,
        prefix=args.prefix,
        skip_cache=args.skip_cache,
    )


def cmd_ls(args: argparse.Namespace) -> None:
    options = resolve_options(args)
    provider = build_provider(args)
    help_option = get_help_option()
    try:
        root_names = resolve_root_names(provider, load_catalog(), help_option)
        if not root_names:
            error(f"No root commands found for {provider.target}; nothing to list.")
            return
        ListCommands(
            root_names,
            provider,
            CacheStore(on_info=info, on_error=error),
            options,
            help_option=help_option,
            on_info=info,
            on_success=success,
        ).run()
    except HelpProviderError as e:
        raise SystemExit(str(e))


def dispatch(args: argparse.Namespace) -> bool:
    """Handle ``ls``/``commands``.  Returns True if handled."""
    if args.cmd in NAMES:
        cmd_ls(args)
        return True
    return False
