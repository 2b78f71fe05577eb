# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Recursive discovery of a CLI's command structure from its help output."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Iterable
from typing import Protocol

from .._util.logging_utils import _log_debug
from ..core.config import DEFAULT_HELP_FLAG, DEFAULT_HELP_OPTION
from .extract import parse_children, parse_options
from .registry import StructureRegistry


class HelpProviderError(RuntimeError):
    """The target CLI could not be run to obtain help text."""


class HelpTextProvider(Protocol):
    def get_help(self, path: str) -> str:
        """Return the raw help output for the space-joined command *path*."""
        ...


def help_command(target: str, path: str, help_flag: str = DEFAULT_HELP_FLAG) -> list[str]:
    """Argument vector that prints help for *path* of the *target* CLI.

    An empty *path* asks for the top-level help.
    """
    return [*shlex.split(target), *path.split(), help_flag]


def format_help_command(target: str, path: str, help_flag: str = DEFAULT_HELP_FLAG) -> str:
    return shlex.join(help_command(target, path, help_flag))


class SubprocessHelpProvider:
    """Runs the target CLI with the help flag and returns its stdout.

    A nonzero exit status is tolerated; only a failure to start the program
    (or a timeout) raises :class:`HelpProviderError`.
    """

    def __init__(
        self,
        target: str,
        help_flag: str = DEFAULT_HELP_FLAG,
        timeout: float | None = None,
    ) -> None:
        if not shlex.split(target):
            raise ValueError("target command must not be empty")
        self.target = target
        self.help_flag = help_flag
        self.timeout = timeout

    def get_help(self, path: str) -> str:
        cmd = help_command(self.target, path, self.help_flag)
        _log_debug(f"help: running {shlex.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise HelpProviderError(f"Timed out after {e.timeout}s: {shlex.join(cmd)}")
        except OSError as e:
            raise HelpProviderError(f"Could not run {shlex.join(cmd)}: {e}")

        if result.returncode != 0:
            _log_debug(
                f"help: {shlex.join(cmd)} exited with code {result.returncode}: "
                f"{(result.stderr or '').strip()}"
            )
        return result.stdout or ""


def _discover_path(
    registry: StructureRegistry,
    path: str,
    provider: HelpTextProvider,
    include_help: bool,
    help_option: str,
) -> None:
    text = provider.get_help(path)

    # The "help [command]" entry is never a child, whatever include_help says.
    # Children go into the registry before their parent.
    for child in parse_children(text, False, help_option):
        _discover_path(registry, f"{path} {child}", provider, include_help, help_option)

    options = parse_options(text, include_help, help_option)
    registry.upsert(path, options)


def discover(
    root_names: Iterable[str],
    provider: HelpTextProvider,
    include_help: bool = False,
    help_option: str = DEFAULT_HELP_OPTION,
    registry: StructureRegistry | None = None,
) -> StructureRegistry:
    """Build a registry by walking the help output of every root command.

    Each command path costs exactly one ``provider.get_help`` call. The walk
    is depth-first and only stops where help output lists no further
    commands.
    """
    registry = registry if registry is not None else StructureRegistry()
    for name in root_names:
        _log_debug(f"discover: root {name}")
        _discover_path(registry, name, provider, include_help, help_option)
    return registry
