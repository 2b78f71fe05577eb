# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config and state directories."""

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "clitree"
CACHE_FILENAME = "commands.json"
LOG_FILENAME = "clitree.log"


def config_root() -> Path:
    """
    Base directory for per-user configuration and the command cache.

    Priority:
      1. CLITREE_CONFIG_DIR
      2. platformdirs user config dir (~/.config/clitree on Linux)
    """
    env = os.getenv("CLITREE_CONFIG_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. CLITREE_STATE_DIR
      2. platformdirs user data dir (~/.local/share/clitree on Linux)
    """
    env = os.getenv("CLITREE_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_data_dir(APP_NAME))


def cache_path() -> Path:
    """Location of the cached command structure."""
    return config_root() / CACHE_FILENAME


def log_path() -> Path:
    return state_root() / LOG_FILENAME
