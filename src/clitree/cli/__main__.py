# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""CLI entry point for ``python -m clitree.cli``."""

from .main import main

if __name__ == "__main__":
    main()
