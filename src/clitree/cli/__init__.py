# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for clitree."""
