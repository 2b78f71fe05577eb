# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Command structure discovery.

The pieces, leaves first:

- ``extract``: pulls item names out of one section of help output
- ``registry``: flat collection of discovered command nodes with parent links
- ``cache``: JSON persistence of the registry and staleness detection
- ``discovery``: recursive help-text traversal that fills a registry
- ``render``: indented listing of a registry
- ``listing``: ties the above together for the ``ls`` command
"""
