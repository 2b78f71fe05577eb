# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Service layer for clitree.

- ``core``: paths, global config, root-command catalog
- ``structure``: command structure discovery, cache and rendering
- ``_util``: internal helpers shared by both
"""
