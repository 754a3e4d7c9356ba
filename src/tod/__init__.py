# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Tod - task valuation and ordering for Todoist."""

__version__ = "0.1.0"
