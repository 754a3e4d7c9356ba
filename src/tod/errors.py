# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Error types raised by Tod."""


class TodError(Exception):
    """Base class for all Tod errors."""


class ParseError(TodError):
    """A due date string could not be parsed."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Could not parse '{value}': {reason}")


class TimezoneError(TodError):
    """A timezone identifier did not resolve to a known zone."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown timezone '{name}'")


class ConfigError(TodError):
    """The configuration file or its values are invalid."""
