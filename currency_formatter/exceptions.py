"""
Exception hierarchy for the currency formatter.

The four core functions never raise on bad user input (they return "" or 0).
These exceptions cover the cases that are not input noise: magnitudes beyond
the scale table, the strict parser, and broken configuration.
"""

from __future__ import annotations


class CurrencyFormatterError(Exception):
    """Base exception carrying a machine-readable code."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MagnitudeOverflowError(CurrencyFormatterError, ValueError):
    """The integer part needs a scale name beyond the largest one defined."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OUT_OF_RANGE", message, details)


class NumberParseError(CurrencyFormatterError, ValueError):
    """A formatted string could not be read back as a number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NUMBER_UNPARSEABLE", message, details)


class ConfigurationError(CurrencyFormatterError):
    """An environment setting has an invalid value."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CONFIGURATION", message, details)
