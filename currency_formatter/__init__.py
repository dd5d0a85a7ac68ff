"""
Currency Formatter — Persian amount formatting and number-to-words conversion.

Components: NumberFormatter (grouping / parsing) → WordsConverter (Persian
phrases) → LiveAmountInput (framework-agnostic input binding).
"""

__version__ = "1.0.0"

from .formatter import CurrencyFormatter, currency_formatter
from .number_format import (
    format_number,
    parse_formatted_number,
    parse_formatted_number_strict,
)
from .words import number_to_words, number_to_words_with_unit

__all__ = [
    "CurrencyFormatter",
    "currency_formatter",
    "format_number",
    "parse_formatted_number",
    "parse_formatted_number_strict",
    "number_to_words",
    "number_to_words_with_unit",
]
