"""
CurrencyFormatter — one object carrying the default options.

Flow for a single amount:
  ┌──────────┐
  │  value   │  int / float / Decimal / "1,234.5" / "۱۲۳۴"
  └────┬─────┘
       │
  ┌────▼─────┐     ┌──────────┐
  │  format  │     │  words   │   ← independent pure functions
  └────┬─────┘     └────┬─────┘
       └───────┬────────┘
        ┌──────▼──────┐
        │  Rendering  │   ← AmountRendering (formatted + words + unit)
        └─────────────┘

The module-level `currency_formatter` instance is shared and holds no state:
the field registry is only created once `bind_input` is called, so live
fields belong on formatters the caller builds.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from .live_input import FieldRegistry, LiveAmountInput
from .models import AmountRendering, ChangeCallback, FieldOptions
from .number_format import (
    NumberLike,
    format_number,
    parse_formatted_number,
    parse_formatted_number_strict,
    to_decimal,
)
from .words import number_to_words, number_to_words_with_unit

logger = logging.getLogger(__name__)


class CurrencyFormatter:
    """Formatting, parsing and Persian words with default options applied.

    Usage:
        formatter = CurrencyFormatter(FieldOptions(unit_name="تومان"))
        formatter.format_number(1234567)     # "1,234,567"
        formatter.number_to_words_with_unit(1001)
                                             # "یک هزار و یک تومان"
    """

    def __init__(self, options: FieldOptions | None = None):
        self.options = options or FieldOptions()
        self._fields: FieldRegistry | None = None

    @property
    def fields(self) -> FieldRegistry:
        """Bound live fields; created on first use."""
        if self._fields is None:
            self._fields = FieldRegistry()
        return self._fields

    @property
    def is_stateless(self) -> bool:
        """True while no live field has been bound through this formatter."""
        return self._fields is None

    # ─── Formatting / Parsing ───────────────────────────────────────

    def format_number(self, value: NumberLike | None, decimal_places: int | None = None) -> str:
        if decimal_places is None:
            decimal_places = self.options.decimal_places
        return format_number(value, decimal_places)

    def parse_formatted_number(self, formatted: object, strict: bool = False) -> Decimal:
        if strict:
            return parse_formatted_number_strict(formatted)
        return parse_formatted_number(formatted)

    # ─── Words ──────────────────────────────────────────────────────

    def number_to_words(self, value: NumberLike | None) -> str:
        return number_to_words(value)

    def number_to_words_with_unit(
        self, value: NumberLike | None, unit_name: str | None = None
    ) -> str:
        return number_to_words_with_unit(value, unit_name or self.options.unit_name)

    def render(
        self,
        value: NumberLike | None,
        unit_name: str | None = None,
        decimal_places: int | None = None,
    ) -> AmountRendering:
        """Produce every textual form of `value` in one call.

        Invalid input gives a rendering with value=None and empty strings.

        Raises:
            MagnitudeOverflowError: If the amount is too large for words.
        """
        unit = unit_name or self.options.unit_name
        places = self.options.decimal_places if decimal_places is None else decimal_places

        rendering = AmountRendering(
            value=to_decimal(value),
            formatted=format_number(value, places),
            words=number_to_words(value),
            words_with_unit=number_to_words_with_unit(value, unit),
            unit_name=unit,
            decimal_places=places,
        )
        logger.debug("Rendered %r as %r", value, rendering.formatted)
        return rendering

    # ─── Live Input ─────────────────────────────────────────────────

    def bind_input(
        self,
        field_id: str,
        options: FieldOptions | None = None,
        on_change: ChangeCallback | None = None,
    ) -> LiveAmountInput:
        """Bind (or rebind) a live-formatted field.

        Options default to this formatter's; `on_change`, when given,
        overrides the callback in the options.
        """
        field_options = options or self.options
        if on_change is not None:
            field_options = field_options.model_copy(update={"on_change": on_change})
        return self.fields.bind(field_id, field_options)


# Shared instance
currency_formatter = CurrencyFormatter()
