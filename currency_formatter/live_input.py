"""
Framework-agnostic live formatting for an amount input field.

The widget layer (browser, Qt, Telegram keyboard, ...) forwards raw events
and applies the returned InputUpdate:

    field = registry.bind("price", FieldOptions(unit_name="تومان"))
    update = field.handle_input("1234567", cursor=7)
    update.text    → "1,234,567"
    update.cursor  → 9
    field.words_display(update.text)
                   → "یک میلیون و دویست و سی و چهار هزار و پانصد و شصت و هفت تومان"

Each field id maps to exactly one LiveAmountInput; binding an id again
replaces the previous handler instead of stacking a second one.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

from .models import FieldOptions, InputUpdate
from .number_format import (
    DECIMAL_MARKER,
    format_number,
    normalize_digits,
    parse_formatted_number,
)
from .words import number_to_words_with_unit

logger = logging.getLogger(__name__)

_DISALLOWED = re.compile(r"[^0-9.]")


# ─── Raw Input Cleanup ───────────────────────────────────────────────


def sanitize_input(raw: str, decimal_places: int) -> str:
    """Reduce raw field text to digits and at most one decimal marker.

    - Persian / Arabic-Indic digits become ASCII; everything else but
      digits and "." is dropped (separators included).
    - Only the first "." survives; digits after later markers are kept.
    - The fraction is cut to `decimal_places` digits (no rounding while
      the user is typing).

    "1,2.3.4" → "12.34", "۱۲۳" → "123", "5.6789" (2 places) → "5.67".
    """
    cleaned = _DISALLOWED.sub("", normalize_digits(raw))
    integer_part, marker, fraction = cleaned.partition(DECIMAL_MARKER)
    if not marker or decimal_places == 0:
        return integer_part
    fraction = fraction.replace(DECIMAL_MARKER, "")[:decimal_places]
    return integer_part + DECIMAL_MARKER + fraction


# ─── Live Field ──────────────────────────────────────────────────────


class LiveAmountInput:
    """Formatting state of one bound input field.

    Usage:
        field = LiveAmountInput(FieldOptions(decimal_places=0))
        update = field.handle_input(raw_text, cursor)
        widget.set_text(update.text); widget.set_cursor(update.cursor)
    """

    def __init__(self, options: FieldOptions | None = None):
        self.options = options or FieldOptions()
        self._last_text = ""

    @property
    def last_text(self) -> str:
        """The text most recently reported through on_change."""
        return self._last_text

    def handle_input(self, raw: str, cursor: int | None = None) -> InputUpdate:
        """Process one input-change event.

        Args:
            raw: The field content as the user left it.
            cursor: Caret position inside `raw` (defaults to the end).

        Returns:
            InputUpdate with the regrouped text and the shifted caret.
        """
        if cursor is None:
            cursor = len(raw)

        cleaned = sanitize_input(raw, self.options.decimal_places)
        if not cleaned:
            changed = self._notify(Decimal(0), "")
            return InputUpdate(text="", cursor=0, amount=Decimal(0), changed=changed)

        try:
            amount = Decimal(cleaned)
        except InvalidOperation:
            # A lone "." has nothing to format yet
            return InputUpdate(text=cleaned, cursor=min(cursor, len(cleaned)))

        # Regroup the integer part; an unfinished fraction ("12." / "12.0")
        # stays exactly as typed until blur
        integer_part, marker, fraction = cleaned.partition(DECIMAL_MARKER)
        text = format_number(integer_part or "0", 0) + marker + fraction

        new_cursor = cursor + len(text) - len(raw)
        new_cursor = max(0, min(new_cursor, len(text)))

        changed = self._notify(amount, text)
        return InputUpdate(text=text, cursor=new_cursor, amount=amount, changed=changed)

    def handle_blur(self, text: str) -> str:
        """Canonicalize a positive amount when the field loses focus.

        "1,234.5" → "1,234.50" (2 places), "12." → "12". Zero and
        unreadable text come back unchanged.
        """
        amount = parse_formatted_number(text)
        if amount > 0:
            return format_number(amount, self.options.decimal_places)
        return text

    def words_display(self, text: str) -> str:
        """Persian words with the unit name for the words line under the field."""
        if not self.options.show_words_display:
            return ""
        amount = parse_formatted_number(text)
        if amount > 0:
            return number_to_words_with_unit(amount, self.options.unit_name)
        return ""

    def _notify(self, amount: Decimal, text: str) -> bool:
        if text == self._last_text:
            return False
        self._last_text = text
        if self.options.on_change is not None:
            self.options.on_change(amount, text)
        return True


# ─── Field Registry ──────────────────────────────────────────────────


class FieldRegistry:
    """One LiveAmountInput per field id."""

    def __init__(self) -> None:
        self._fields: dict[str, LiveAmountInput] = {}

    def bind(self, field_id: str, options: FieldOptions | None = None) -> LiveAmountInput:
        """Attach a fresh handler to `field_id`, replacing any earlier one."""
        if field_id in self._fields:
            logger.info("Rebinding field %r (previous handler dropped)", field_id)
        field = LiveAmountInput(options)
        self._fields[field_id] = field
        return field

    def unbind(self, field_id: str) -> bool:
        """Detach the handler. Returns False if the field was not bound."""
        return self._fields.pop(field_id, None) is not None

    def get(self, field_id: str) -> LiveAmountInput | None:
        return self._fields.get(field_id)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._fields

    def __len__(self) -> int:
        return len(self._fields)
