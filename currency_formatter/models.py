"""
Pydantic models for field options and conversion results.

FieldOptions is the configuration contract of a bound input field; the
other two models are the typed results handed back to callers (the live
input binding and the HTTP API).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DECIMAL_PLACES = 2
DEFAULT_UNIT_NAME = "واحد"

# Callback signature: (numeric value, formatted text)
ChangeCallback = Callable[[Decimal, str], None]


# ─── Field Options ──────────────────────────────────────────────────


class FieldOptions(BaseModel):
    """Options recognised by a live amount field."""

    model_config = ConfigDict(frozen=True)

    decimal_places: int = Field(default=DEFAULT_DECIMAL_PLACES, ge=0, le=8)
    unit_name: str = Field(default=DEFAULT_UNIT_NAME, min_length=1)
    show_words_display: bool = True
    on_change: Optional[ChangeCallback] = Field(default=None, exclude=True)


# ─── Live Input Update ──────────────────────────────────────────────


class InputUpdate(BaseModel):
    """What the input field should show after one input event."""

    text: str  # New field content
    cursor: int  # New caret position
    amount: Optional[Decimal] = None  # None while the text is not a number
    changed: bool = False  # True if on_change was fired for this event


# ─── Amount Rendering ───────────────────────────────────────────────


class AmountRendering(BaseModel):
    """Every textual form of one amount."""

    value: Optional[Decimal] = None
    formatted: str = ""
    words: str = ""
    words_with_unit: str = ""
    unit_name: str = DEFAULT_UNIT_NAME
    decimal_places: int = DEFAULT_DECIMAL_PLACES
