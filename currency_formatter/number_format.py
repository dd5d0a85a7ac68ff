"""
Thousands-separator formatting and its inverse.

    format_number(1234567.891)       → "1,234,567.89"
    format_number(100)               → "100"        (zero fraction dropped)
    parse_formatted_number("1,234")  → Decimal("1234")
    parse_formatted_number("abc")    → Decimal("0") (lenient)

All arithmetic goes through Decimal so that 1234.5 stays 1234.5 and rounding
is half-away-from-zero, never banker's rounding or binary float noise.
"""

from __future__ import annotations

import logging
import re
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, localcontext
from typing import Union

from .exceptions import NumberParseError

logger = logging.getLogger(__name__)

NumberLike = Union[int, float, str, Decimal]

GROUP_SEPARATOR = ","
DECIMAL_MARKER = "."

# Separators accepted (and removed) when reading a formatted number back
_INPUT_SEPARATORS: tuple[str, ...] = (GROUP_SEPARATOR, "٬")  # ٬ Arabic thousands

# Persian U+06F0..U+06F9, Arabic-Indic U+0660..U+0669, Arabic decimal ٫
_DIGIT_TRANSLATION = {
    **{0x06F0 + i: str(i) for i in range(10)},
    **{0x0660 + i: str(i) for i in range(10)},
    0x066B: DECIMAL_MARKER,
}

# Plain decimal literal, optional exponent. No underscores, no inf/nan.
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


# ─── Input Normalization ─────────────────────────────────────────────


def normalize_digits(text: str) -> str:
    """Replace Persian / Arabic-Indic digits (and ٫) with their ASCII forms."""
    return text.translate(_DIGIT_TRANSLATION)


def to_decimal(value: object) -> Decimal | None:
    """Coerce user input to a finite Decimal. Returns None when impossible.

    Strings may carry grouping separators, whitespace and non-ASCII digits.
    Floats go through str() so the shortest repr is used (0.1 → "0.1").
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, (float, str)):
        text = _strip_separators(normalize_digits(str(value))).strip()
        if not _NUMBER_PATTERN.fullmatch(text):
            return None
        number = Decimal(text)
    else:
        return None

    if not number.is_finite():
        return None
    return number


def _strip_separators(text: str) -> str:
    for separator in _INPUT_SEPARATORS:
        text = text.replace(separator, "")
    return text


def round_half_up(number: Decimal, places: int) -> Decimal:
    """Round to `places` fractional digits, halves away from zero."""
    with localcontext() as ctx:
        # quantize fails once the coefficient outgrows the context precision
        # or the exponent leaves [Emin, Emax]
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


# ─── Formatting ──────────────────────────────────────────────────────


def group_digits(digits: str) -> str:
    """Insert a grouping separator every three digits from the right.

    "1234567" → "1,234,567". Expects an unsigned run of ASCII digits.
    """
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return GROUP_SEPARATOR.join(groups)


def format_number(value: NumberLike | None, decimal_places: int = 2) -> str:
    """Format a number with thousands separators.

    Args:
        value: int, float, Decimal or numeric string. None / "" / garbage
            yield "", which callers treat as "no value".
        decimal_places: Fractional digits to round to (half away from zero).

    Returns:
        e.g. "1,234,567.89". A fraction that rounds to all zeros is dropped
        entirely ("10.00" → "10"); any other fraction is kept as rounded
        ("1,234.50").

    Raises:
        ValueError: If decimal_places is negative.
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be >= 0, got {decimal_places}")

    number = to_decimal(value)
    if number is None:
        return ""

    rounded = round_half_up(number, decimal_places)
    integer_digits, _, fraction_digits = f"{rounded.copy_abs():f}".partition(".")

    # Rounded zero carries no sign
    sign = "-" if rounded < 0 else ""
    formatted = sign + group_digits(integer_digits)

    if fraction_digits.strip("0"):
        formatted += DECIMAL_MARKER + fraction_digits
    return formatted


# ─── Parsing ─────────────────────────────────────────────────────────


def parse_formatted_number_strict(formatted: object) -> Decimal:
    """Read a separator-formatted string back into a Decimal.

    Raises:
        NumberParseError: If the cleaned text is empty or not a finite number.
    """
    if formatted is None:
        raise NumberParseError("No value to parse", {"input": None})

    cleaned = _strip_separators(normalize_digits(str(formatted))).strip()
    if not cleaned:
        raise NumberParseError("Empty value cannot be parsed", {"input": str(formatted)})

    if not _NUMBER_PATTERN.fullmatch(cleaned):
        raise NumberParseError(f"Not a number: {formatted!r}", {"input": str(formatted)})
    return Decimal(cleaned)


def parse_formatted_number(formatted: object) -> Decimal:
    """Lenient inverse of format_number: anything unreadable becomes 0.

    There is no way to tell an explicit "0" from garbage here; use
    parse_formatted_number_strict when that matters.
    """
    try:
        return parse_formatted_number_strict(formatted)
    except NumberParseError as exc:
        logger.debug("Lenient parse fell back to 0: %s", exc)
        return Decimal(0)
