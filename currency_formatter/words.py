"""
Convert numbers to Persian words.

Supported patterns:
    1001        → "یک هزار و یک"
    250000      → "دویست و پنجاه هزار"
    -5.25       → "منفی پنج ممیز بیست و پنج"
    0           → "صفر"
    1234 + unit → "یک هزار و دویست و سی و چهار تومان"

Integers are read in three-digit groups from the least significant end, each
group is spelled out and tagged with its scale name, then the groups are
joined in reading order with «و». The fraction (up to 8 digits) is read as a
plain integer after dropping trailing zeros: 0.50 → «ممیز پنج», 0.25 →
«ممیز بیست و پنج».
"""

from __future__ import annotations

import logging
from decimal import Decimal

from .exceptions import MagnitudeOverflowError
from .number_format import NumberLike, round_half_up, to_decimal

logger = logging.getLogger(__name__)

# ─── Word Lookup Tables ──────────────────────────────────────────────

ONES: tuple[str, ...] = (
    "",
    "یک",
    "دو",
    "سه",
    "چهار",
    "پنج",
    "شش",
    "هفت",
    "هشت",
    "نه",
)

TEENS: tuple[str, ...] = (
    "ده",
    "یازده",
    "دوازده",
    "سیزده",
    "چهارده",
    "پانزده",
    "شانزده",
    "هفده",
    "هجده",
    "نوزده",
)

TENS: tuple[str, ...] = (
    "",
    "",
    "بیست",
    "سی",
    "چهل",
    "پنجاه",
    "شصت",
    "هفتاد",
    "هشتاد",
    "نود",
)

HUNDREDS: tuple[str, ...] = (
    "",
    "یکصد",
    "دویست",
    "سیصد",
    "چهارصد",
    "پانصد",
    "ششصد",
    "هفتصد",
    "هشتصد",
    "نهصد",
)

# Indexed by group position: units, thousand, million, billion, trillion
SCALES: tuple[str, ...] = ("", "هزار", "میلیون", "میلیارد", "تریلیون")

ZERO_WORD = "صفر"
NEGATIVE_WORD = "منفی"
POINT_WORD = "ممیز"
CONNECTIVE = " و "

# Fractional digits kept before reading the fraction
FRACTION_DIGITS = 8

# First integer that would need a scale name beyond SCALES
MAX_MAGNITUDE = 1000 ** len(SCALES)


# ─── Group Converter ─────────────────────────────────────────────────


def convert_group(n: int) -> str:
    """Spell out a value in [0, 999]. Returns "" for 0.

    Raises:
        ValueError: If n is outside [0, 999].
    """
    if not 0 <= n <= 999:
        raise ValueError(f"Group value must be in [0, 999], got {n}")
    if n == 0:
        return ""

    hundred, remainder = divmod(n, 100)
    ten, one = divmod(remainder, 10)

    hundred_word = HUNDREDS[hundred]
    if remainder == 0:
        return hundred_word

    if remainder < 10:
        remainder_words = ONES[one]
    elif remainder < 20:
        remainder_words = TEENS[remainder - 10]
    else:
        remainder_words = TENS[ten]
        if one:
            remainder_words += CONNECTIVE + ONES[one]

    if hundred_word:
        return hundred_word + CONNECTIVE + remainder_words
    return remainder_words


# ─── Integer / Fraction Converters ───────────────────────────────────


def convert_integer(n: int) -> str:
    """Spell out a non-negative integer below 10^15.

    Raises:
        ValueError: If n is negative.
        MagnitudeOverflowError: If n needs a scale name past «تریلیون».
    """
    if n < 0:
        raise ValueError(f"convert_integer expects a non-negative value, got {n}")
    if n >= MAX_MAGNITUDE:
        raise MagnitudeOverflowError(
            f"{n} is too large to spell out (largest scale is {SCALES[-1]!r})",
            {"value": str(n), "max_exclusive": str(MAX_MAGNITUDE)},
        )
    if n == 0:
        return ZERO_WORD

    groups: list[str] = []
    scale_index = 0
    while n > 0:
        n, group = divmod(n, 1000)
        if group:
            words = convert_group(group)
            if scale_index > 0:
                words += " " + SCALES[scale_index]
            groups.append(words)
        scale_index += 1

    return CONNECTIVE.join(reversed(groups))


def convert_fraction(digits: str) -> str:
    """Spell out the digits after the decimal marker.

    "25" → "ممیز بیست و پنج", "50" → "ممیز پنج", "000" → "".
    """
    significant = digits.rstrip("0")
    if not significant:
        return ""
    return f"{POINT_WORD} {convert_integer(int(significant))}"


# ─── Public API ──────────────────────────────────────────────────────


def number_to_words(value: NumberLike | None) -> str:
    """Convert a number to Persian words.

    Args:
        value: int, float, Decimal or numeric string (separators and
            Persian digits allowed).

    Returns:
        The phrase, "صفر" for zero, or "" when value is absent or not a
        finite number.

    Raises:
        MagnitudeOverflowError: If the integer part is 10^15 or more.
    """
    number = to_decimal(value)
    if number is None:
        return ""
    if number.is_zero():
        return ZERO_WORD

    if number.copy_abs() >= MAX_MAGNITUDE:
        raise MagnitudeOverflowError(
            f"{number} is too large to spell out (largest scale is {SCALES[-1]!r})",
            {"value": str(number), "max_exclusive": str(MAX_MAGNITUDE)},
        )

    rounded = round_half_up(number.copy_abs(), FRACTION_DIGITS)
    integer_digits, _, fraction_digits = f"{rounded:f}".partition(".")

    words = convert_integer(int(integer_digits))
    fraction_words = convert_fraction(fraction_digits)
    if fraction_words:
        words = f"{words} {fraction_words}"

    # Sign comes from the input, not from the rounded value
    if number < 0:
        words = f"{NEGATIVE_WORD} {words}"

    logger.debug("number_to_words(%s) -> %s", number, words)
    return words


def number_to_words_with_unit(value: NumberLike | None, unit_name: str) -> str:
    """Persian words followed by a unit/currency name, e.g. "... تومان".

    Returns "" when number_to_words does; zero still reads "صفر <unit>".
    """
    words = number_to_words(value)
    if not words:
        return ""
    return f"{words} {unit_name}"
