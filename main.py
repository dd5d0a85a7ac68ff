#!/usr/bin/env python3
"""
Currency Formatter — Entry Point
=================================

Prints the formatted amount and its Persian words for each argument.

Usage:
    python main.py                          # Built-in sample amounts
    python main.py 1250000 -5.25 "۱۲۳۴"     # Your own amounts
    CURRENCY_UNIT_NAME=تومان python main.py # Different unit name
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from currency_formatter.config import load_options
from currency_formatter.exceptions import CurrencyFormatterError
from currency_formatter.formatter import CurrencyFormatter
from currency_formatter.models import AmountRendering

load_dotenv()


SAMPLE_AMOUNTS = ["1250000", "1001", "-5.25", "1234.5", "0", "999999999999", "abc"]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_rendering(raw: str, rendering: AmountRendering) -> None:
    print(f"  Input:       {_DIM}{raw}{_RESET}")
    if rendering.value is None:
        print(f"  {_RED}Not a number{_RESET}")
        return
    print(f"  Formatted:   {_BOLD}{rendering.formatted}{_RESET}")
    print(f"  Words:       {rendering.words}")
    print(f"  With unit:   {_GREEN}{rendering.words_with_unit}{_RESET}")


def print_report(formatter: CurrencyFormatter, amounts: list[str]) -> int:
    """Render every amount and print it.

    Returns:
        0 if all amounts rendered, 1 if any was rejected.
    """
    failures = 0
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  AMOUNT REPORT{_RESET}  {_DIM}(unit: {formatter.options.unit_name}, "
          f"{formatter.options.decimal_places} decimal places){_RESET}")
    print(f"{'=' * _WIDTH}")

    for raw in amounts:
        try:
            _print_rendering(raw, formatter.render(raw))
        except CurrencyFormatterError as exc:
            failures += 1
            print(f"  Input:       {_DIM}{raw}{_RESET}")
            print(f"  {_RED}[{exc.code}]{_RESET} {exc}")
        print(f"{'─' * _WIDTH}")

    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Render the amounts given on the command line (or the samples)."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        formatter = CurrencyFormatter(load_options())
    except CurrencyFormatterError as exc:
        print(f"{_RED}[{exc.code}]{_RESET} {exc}", file=sys.stderr)
        sys.exit(2)

    amounts = sys.argv[1:] or SAMPLE_AMOUNTS
    sys.exit(print_report(formatter, amounts))


if __name__ == "__main__":
    main()
