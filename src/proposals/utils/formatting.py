"""Display formatting for proposal terms and money."""

import datetime as dt
import os
from decimal import Decimal
from typing import Iterable

from proposals.models.proposal import HouseRule, ReservationSpan

DEFAULT_CURRENCY_SYMBOL = "$"


def format_currency(amount: Decimal | float | int, symbol: str | None = None) -> str:
    """Format an amount as ``$1,360.00``.

    Negative amounts keep the sign before the symbol (``-$5.00``).
    """
    symbol = symbol if symbol is not None else os.getenv("CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL)
    value = Decimal(str(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_long_date(value: dt.date) -> str:
    """Format a date as ``Wednesday, Jan 15, 2025``."""
    return f"{value:%A}, {value:%b} {value.day}, {value.year}"


def format_short_date(value: dt.date) -> str:
    """Format a date as ``Jan 15, 2025``."""
    return f"{value:%b} {value.day}, {value.year}"


def reservation_length_label(span: ReservationSpan, weeks: int | None) -> str:
    """Label for the reservation length row.

    The 'other' span shows the entered week count instead of its label.
    """
    if span.is_other:
        return f"{weeks} weeks" if weeks is not None else "Not specified"
    return span.label


def house_rules_label(rules: Iterable[HouseRule], empty: str = "None specified") -> str:
    names = [rule.name for rule in rules]
    return ", ".join(names) if names else empty


def nights_per_week_label(count: int) -> str:
    return f"{count} nights/week"
