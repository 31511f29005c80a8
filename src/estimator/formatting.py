# src/estimator/formatting.py
from __future__ import annotations

import numbers
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Union

_SYMBOLS: Dict[str, str] = {"USD": "$"}


def _whole_units(amount: Union[int, float]) -> int:
    # Ties round away from zero, like browser currency formatting
    if isinstance(amount, numbers.Integral):
        return int(amount)
    return int(Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_currency(amount: Union[int, float], currency: str = "USD") -> str:
    """
    Whole-unit currency string with thousands grouping.

    1234 -> "$1,234", -5 -> "-$5", 2.5 -> "$3". Codes without a known symbol
    render as "EUR 1,234".
    """
    value = _whole_units(amount)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,}"
    symbol = _SYMBOLS.get(currency.upper())
    if symbol is None:
        return f"{sign}{currency.upper()} {digits}"
    return f"{sign}{symbol}{digits}"


def format_factor(value: float) -> str:
    """1.0625 -> "1.06x"."""
    return f"{value:.2f}x"
