"""Currency formatting for EUR amounts."""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

CURRENCY_SYMBOL = "€"
CURRENCY_CODE = "EUR"


def _to_decimal(amount: Any, decimals: int) -> Decimal:
    try:
        value = Decimal(str(amount if amount is not None else 0))
    except (InvalidOperation, ValueError, TypeError):
        value = Decimal(0)
    return value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_currency(amount: Any, show_symbol: bool = True, decimals: int = 2) -> str:
    """
    Formats an amount as EUR.

    >>> format_currency(12.5)
    '€12.50'
    >>> format_currency(12.5, show_symbol=False, decimals=1)
    '12.5'
    """
    formatted = f"{_to_decimal(amount, decimals):.{decimals}f}"
    if show_symbol:
        return f"{CURRENCY_SYMBOL}{formatted}"
    return formatted


def format_price(amount: Any) -> str:
    return format_currency(amount)


def get_currency_symbol() -> str:
    return CURRENCY_SYMBOL


def get_currency_code() -> str:
    return CURRENCY_CODE


__all__ = [
    "CURRENCY_SYMBOL",
    "CURRENCY_CODE",
    "format_currency",
    "format_price",
    "get_currency_symbol",
    "get_currency_code",
]
