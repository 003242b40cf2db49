"""
Money Utilities - rounding and formatting of monetary values.

The cart accumulates prices as floats and rounds only when a total is read.
Decimal helpers are provided for callers that need exact minor units.
"""
import math
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Display symbols, keyed by ISO currency code
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

# Currencies whose symbol goes before the amount
PREFIX_CURRENCIES = ("USD", "EUR", "GBP")


def round_cents(value: float) -> float:
    """
    Round a float amount to two decimal places, half-up at the cent boundary.

    The amount is scaled by 100, rounded to the nearest integer with ties going
    toward positive infinity, then scaled back. Operates on the binary float
    value, so 1.005 (stored as 1.00499...) rounds to 1.0. Infinities and NaN
    are returned unchanged.

    Args:
        value: Amount to round

    Returns:
        Rounded float
    """
    if not math.isfinite(value):
        return float(value)
    scaled = float(value) * 100.0
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return whole / 100.0


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Floats go through str to keep the short repr, not the binary expansion
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def to_cents(value: Number) -> int:
    """
    Convert a decimal amount to integer minor units (cents).

    Args:
        value: Amount in major units (e.g., 5.25)

    Returns:
        Amount in minor units (e.g., 525)
    """
    return int((to_decimal(value) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert minor units back to a Decimal amount (525 -> Decimal("5.25"))."""
    return Decimal(cents) / Decimal(100)


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (USD, EUR, GBP, ...)

    Returns:
        Formatted string, e.g. "$5.25" or "5.25 CHF"
    """
    currency = currency.upper()
    amount = to_decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    formatted = f"{amount:,.2f}"
    symbol = CURRENCY_SYMBOLS.get(currency, currency)

    if currency in PREFIX_CURRENCIES:
        if amount < 0:
            return f"-{symbol}{formatted[1:]}"
        return f"{symbol}{formatted}"
    return f"{formatted} {symbol}"
