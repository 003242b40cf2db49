"""Stateless helpers used by the cart."""
from .money import round_cents, to_decimal, to_cents, from_cents, format_money

__all__ = [
    "round_cents",
    "to_decimal",
    "to_cents",
    "from_cents",
    "format_money",
]
