"""Cart state machine: ordered entries, running total and checkout lock."""
from typing import List, Tuple

from shopcart.errors import (
    ERROR_ADD_AFTER_CHECKOUT,
    ERROR_CHECKOUT_EMPTY,
    ERROR_SNAPSHOT_INVALID_TOTAL,
    ERROR_SNAPSHOT_INVALID_ENTRY,
    InvalidStateError,
)
from shopcart.logging import get_logger, sanitize_string_for_logging
from shopcart.models import CartEntryResponse, CartState, CartSummary
from shopcart.services.money import round_cents
from .models import CartEntry

logger = get_logger(__name__)


class Cart:
    """
    Shopping cart with a one-way checkout transition.

    Lifecycle:
    - open_empty -> open_non_empty via add_item
    - open_non_empty -> checked_out via checkout
    - any state -> open_empty via clear

    The total is a float accumulator updated on every add/remove and rounded
    to cents only when read. Access must be serialized by the owner.
    """

    def __init__(self):
        self._entries: List[CartEntry] = []
        self._total_price = 0.0
        self._checked_out = False

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"Cart(items={len(self._entries)}, total={self.get_total_price()}, "
            f"checked_out={self._checked_out})"
        )

    @property
    def entries(self) -> Tuple[CartEntry, ...]:
        """Entries in insertion order."""
        return tuple(self._entries)

    @property
    def state(self) -> CartState:
        if self._checked_out:
            return CartState.CHECKED_OUT
        if self._entries:
            return CartState.OPEN_NON_EMPTY
        return CartState.OPEN_EMPTY

    def add_item(self, label: str, price: float) -> None:
        """
        Append an entry and add its price to the total.

        Raises:
            InvalidStateError: if the cart is checked out
        """
        if self._checked_out:
            logger.warning(
                f"Rejected add of '{sanitize_string_for_logging(label)}': cart is checked out"
            )
            raise InvalidStateError(ERROR_ADD_AFTER_CHECKOUT)
        self._entries.append(CartEntry(label=label, price=price))
        self._total_price += price
        logger.debug(f"Added '{sanitize_string_for_logging(label)}' at {price}")

    def remove_item(self, label: str, price: float) -> bool:
        """
        Remove the first entry with this label and subtract ``price``.

        The caller-supplied price is subtracted, not the stored entry's price.
        Removal is not blocked by checkout. A missing label is a no-op.

        Returns:
            True if an entry was removed
        """
        for index, entry in enumerate(self._entries):
            if entry.label == label:
                del self._entries[index]
                self._total_price -= price
                logger.debug(f"Removed '{sanitize_string_for_logging(label)}' at {price}")
                return True
        return False

    def get_item_count(self) -> int:
        return len(self._entries)

    def get_total_price(self) -> float:
        """Running total rounded half-up to two decimal places."""
        return round_cents(self._total_price)

    def is_empty(self) -> bool:
        return not self._entries

    def checkout(self) -> None:
        """
        Lock the cart against further additions.

        Checking out an already checked-out cart is a no-op.

        Raises:
            InvalidStateError: if the cart is empty
        """
        if self.is_empty():
            logger.warning("Rejected checkout: cart is empty")
            raise InvalidStateError(ERROR_CHECKOUT_EMPTY)
        if not self._checked_out:
            logger.info(f"Checked out cart with {len(self._entries)} items")
        self._checked_out = True

    def is_checked_out(self) -> bool:
        return self._checked_out

    def clear(self) -> None:
        """Reset to the initial empty, open state."""
        self._entries.clear()
        self._total_price = 0.0
        self._checked_out = False
        logger.debug("Cart cleared")

    def summary(self) -> CartSummary:
        """Display-ready summary of the cart."""
        return CartSummary(
            is_empty=self.is_empty(),
            item_count=self.get_item_count(),
            total_price=self.get_total_price(),
            checked_out=self._checked_out,
            state=self.state,
            entries=[
                CartEntryResponse(label=entry.label, price=entry.price)
                for entry in self._entries
            ],
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "entries": [entry.to_dict() for entry in self._entries],
            "total_price": self._total_price,
            "checked_out": self._checked_out,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        """
        Rebuild a cart from ``to_dict`` output.

        Entries, the unrounded total and the checkout flag are restored as
        stored, so any state the cart can reach round-trips. Without a
        ``total_price`` key the total is summed from the entry prices.

        Raises:
            ValueError: on malformed data
        """
        if not isinstance(data, dict):
            raise ValueError(f"{ERROR_SNAPSHOT_INVALID_ENTRY}: expected a mapping")
        raw_entries = data.get("entries", [])
        if not isinstance(raw_entries, list):
            raise ValueError(f"{ERROR_SNAPSHOT_INVALID_ENTRY}: entries must be a list")

        entries = [CartEntry.from_dict(raw) for raw in raw_entries]

        if "total_price" in data:
            try:
                total_price = float(data["total_price"])
            except (TypeError, ValueError) as e:
                raise ValueError(f"{ERROR_SNAPSHOT_INVALID_TOTAL}: {e}") from e
        else:
            total_price = 0.0
            for entry in entries:
                total_price += entry.price

        cart = cls()
        cart._entries = entries
        cart._total_price = total_price
        cart._checked_out = bool(data.get("checked_out", False))
        return cart
