"""Cart entry model."""
from dataclasses import dataclass

from shopcart.errors import ERROR_SNAPSHOT_INVALID_ENTRY


@dataclass(frozen=True)
class CartEntry:
    """Single item instance in the cart."""
    label: str
    price: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "label": self.label,
            "price": self.price,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartEntry":
        """Create from dictionary."""
        try:
            label = data["label"]
            price = float(data["price"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"{ERROR_SNAPSHOT_INVALID_ENTRY}: {e}") from e
        if not isinstance(label, str):
            raise ValueError(f"{ERROR_SNAPSHOT_INVALID_ENTRY}: label must be a string")
        return cls(label=label, price=price)
