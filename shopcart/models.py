"""
Pydantic Models - response schemas for callers that display a cart.

- Cart lifecycle state enum
- Entry and summary response models
"""

from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field

from shopcart.config import get_settings
from shopcart.services.money import format_money


# ============================================================
# Enums
# ============================================================

class CartState(str, Enum):
    """Cart lifecycle state."""
    OPEN_EMPTY = "open_empty"
    OPEN_NON_EMPTY = "open_non_empty"
    CHECKED_OUT = "checked_out"


# ============================================================
# Response Models
# ============================================================

class CartEntryResponse(BaseModel):
    """Cart entry as shown to a caller."""
    label: str = Field(description="Item label")
    price: float = Field(description="Unit price as added")


class CartSummary(BaseModel):
    """Read-only snapshot of a cart for display."""
    is_empty: bool = Field(description="True when the cart holds no entries")
    item_count: int = Field(description="Number of entries", ge=0)
    total_price: float = Field(description="Total rounded to two decimal places")
    checked_out: bool = Field(description="Lifecycle flag")
    state: CartState = Field(description="Derived lifecycle state")
    entries: List[CartEntryResponse] = Field(default_factory=list)

    def formatted_total(self, currency: Optional[str] = None) -> str:
        """Total formatted for display, in the configured currency by default."""
        return format_money(self.total_price, currency or get_settings().currency)
