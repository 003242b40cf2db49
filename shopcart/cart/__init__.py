"""Cart package: entry model and the cart state machine."""
from shopcart.models import CartState
from .models import CartEntry
from .service import Cart

__all__ = [
    "CartEntry",
    "CartState",
    "Cart",
]
