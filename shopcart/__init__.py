"""shopcart - a cart with item accumulation, pricing and a checkout lock."""
from shopcart.cart import Cart, CartEntry, CartState
from shopcart.errors import InvalidStateError

__version__ = "0.1.0"

__all__ = [
    "Cart",
    "CartEntry",
    "CartState",
    "InvalidStateError",
    "__version__",
]
