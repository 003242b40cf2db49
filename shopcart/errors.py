"""
Cart Errors

Centralized error messages and the exception raised for illegal cart
transitions.
"""

# Lifecycle errors
ERROR_ADD_AFTER_CHECKOUT = "Cannot add items after checkout"
ERROR_CHECKOUT_EMPTY = "Cannot checkout empty cart"

# Snapshot errors
ERROR_SNAPSHOT_INVALID_ENTRY = "Invalid cart entry in snapshot"
ERROR_SNAPSHOT_INVALID_TOTAL = "Invalid cart total in snapshot"


class InvalidStateError(RuntimeError):
    """Operation is not allowed in the cart's current lifecycle state."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


__all__ = [
    "ERROR_ADD_AFTER_CHECKOUT",
    "ERROR_CHECKOUT_EMPTY",
    "ERROR_SNAPSHOT_INVALID_ENTRY",
    "ERROR_SNAPSHOT_INVALID_TOTAL",
    "InvalidStateError",
]
