"""Errors raised by the billing core."""

from __future__ import annotations


class BillingError(Exception):
    """Base class for billing errors."""


class InvalidQuantity(BillingError, ValueError):
    """Raised when an order line is added with a quantity below 1."""

    def __init__(self, quantity: int) -> None:
        super().__init__(f"Quantity must be >= 1 (got {quantity})")
        self.quantity = quantity


class PersistenceFailure(BillingError):
    """Raised when a receipt could not be written to disk."""
