"""Domain models for restaurant billing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MenuItem:
    """A sellable catalog entry.

    ``id`` is a positional rank rewritten by ``Catalog`` when an entry is
    removed. ``name`` and ``unit_price`` are never changed after construction.
    """

    id: int
    name: str
    unit_price: float


@dataclass(frozen=True)
class OrderItem:
    """One order line, holding a copy of the menu item as it was when added."""

    menu_item_id: int
    name: str
    unit_price: float
    quantity: int

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class BillingResult:
    """Unrounded totals for one order."""

    subtotal: float
    tax_amount: float
    grand_total: float
