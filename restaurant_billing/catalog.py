"""In-memory menu catalog with dense, positional ids."""

from __future__ import annotations

from typing import Iterator

from restaurant_billing.logging_setup import get_logger
from restaurant_billing.models import MenuItem

logger = get_logger(__name__)


class Catalog:
    """Ordered set of sellable menu items.

    Insertion order is both the display order and the renumbering order. After
    a successful removal the surviving items are renumbered ``1..N`` so ids
    stay contiguous; ids are ranks, not permanent identities.
    """

    def __init__(self, items: list[MenuItem] | None = None) -> None:
        self._items: list[MenuItem] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> list[MenuItem]:
        """Return a snapshot of the catalog in insertion order."""
        return list(self._items)

    def find_by_id(self, item_id: int) -> MenuItem | None:
        """Return the first item with ``item_id``, or None when not found."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def next_id(self) -> int:
        return max((item.id for item in self._items), default=0) + 1

    def add(self, name: str, unit_price: float) -> MenuItem:
        """Append a new item with id ``max(existing ids, 0) + 1``."""
        name = name.strip()
        if not name:
            raise ValueError("Menu item name must not be empty")
        if unit_price < 0:
            raise ValueError("Menu item price must be non-negative")

        item = MenuItem(id=self.next_id(), name=name, unit_price=float(unit_price))
        self._items.append(item)
        logger.info("catalog_add id=%d name=%r price=%.2f", item.id, item.name, item.unit_price)
        return item

    def remove_by_id(self, item_id: int) -> bool:
        """Remove the first item with ``item_id`` and renumber the rest.

        Returns False and leaves the catalog untouched when no item matches.
        """
        for idx, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[idx]
                logger.info("catalog_remove id=%d name=%r", item_id, item.name)
                self._renumber()
                return True
        logger.info("catalog_remove_not_found id=%d", item_id)
        return False

    def _renumber(self) -> None:
        for new_id, item in enumerate(self._items, start=1):
            item.id = new_id
