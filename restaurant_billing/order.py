"""Session-scoped customer order."""

from __future__ import annotations

from typing import Iterator

from restaurant_billing.errors import InvalidQuantity
from restaurant_billing.logging_setup import get_logger
from restaurant_billing.models import MenuItem, OrderItem

logger = get_logger(__name__)


class Order:
    """Order lines in the order they were added.

    Adding the same menu item twice produces two separate lines.
    """

    def __init__(self) -> None:
        self._items: list[OrderItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[OrderItem]:
        return iter(list(self._items))

    def add_item(self, menu_item: MenuItem, quantity: int) -> Order:
        """Append a line copying the item's current name and price."""
        if quantity < 1:
            raise InvalidQuantity(quantity)

        line = OrderItem(
            menu_item_id=menu_item.id,
            name=menu_item.name,
            unit_price=menu_item.unit_price,
            quantity=quantity,
        )
        self._items.append(line)
        logger.debug("order_add id=%d name=%r qty=%d", line.menu_item_id, line.name, line.quantity)
        return self

    def items(self) -> list[OrderItem]:
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items
