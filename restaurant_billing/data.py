"""Seed catalog construction."""

from __future__ import annotations

from restaurant_billing.catalog import Catalog
from restaurant_billing.constant import SEED_MENU_ITEMS
from restaurant_billing.models import MenuItem


def seed_catalog() -> Catalog:
    """Build a fresh catalog holding the default menu with ids 1..N."""
    return Catalog(
        [MenuItem(id=idx, name=name, unit_price=price) for idx, (name, price) in enumerate(SEED_MENU_ITEMS, start=1)]
    )
