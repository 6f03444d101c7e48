"""Editable seed menu loaded at process start."""

from __future__ import annotations

# (name, unit price) in display order; ids are assigned 1..N on load.
SEED_MENU_ITEMS: list[tuple[str, float]] = [
    ("Margherita Pizza", 199.0),
    ("Veg Burger", 99.0),
    ("French Fries", 79.0),
    ("Caesar Salad", 129.0),
    ("Cold Coffee", 89.0),
    ("Paneer Butter Masala", 179.0),
]
