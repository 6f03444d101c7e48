"""Tests for receipt text and pane rendering."""

from __future__ import annotations

from datetime import datetime, timezone

from restaurant_billing.billing import compute_billing
from restaurant_billing.catalog import Catalog
from restaurant_billing.order import Order
from restaurant_billing.rendering import (
    format_menu_item,
    format_menu_listing,
    format_order_lines,
    format_receipt,
    format_timestamp,
)


def _burger_and_fries(catalog: Catalog) -> Order:
    order = Order()
    order.add_item(catalog.find_by_id(2), 2)
    order.add_item(catalog.find_by_id(3), 1)
    return order


def test_receipt_layout(catalog: Catalog) -> None:
    order = _burger_and_fries(catalog)
    billing = compute_billing(order, 5.0)

    receipt = format_receipt(order, billing, datetime(2026, 10, 18, 14, 49, 0), 5.0)

    assert receipt.splitlines() == [
        "Simple Restaurant",
        "Date: Sun Oct 18 14:49:00 2026",
        "",
        "Veg Burger".ljust(20) + " x 2  Rs 198.00",
        "French Fries".ljust(20) + " x 1  Rs 79.00",
        "",
        "Subtotal: Rs 277.00",
        "GST (5.0%): Rs 13.85",
        "Grand Total: Rs 290.85",
    ]
    assert receipt.endswith("\n")


def test_receipt_labels_tax_with_configured_percent(catalog: Catalog) -> None:
    order = Order()
    order.add_item(catalog.find_by_id(1), 1)
    billing = compute_billing(order, 12.5)

    receipt = format_receipt(order, billing, datetime(2026, 1, 1), 12.5)

    assert "GST (12.5%): Rs 24.88" in receipt
    assert "Grand Total: Rs 223.88" in receipt


def test_timestamp_includes_zone_when_known() -> None:
    stamp = datetime(2026, 10, 18, 14, 49, 0, tzinfo=timezone.utc)
    assert format_timestamp(stamp) == "Sun Oct 18 14:49:00 UTC 2026"


def test_menu_item_line(catalog: Catalog) -> None:
    assert format_menu_item(catalog.find_by_id(6)) == " 6. Paneer Butter Masala Rs 179.00"


def test_menu_listing_lists_every_item(catalog: Catalog) -> None:
    plain = format_menu_listing(catalog.items()).plain
    lines = plain.splitlines()
    assert len(lines) == 6
    assert lines[0] == format_menu_item(catalog.find_by_id(1))


def test_menu_listing_for_empty_catalog() -> None:
    assert format_menu_listing([]).plain == "(menu is empty)"


def test_order_lines(catalog: Catalog) -> None:
    assert format_order_lines(Order()).plain == "(no items yet)"
    plain = format_order_lines(_burger_and_fries(catalog)).plain
    assert plain.splitlines()[1] == "2. " + "French Fries".ljust(20) + " x 1  Rs 79.00"
