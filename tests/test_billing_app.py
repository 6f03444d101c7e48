"""Keyboard-driven tests for the Textual billing app."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from restaurant_billing.billing_app import BillingApp
from restaurant_billing.data import seed_catalog


def _drive(app: BillingApp, *keys: str) -> BillingApp:
    async def run() -> None:
        async with app.run_test() as pilot:
            await pilot.press(*keys)

    asyncio.run(run())
    return app


def _app(tmp_path: Path) -> BillingApp:
    return BillingApp(seed_catalog(), tax_rate_percent=5.0, receipt_dir=tmp_path)


def test_place_order_writes_receipt(tmp_path: Path) -> None:
    app = _drive(
        _app(tmp_path),
        "2", "2", "enter", "2", "enter", "y",
        "3", "enter", "1", "enter", "n",
    )

    assert app.last_checkout is not None
    assert app.last_checkout.billing.subtotal == pytest.approx(277.0)
    assert app.last_checkout.billing.grand_total == pytest.approx(290.85)
    (receipt,) = list(tmp_path.iterdir())
    assert receipt.name.startswith("receipt_")
    assert "Grand Total: Rs 290.85" in receipt.read_text(encoding="utf-8")
    assert app.system_status == f"Receipt saved to {receipt}"


def test_finishing_without_items_writes_nothing(tmp_path: Path) -> None:
    app = _drive(_app(tmp_path), "2", "0", "enter")

    assert app.last_checkout is None
    assert app.system_status == "No items ordered."
    assert list(tmp_path.iterdir()) == []


def test_unknown_menu_id_prompts_again(tmp_path: Path) -> None:
    app = _drive(_app(tmp_path), "2", "9", "enter")

    assert app.system_status == "Invalid Menu ID. Try again."
    assert app.current_order is not None
    assert app.current_order.is_empty()


def test_zero_quantity_is_rejected(tmp_path: Path) -> None:
    app = _drive(_app(tmp_path), "2", "1", "enter", "0", "enter")

    assert app.system_status == "Quantity must be >= 1"
    assert app.current_order is not None
    assert app.current_order.is_empty()


def test_admin_remove_renumbers_catalog(tmp_path: Path) -> None:
    app = _drive(_app(tmp_path), "4", "3", "enter")

    assert app.system_status == "Item removed."
    assert [item.id for item in app.catalog.items()] == [1, 2, 3, 4, 5]
    assert app.catalog.find_by_id(3).name == "Caesar Salad"


def test_admin_remove_unknown_id(tmp_path: Path) -> None:
    app = _drive(_app(tmp_path), "4", "4", "2", "enter")

    assert app.system_status == "Item id not found."
    assert len(app.catalog) == 6


def test_admin_add_item(tmp_path: Path) -> None:
    app = _drive(_app(tmp_path), "3", "t", "e", "a", "enter", "2", "5", ".", "5", "enter")

    assert app.system_status == "Item added with ID 7"
    item = app.catalog.find_by_id(7)
    assert item.name == "tea"
    assert item.unit_price == pytest.approx(25.5)


def test_malformed_price_keeps_prompt_open(tmp_path: Path) -> None:
    app = _app(tmp_path)
    seen: dict[str, object] = {}

    async def run() -> None:
        async with app.run_test() as pilot:
            await pilot.press("3", "t", "e", "a", "enter", ".", "enter")
            seen["screen"] = type(app.screen).__name__
            seen["error"] = getattr(app.screen, "error", None)

    asyncio.run(run())

    assert len(app.catalog) == 6
    assert seen == {"screen": "PromptModal", "error": "Invalid number. Try again."}


def test_place_order_with_empty_catalog(tmp_path: Path) -> None:
    catalog = seed_catalog()
    for _ in range(6):
        catalog.remove_by_id(1)
    app = _drive(BillingApp(catalog, tax_rate_percent=5.0, receipt_dir=tmp_path), "2")

    assert app.system_status == "Menu is empty. Ask admin to add items."
    assert app.current_order is None


def test_invalid_main_menu_choice(tmp_path: Path) -> None:
    app = _drive(_app(tmp_path), "9")
    assert app.system_status == "Invalid choice. Try again."


def test_exit_returns_zero(tmp_path: Path) -> None:
    app = _drive(_app(tmp_path), "5")
    assert app.return_code == 0
