"""Receipt text and terminal rendering helpers."""

from __future__ import annotations

from datetime import datetime

from rich.text import Text

from restaurant_billing.config import CURRENCY_LABEL, RESTAURANT_NAME, TAX_LABEL
from restaurant_billing.models import BillingResult, MenuItem, OrderItem
from restaurant_billing.order import Order


def format_money(amount: float) -> str:
    """Format an amount with the unit label, rounded to 2 decimals."""
    return f"{CURRENCY_LABEL} {amount:.2f}"


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp like ``Sun Oct 18 14:49:00 UTC 2026``."""
    stamp = timestamp.strftime("%a %b %d %H:%M:%S")
    zone = timestamp.strftime("%Z")
    if zone:
        return f"{stamp} {zone} {timestamp.year}"
    return f"{stamp} {timestamp.year}"


def format_menu_item(item: MenuItem) -> str:
    return f"{item.id:2d}. {item.name:<20} {format_money(item.unit_price)}"


def format_order_item(line: OrderItem) -> str:
    return f"{line.name:<20} x{line.quantity:2d}  {format_money(line.line_total)}"


def format_receipt(order: Order, billing: BillingResult, timestamp: datetime, tax_rate_percent: float) -> str:
    """Build the receipt text shown on screen and written to disk."""
    lines = [
        RESTAURANT_NAME,
        f"Date: {format_timestamp(timestamp)}",
        "",
    ]
    lines.extend(format_order_item(line) for line in order.items())
    lines.extend(
        [
            "",
            f"Subtotal: {format_money(billing.subtotal)}",
            f"{TAX_LABEL} ({float(tax_rate_percent)}%): {format_money(billing.tax_amount)}",
            f"Grand Total: {format_money(billing.grand_total)}",
        ]
    )
    return "\n".join(lines) + "\n"


def format_menu_listing(items: list[MenuItem]) -> Text:
    """Render the catalog pane."""
    if not items:
        return Text("(menu is empty)", style="dim")

    text = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            text.append("\n")
        text.append(f"{item.id:2d}.", style="bold #5fbf72")
        text.append(f" {item.name:<20} ")
        text.append(format_money(item.unit_price), style="bold")
    return text


def format_order_lines(order: Order) -> Text:
    """Render the lines of an in-progress order."""
    if order.is_empty():
        return Text("(no items yet)", style="dim")

    text = Text()
    for idx, line in enumerate(order.items()):
        if idx > 0:
            text.append("\n")
        text.append(f"{idx + 1}. ")
        text.append(format_order_item(line))
    return text
