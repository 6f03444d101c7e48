"""Terminal restaurant billing: menu catalog, orders and receipts."""
