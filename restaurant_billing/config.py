"""Runtime configuration defaults for billing and receipts."""

from __future__ import annotations

RESTAURANT_NAME = "Simple Restaurant"
CURRENCY_LABEL = "Rs"
TAX_LABEL = "GST"
TAX_RATE_PERCENT = 5.0

RECEIPT_DIR = "receipts"
RECEIPT_DIR_ENV = "RESTAURANT_BILLING_RECEIPT_DIR"

DEBUG_LOG_PATH = "/tmp/restaurant-billing-debug.log"
LOG_LEVEL_ENV = "RESTAURANT_BILLING_LOG_LEVEL"
