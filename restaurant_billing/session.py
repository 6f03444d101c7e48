"""Finishing an ordering session: billing, receipt text and persistence."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from restaurant_billing.billing import compute_billing
from restaurant_billing.errors import PersistenceFailure
from restaurant_billing.logging_setup import get_logger
from restaurant_billing.models import BillingResult
from restaurant_billing.order import Order
from restaurant_billing.persistence import save_receipt
from restaurant_billing.rendering import format_receipt

logger = get_logger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    """Receipt produced for a finished order."""

    receipt_text: str
    billing: BillingResult
    saved_path: Path | None = None
    error: str | None = None

    @property
    def saved(self) -> bool:
        return self.saved_path is not None


def checkout(
    order: Order,
    tax_rate_percent: float,
    receipt_dir: Path | str,
    now: datetime | None = None,
) -> CheckoutResult | None:
    """Bill an order and persist its receipt.

    Returns None for an empty order; nothing is formatted or written. A failed
    write is reported on the result since the receipt is still shown on screen.
    """
    if order.is_empty():
        logger.info("checkout_skipped reason=empty_order")
        return None

    timestamp = now or datetime.now().astimezone()
    billing = compute_billing(order, tax_rate_percent)
    text = format_receipt(order, billing, timestamp, tax_rate_percent)
    logger.info(
        "checkout lines=%d subtotal=%.2f tax=%.2f total=%.2f",
        len(order),
        billing.subtotal,
        billing.tax_amount,
        billing.grand_total,
    )

    try:
        path = save_receipt(text, timestamp, receipt_dir)
    except PersistenceFailure as exc:
        return CheckoutResult(receipt_text=text, billing=billing, error=str(exc))
    return CheckoutResult(receipt_text=text, billing=billing, saved_path=path)
