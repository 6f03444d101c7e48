"""Order totals."""

from __future__ import annotations

from restaurant_billing.models import BillingResult
from restaurant_billing.order import Order


def compute_billing(order: Order, tax_rate_percent: float) -> BillingResult:
    """Compute subtotal, tax and grand total for a non-empty order.

    Values are left unrounded; rounding happens only when formatting.
    """
    subtotal = 0.0
    for line in order.items():
        subtotal += line.line_total
    tax_amount = subtotal * tax_rate_percent / 100.0
    return BillingResult(subtotal=subtotal, tax_amount=tax_amount, grand_total=subtotal + tax_amount)
