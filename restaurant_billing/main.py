"""Entry point for the restaurant billing app."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from restaurant_billing.billing_app import BillingApp
from restaurant_billing.config import TAX_RATE_PERCENT
from restaurant_billing.data import seed_catalog
from restaurant_billing.persistence import resolve_receipt_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="restaurant-billing",
        description="Take restaurant orders in the terminal and print bills.",
    )
    parser.add_argument(
        "--tax-rate",
        type=float,
        default=TAX_RATE_PERCENT,
        help=f"Tax rate in percent applied to every bill (default: {TAX_RATE_PERCENT})",
    )
    parser.add_argument(
        "--receipt-dir",
        default=None,
        help="Directory receipts are saved to (default: $RESTAURANT_BILLING_RECEIPT_DIR or ./receipts)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Textual application and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.tax_rate < 0:
        parser.error("--tax-rate must not be negative")

    receipt_dir = args.receipt_dir or resolve_receipt_dir()
    app = BillingApp(seed_catalog(), tax_rate_percent=args.tax_rate, receipt_dir=receipt_dir)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
