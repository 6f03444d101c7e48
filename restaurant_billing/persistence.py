"""Receipt file persistence."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from restaurant_billing.config import RECEIPT_DIR, RECEIPT_DIR_ENV
from restaurant_billing.errors import PersistenceFailure
from restaurant_billing.logging_setup import get_logger

logger = get_logger(__name__)


def receipt_file_name(timestamp: datetime) -> str:
    """Return ``receipt_<epoch millis>.txt`` for the given time."""
    return f"receipt_{int(timestamp.timestamp() * 1000)}.txt"


def resolve_receipt_dir() -> Path:
    """
    Resolve the directory receipts are written to.

    Resolution order:
    1. RESTAURANT_BILLING_RECEIPT_DIR (if set)
    2. RECEIPT_DIR
    """
    env_override = os.environ.get(RECEIPT_DIR_ENV, "").strip()
    if env_override:
        return Path(env_override)
    return Path(RECEIPT_DIR)


def save_receipt(text: str, timestamp: datetime, directory: Path | str) -> Path:
    """Write receipt text to a new file and return its path."""
    receipt_path = Path(directory) / receipt_file_name(timestamp)
    try:
        receipt_path.parent.mkdir(parents=True, exist_ok=True)
        receipt_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.warning("receipt_save_failed path=%s error=%r", receipt_path, exc)
        raise PersistenceFailure(str(exc)) from exc

    logger.info("receipt_saved path=%s", receipt_path)
    return receipt_path
