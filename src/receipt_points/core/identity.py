"""Receipt identifier derivation."""

from __future__ import annotations

import hashlib

from .models import Receipt


def generate_receipt_id(receipt: Receipt) -> str:
    """SHA-256 hex digest of retailer + purchase date + purchase time + total.

    Items are not part of the digest, so receipts that differ only in their
    items share an identifier.
    """
    data = receipt.retailer + receipt.purchase_date + receipt.purchase_time + receipt.total
    return hashlib.sha256(data.encode("utf-8")).hexdigest()
