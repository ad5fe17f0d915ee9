"""Receipt processing operations shared by the REST routes and MCP tools."""

from __future__ import annotations

import logging

from .core.errors import NotFoundError, ValidationError
from .core.identity import generate_receipt_id
from .core.models import PointsBreakdown, Receipt
from .core.scoring import score_breakdown, score_receipt
from .store import ReceiptStore

logger = logging.getLogger(__name__)


class ReceiptService:
    """Scores submitted receipts and looks up stored scores."""

    def __init__(self, store: ReceiptStore, afternoon_end_inclusive: bool = True):
        self.store = store
        self.afternoon_end_inclusive = afternoon_end_inclusive

    def process_receipt(self, receipt: Receipt) -> str:
        """Score and store a receipt, returning its identifier.

        Raises ValidationError for a malformed total, price, date or time;
        nothing is stored in that case.
        """
        try:
            points = score_receipt(receipt, afternoon_end_inclusive=self.afternoon_end_inclusive)
        except ValidationError as exc:
            logger.warning("Rejected receipt from %r: %s", receipt.retailer, exc)
            raise

        receipt_id = generate_receipt_id(receipt)
        self.store.put(receipt_id, points)
        logger.info("Stored %d points for receipt %s", points, receipt_id)
        return receipt_id

    def get_points(self, receipt_id: str) -> int:
        """Points stored for receipt_id. Raises NotFoundError if unknown."""
        try:
            return self.store.get(receipt_id)
        except NotFoundError:
            logger.warning("Lookup for unknown receipt %s", receipt_id)
            raise

    def explain(self, receipt: Receipt) -> PointsBreakdown:
        """Per-rule points for a receipt without storing anything."""
        return score_breakdown(receipt, afternoon_end_inclusive=self.afternoon_end_inclusive)
