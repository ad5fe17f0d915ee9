"""In-memory receipt score storage.

Scores live for the lifetime of the process. A single lock serializes
every read and write so concurrent request handlers see a consistent map.
"""

from __future__ import annotations

import logging
import threading

from .core.errors import NotFoundError

logger = logging.getLogger(__name__)


class ReceiptStore:
    """Maps receipt identifiers to point scores."""

    def __init__(self):
        self._scores: dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        """Insert or overwrite the score stored under receipt_id."""
        with self._lock:
            self._scores[receipt_id] = points

    def get(self, receipt_id: str) -> int:
        """Return the stored score, or raise NotFoundError."""
        with self._lock:
            try:
                return self._scores[receipt_id]
            except KeyError:
                raise NotFoundError(receipt_id) from None

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._scores

    def __len__(self) -> int:
        with self._lock:
            return len(self._scores)
