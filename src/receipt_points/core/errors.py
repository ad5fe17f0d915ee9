"""Exception classes for receipt processing."""

from __future__ import annotations


class ReceiptError(Exception):
    """Base exception for receipt processing."""


class ValidationError(ReceiptError):
    """A receipt field could not be parsed."""

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class NotFoundError(ReceiptError):
    """No score is stored under the requested identifier."""

    def __init__(self, receipt_id: str):
        self.receipt_id = receipt_id
        super().__init__(f"No receipt found for id {receipt_id!r}")
