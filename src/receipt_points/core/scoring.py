"""Receipt point scoring engine.

Seven independent rules, each contributing an integer number of points.
Every field the rules depend on is parsed up front, so a malformed receipt
fails with ValidationError before any rule runs.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, time

from pydantic import BaseModel

from .errors import ValidationError
from .models import PointsBreakdown, Receipt

logger = logging.getLogger(__name__)

ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]")
AMOUNT_PATTERN = re.compile(r"\d+(\.\d+)?")
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
TIME_PATTERN = re.compile(r"\d{2}:\d{2}")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
DESCRIPTION_PRICE_MULTIPLIER = 0.2
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


class ParsedReceipt(BaseModel):
    """A receipt with its numeric and calendar fields converted."""

    retailer: str
    purchase_date: date
    purchase_time: time
    items: list[tuple[str, float]]
    total: float


def parse_amount(field: str, value: str) -> float:
    """Convert an unsigned decimal currency string to float."""
    if not AMOUNT_PATTERN.fullmatch(value):
        raise ValidationError(field, value, "expected an unsigned decimal amount such as '6.49'")
    amount = float(value)
    if not math.isfinite(amount):
        raise ValidationError(field, value, "amount out of range")
    return amount


def parse_purchase_date(value: str) -> date:
    if not DATE_PATTERN.fullmatch(value):
        raise ValidationError("purchaseDate", value, "expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError("purchaseDate", value, str(exc)) from exc


def parse_purchase_time(value: str) -> time:
    if not TIME_PATTERN.fullmatch(value):
        raise ValidationError("purchaseTime", value, "expected 24-hour HH:MM")
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError as exc:
        raise ValidationError("purchaseTime", value, str(exc)) from exc


def parse_receipt(receipt: Receipt) -> ParsedReceipt:
    """Parse every field the scoring rules need, or raise ValidationError."""
    items = [
        (item.short_description, parse_amount(f"items[{index}].price", item.price))
        for index, item in enumerate(receipt.items)
    ]
    return ParsedReceipt(
        retailer=receipt.retailer,
        purchase_date=parse_purchase_date(receipt.purchase_date),
        purchase_time=parse_purchase_time(receipt.purchase_time),
        items=items,
        total=parse_amount("total", receipt.total),
    )


# ─── Rules ───────────────────────────────────────────────────────────────────


def score_retailer_name(retailer: str) -> int:
    """One point for every alphanumeric character in the retailer name."""
    return len(ALPHANUMERIC.findall(retailer))


def score_round_dollar(total: float) -> int:
    return ROUND_DOLLAR_POINTS if total % 1.0 == 0 else 0


def score_quarter_multiple(total: float) -> int:
    return QUARTER_MULTIPLE_POINTS if total % 0.25 == 0 else 0


def score_item_pairs(item_count: int) -> int:
    return (item_count // 2) * ITEM_PAIR_POINTS


def score_item_description(description: str, price: float) -> int:
    """Trimmed description length a positive multiple of 3 earns ceil(price * 0.2).

    Length is measured in UTF-8 bytes, so "Cafés" counts 6.
    """
    length = len(description.strip().encode("utf-8"))
    if length == 0 or length % 3 != 0:
        return 0
    return math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER)


def score_odd_day(purchase_date: date) -> int:
    return ODD_DAY_POINTS if purchase_date.day % 2 == 1 else 0


def score_afternoon(purchase_time: time, end_inclusive: bool = True) -> int:
    """Purchases in the 2pm-4pm window, judged on the hour alone.

    With end_inclusive the whole 16:xx hour still qualifies.
    """
    hour = purchase_time.hour
    if end_inclusive:
        in_window = AFTERNOON_START_HOUR <= hour <= AFTERNOON_END_HOUR
    else:
        in_window = AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR
    return AFTERNOON_POINTS if in_window else 0


# ─── Entry points ────────────────────────────────────────────────────────────


def score_breakdown(receipt: Receipt, afternoon_end_inclusive: bool = True) -> PointsBreakdown:
    """Points contributed by each rule for a receipt."""
    parsed = parse_receipt(receipt)
    return PointsBreakdown(
        retailer_name=score_retailer_name(parsed.retailer),
        round_dollar=score_round_dollar(parsed.total),
        quarter_multiple=score_quarter_multiple(parsed.total),
        item_pairs=score_item_pairs(len(parsed.items)),
        item_descriptions=sum(score_item_description(desc, price) for desc, price in parsed.items),
        odd_day=score_odd_day(parsed.purchase_date),
        afternoon=score_afternoon(parsed.purchase_time, end_inclusive=afternoon_end_inclusive),
    )


def score_receipt(receipt: Receipt, afternoon_end_inclusive: bool = True) -> int:
    """Total points earned by a receipt."""
    breakdown = score_breakdown(receipt, afternoon_end_inclusive=afternoon_end_inclusive)
    logger.debug("Scored receipt from %r: %s", receipt.retailer, breakdown.model_dump())
    return breakdown.total
