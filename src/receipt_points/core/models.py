"""Pydantic data models — the shared receipt objects.

Both the REST routes and the MCP tools accept these models. Field values
are kept exactly as submitted; the scorer does the parsing, and the
identifier is derived from the raw text.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """One line entry on a receipt."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(alias="shortDescription", description="Short product description")
    price: str = Field(description="Unit price as a decimal string, e.g. '6.49'")


class Receipt(BaseModel):
    """A submitted purchase receipt."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str = Field(description="Retailer or store name")
    purchase_date: str = Field(alias="purchaseDate", description="Purchase date, YYYY-MM-DD")
    purchase_time: str = Field(alias="purchaseTime", description="Purchase time, 24-hour HH:MM")
    items: list[Item] = Field(default_factory=list)
    total: str = Field(description="Total amount paid as a decimal string, e.g. '35.35'")


class ScoreRecord(BaseModel):
    """A stored score keyed by receipt identifier."""

    id: str
    points: int = Field(ge=0)


class PointsBreakdown(BaseModel):
    """Points contributed by each scoring rule."""

    retailer_name: int = 0
    round_dollar: int = 0
    quarter_multiple: int = 0
    item_pairs: int = 0
    item_descriptions: int = 0
    odd_day: int = 0
    afternoon: int = 0

    @property
    def total(self) -> int:
        return (
            self.retailer_name
            + self.round_dollar
            + self.quarter_multiple
            + self.item_pairs
            + self.item_descriptions
            + self.odd_day
            + self.afternoon
        )
