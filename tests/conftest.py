import pytest

from receipt_points.config import Settings
from receipt_points.core.models import Receipt
from receipt_points.service import ReceiptService
from receipt_points.store import ReceiptStore


TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


def make_receipt(**overrides) -> Receipt:
    """A receipt that earns no points except where overridden."""
    data = {
        "retailer": "",
        "purchaseDate": "2022-01-02",
        "purchaseTime": "10:00",
        "items": [],
        "total": "1.01",
    }
    data.update(overrides)
    return Receipt.model_validate(data)


@pytest.fixture
def target_receipt():
    return Receipt.model_validate(TARGET_RECEIPT)


@pytest.fixture
def corner_market_receipt():
    return Receipt.model_validate(CORNER_MARKET_RECEIPT)


@pytest.fixture
def store():
    return ReceiptStore()


@pytest.fixture
def service(store):
    return ReceiptService(store)


@pytest.fixture
def settings():
    return Settings()
