import copy
import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.rules_engine.config import ScoringConfig
from common.rules_engine.context import ReceiptContext


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

MM_CORNER_MARKET_RECEIPT = {
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


@pytest.fixture
def target_receipt() -> dict:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def mm_receipt() -> dict:
    return copy.deepcopy(MM_CORNER_MARKET_RECEIPT)


@pytest.fixture
def make_receipt():
    """Build a receipt document: a neutral one-item receipt worth 0 points, with overrides applied."""

    def _make(**overrides) -> dict:
        receipt = {
            "retailer": "&",
            "purchaseDate": "2022-01-02",
            "purchaseTime": "09:30",
            "items": [{"shortDescription": "ab", "price": "1.10"}],
            "total": "1.10",
        }
        receipt.update(overrides)
        return receipt

    return _make


@pytest.fixture
def make_items():
    def _make(*pairs) -> list[dict]:
        return [{"shortDescription": desc, "price": price} for desc, price in pairs]

    return _make


@pytest.fixture
def make_ctx(make_receipt):
    def _make(*, receipt: dict | None = None, client_rules: dict | None = None, **overrides) -> ReceiptContext:
        doc = receipt if receipt is not None else make_receipt(**overrides)
        return ReceiptContext.from_receipt(doc, ScoringConfig(rules=client_rules or {}))

    return _make
