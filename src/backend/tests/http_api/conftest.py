import copy
import os
import sys


BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest
from fastapi.testclient import TestClient

from api.config import AppConfig
from api.main import create_app
from stores import InMemoryPointsStore


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


@pytest.fixture
def receipt() -> dict:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(host="127.0.0.1", port=3000, log_level="INFO", scoring_config_path=None)


@pytest.fixture
def store() -> InMemoryPointsStore:
    return InMemoryPointsStore()


@pytest.fixture
def client(store, app_config):
    app = create_app(store=store, config=app_config)
    with TestClient(app) as test_client:
        yield test_client
