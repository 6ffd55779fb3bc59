from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.app.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(env="test", log_level="DEBUG", cors_origins=("*",))


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def valid_payload() -> dict:
    return {
        "principal": 1000000,
        "interestType": "compound",
        "annualRate": 5,
        "years": 10,
        "depositAmount": 10000,
        "depositFrequency": "monthly",
        "taxRate": 20.315,
        "taxTiming": "annual",
        "managementFee": 0.5,
        "tradingFee": 1000,
    }
