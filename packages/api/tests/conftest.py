# This project was developed with assistance from AI tools.
"""Shared fixtures.

Routes that persist inputs get an in-memory store through
``dependency_overrides`` so no database is needed.
"""

import pytest
from fastapi.testclient import TestClient

from affordability.main import app as real_app
from affordability.routes.inputs import get_input_store
from affordability.services.input_store import InMemoryInputStore

# Worked example: 200k purchase rented 800/month, 3.5% over 20 years.
SCENARIO: dict[str, float] = {
    "price": 200000,
    "rent": 800,
    "rate": 3.5,
    "term": 240,
    "income": 3000,
    "currentDebt": 200,
    "maxDebtRatio": 0.35,
    "rentInclusionRatio": 0.7,
}


@pytest.fixture
def scenario() -> dict[str, float]:
    return dict(SCENARIO)


@pytest.fixture
def store() -> InMemoryInputStore:
    return InMemoryInputStore()


@pytest.fixture
def client(store):
    """TestClient on the real app, saved inputs kept in memory."""
    real_app.dependency_overrides[get_input_store] = lambda: store
    yield TestClient(real_app)
    real_app.dependency_overrides.clear()
