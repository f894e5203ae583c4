# This project was developed with assistance from AI tools.
"""Tests for the saved-profile routes."""

import pytest


def test_unknown_profile_has_no_inputs(client):
    response = client.get("/api/inputs/alice")
    assert response.status_code == 200
    assert response.json() == {}


def test_valid_put_is_saved_and_reloaded(client, scenario):
    first = client.put("/api/inputs/alice", json=scenario).json()
    assert first["valid"] is True

    saved = client.get("/api/inputs/alice").json()
    assert saved["price"] == "200000.0"
    assert saved["term"] == "240"
    assert set(saved) == {
        "price", "rent", "rate", "term", "income", "currentDebt",
        "maxDebtRatio", "rentInclusionRatio",
    }

    # Recomputing from the saved values alone gives the same result
    again = client.put("/api/inputs/alice", json={}).json()
    assert again["result"] == first["result"]


def test_put_merges_over_saved_inputs(client, scenario):
    client.put("/api/inputs/alice", json=scenario)

    data = client.put("/api/inputs/alice", json={"rent": 0}).json()

    assert data["valid"] is True
    assert data["result"]["is_rental_project"] is False
    assert client.get("/api/inputs/alice").json()["rent"] == "0.0"


def test_invalid_put_leaves_profile_untouched(client, scenario):
    client.put("/api/inputs/alice", json=scenario)

    data = client.put("/api/inputs/alice", json={"rate": "zero"}).json()

    assert data["valid"] is False
    assert "rate" in data["errors"]
    assert client.get("/api/inputs/alice").json()["rate"] == "3.5"


def test_invalid_first_put_saves_nothing(client):
    data = client.put("/api/inputs/bob", json={"price": 100000}).json()
    assert data["valid"] is False
    assert client.get("/api/inputs/bob").json() == {}


def test_profiles_are_isolated(client, scenario):
    client.put("/api/inputs/alice", json=scenario)
    assert client.get("/api/inputs/bob").json() == {}


@pytest.mark.parametrize("profile_id", ["bad!id", "a%20b"])
def test_rejects_malformed_profile_id(client, profile_id):
    response = client.get(f"/api/inputs/{profile_id}")
    assert response.status_code == 422
    assert "profile_id" in response.json()["errors"]
