# This project was developed with assistance from AI tools.
"""Tests for saved-input stores."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from db import SavedInput

from affordability.services.calculator import compute
from affordability.services.input_store import InMemoryInputStore, SqlInputStore
from affordability.services.validation import validate


@pytest.mark.asyncio
async def test_in_memory_round_trip(store, scenario):
    snapshot = validate(scenario).to_store()
    await store.save("alice", snapshot)
    assert await store.load("alice") == snapshot


@pytest.mark.asyncio
async def test_in_memory_unknown_profile_is_empty(store):
    assert await store.load("nobody") == {}


@pytest.mark.asyncio
async def test_in_memory_drops_unknown_keys(store):
    await store.save("alice", {"price": "1000", "notes": "south facing"})
    assert await store.load("alice") == {"price": "1000"}


@pytest.mark.asyncio
async def test_in_memory_load_returns_a_copy(store):
    await store.save("alice", {"price": "1000"})
    loaded = await store.load("alice")
    loaded["price"] = "1"
    assert (await store.load("alice"))["price"] == "1000"


@pytest.mark.asyncio
async def test_reload_reproduces_identical_result(store, scenario):
    scenario["rate"] = 3.4567
    inputs = validate(scenario)
    original = compute(inputs)

    await store.save("alice", inputs.to_store())
    reloaded = validate(await store.load("alice"))

    assert compute(reloaded) == original


# ---------------------------------------------------------------------------
# SQLAlchemy store (mocked session)
# ---------------------------------------------------------------------------


def _mock_session(rows=None):
    session = AsyncMock()
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows or []
    session.execute = AsyncMock(return_value=result)
    session.add_all = MagicMock()
    return session


def _row(key, value):
    row = MagicMock()
    row.key = key
    row.value = value
    return row


@pytest.mark.asyncio
async def test_sql_load_builds_flat_mapping():
    session = _mock_session(rows=[_row("price", "200000.0"), _row("term", "240")])
    store = SqlInputStore(session)

    assert await store.load("alice") == {"price": "200000.0", "term": "240"}
    session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_sql_save_replaces_snapshot(scenario):
    session = _mock_session()
    store = SqlInputStore(session)
    snapshot = validate(scenario).to_store()

    await store.save("alice", snapshot)

    session.execute.assert_awaited_once()  # delete of the previous snapshot
    added = session.add_all.call_args.args[0]
    assert len(added) == 8
    assert all(isinstance(row, SavedInput) for row in added)
    assert {row.key: row.value for row in added} == snapshot
    assert {row.profile_id for row in added} == {"alice"}
    session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_sql_save_ignores_unknown_keys():
    session = _mock_session()
    await SqlInputStore(session).save("alice", {"rent": "0.0", "colour": "red"})
    added = session.add_all.call_args.args[0]
    assert [row.key for row in added] == ["rent"]

