# This project was developed with assistance from AI tools.
"""Tests for the database service helpers."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from db import DatabaseService, get_db_service


def _factory(session):
    """Session factory returning an async context manager around ``session``."""
    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=session)
    ctx.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=ctx)


@pytest.mark.asyncio
async def test_health_check_ok():
    session = AsyncMock()
    assert await DatabaseService(_factory(session)).health_check() is True
    session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_health_check_failure_is_reported():
    session = AsyncMock()
    session.execute.side_effect = OSError("connection refused")
    assert await DatabaseService(_factory(session)).health_check() is False


def test_service_is_a_singleton():
    assert get_db_service() is get_db_service()
