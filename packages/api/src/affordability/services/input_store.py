# This project was developed with assistance from AI tools.
"""Saved calculator inputs.

A profile's inputs are a flat key -> string mapping using the wire keys
(``price``, ``rent``, ``rate``, ``term``, ``income``, ``currentDebt``,
``maxDebtRatio``, ``rentInclusionRatio``). Nothing derived is stored.

Two implementations share the same async interface: an in-memory store
for tests and embedded use, and a SQLAlchemy store over ``saved_inputs``.
"""

import logging
from typing import Protocol

from db import SavedInput
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.calculator import INPUT_KEYS

logger = logging.getLogger(__name__)

STORE_KEYS: frozenset[str] = frozenset(INPUT_KEYS.values())


class InputStore(Protocol):
    async def load(self, profile_id: str) -> dict[str, str]: ...

    async def save(self, profile_id: str, values: dict[str, str]) -> None: ...


def _known(values: dict[str, str]) -> dict[str, str]:
    return {k: str(v) for k, v in values.items() if k in STORE_KEYS}


class InMemoryInputStore:
    """Process-local store, one dict per profile."""

    def __init__(self) -> None:
        self._profiles: dict[str, dict[str, str]] = {}

    async def load(self, profile_id: str) -> dict[str, str]:
        return dict(self._profiles.get(profile_id, {}))

    async def save(self, profile_id: str, values: dict[str, str]) -> None:
        self._profiles[profile_id] = _known(values)


class SqlInputStore:
    """Store backed by the ``saved_inputs`` table.

    ``save`` replaces the whole snapshot of a profile in one transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def load(self, profile_id: str) -> dict[str, str]:
        stmt = select(SavedInput).where(SavedInput.profile_id == profile_id)
        result = await self._session.execute(stmt)
        return {row.key: row.value for row in result.scalars().all()}

    async def save(self, profile_id: str, values: dict[str, str]) -> None:
        snapshot = _known(values)
        await self._session.execute(
            delete(SavedInput).where(SavedInput.profile_id == profile_id)
        )
        self._session.add_all(
            [SavedInput(profile_id=profile_id, key=k, value=v) for k, v in snapshot.items()]
        )
        await self._session.commit()
        logger.info("Saved %d inputs for profile %s", len(snapshot), profile_id)
