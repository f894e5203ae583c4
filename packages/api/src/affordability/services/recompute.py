# This project was developed with assistance from AI tools.
"""Interactive calculator session.

Owns the raw field values of one profile, coalesces bursts of edits into a
single recomputation (debounce), notifies listeners with every outcome, and
writes the inputs back to the store after each valid computation. Invalid
vectors are never persisted. An edit only cancels a recomputation that is
still waiting out the debounce; one that has started, store write included,
finishes before the next one runs.

Typical use::

    session = CalculatorSession(store, "alice", on_outcome=render)
    await session.start()          # load saved inputs, compute once
    session.set_field("rent", "850")
    session.set_field("rate", "3,2")
    await session.flush()          # one recomputation for both edits
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from ..core.config import Settings, settings
from ..schemas.calculator import CalculationOutcome, InvalidInput
from .calculator import compute
from .input_store import STORE_KEYS, InputStore
from .validation import validate

logger = logging.getLogger(__name__)

OutcomeListener = Callable[[CalculationOutcome], None]


class CalculatorSession:
    """Debounced recompute loop around the pure calculator."""

    def __init__(
        self,
        store: InputStore,
        profile_id: str,
        *,
        on_outcome: OutcomeListener | None = None,
        debounce_seconds: float | None = None,
        config: Settings = settings,
    ) -> None:
        self._store = store
        self._profile_id = profile_id
        self._config = config
        self._debounce = (
            config.RECOMPUTE_DEBOUNCE_MS / 1000 if debounce_seconds is None else debounce_seconds
        )
        self._listeners: list[OutcomeListener] = [on_outcome] if on_outcome else []
        self._fields: dict[str, Any] = {}
        self._pending: asyncio.Task | None = None
        self._running: set[asyncio.Task] = set()
        self._lock = asyncio.Lock()
        self.last_outcome: CalculationOutcome | None = None

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def subscribe(self, listener: OutcomeListener) -> None:
        self._listeners.append(listener)

    async def start(self) -> CalculationOutcome:
        """Load the saved inputs and run the first computation."""
        self._fields = dict(await self._store.load(self._profile_id))
        logger.debug("Loaded %d saved inputs for %s", len(self._fields), self._profile_id)
        return await self.recompute()

    def set_field(self, key: str, value: Any) -> None:
        """Record an edit and (re)schedule the debounced recomputation."""
        if key not in STORE_KEYS:
            raise ValueError(f"Unknown input field: {key}")
        self._fields[key] = value
        self._schedule()

    def update(self, values: dict[str, Any]) -> None:
        for key, value in values.items():
            self.set_field(key, value)

    def _schedule(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = asyncio.get_running_loop().create_task(self._delayed_recompute())

    async def _delayed_recompute(self) -> CalculationOutcome:
        await asyncio.sleep(self._debounce)
        # Past the debounce a newer edit cancels only this wrapper; the
        # recomputation and its store write always run to completion.
        run = asyncio.ensure_future(self.recompute())
        self._running.add(run)
        return await asyncio.shield(run)

    async def flush(self) -> CalculationOutcome | None:
        """Wait for scheduled and running recomputations; return the latest outcome."""
        while True:
            waiting = {t for t in (self._pending, *self._running) if t is not None and not t.done()}
            if not waiting:
                break
            await asyncio.wait(waiting)
        running, self._running = self._running, set()
        for run in running:
            # Re-raises a failed recomputation (e.g. store write error)
            run.result()
        return self.last_outcome

    async def recompute(self) -> CalculationOutcome:
        """Compute now from the current fields; persist if valid."""
        async with self._lock:
            inputs = validate(self._fields, config=self._config)
            if isinstance(inputs, InvalidInput):
                outcome: CalculationOutcome = inputs
            else:
                outcome = compute(inputs, config=self._config)
                await self._store.save(self._profile_id, inputs.to_store())
            self.last_outcome = outcome
            for listener in self._listeners:
                listener(outcome)
        return outcome
