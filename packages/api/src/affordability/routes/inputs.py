# This project was developed with assistance from AI tools.
"""Saved-profile routes: read inputs, edit them and recompute."""

import logging
from typing import Annotated

from db import get_db
from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.calculator import CalculationRequest, CalculationResponse, InvalidInput
from ..services.calculator import compute
from ..services.input_store import InputStore, SqlInputStore
from ..services.presentation import build_response
from ..services.validation import validate

logger = logging.getLogger(__name__)

router = APIRouter()


def get_input_store(session: AsyncSession = Depends(get_db)) -> InputStore:
    return SqlInputStore(session)


ProfileId = Annotated[str, Path(min_length=1, max_length=255, pattern=r"^[A-Za-z0-9_.\-]+$")]
Store = Annotated[InputStore, Depends(get_input_store)]


@router.get("/{profile_id}", response_model=dict[str, str])
async def get_saved_inputs(profile_id: ProfileId, store: Store) -> dict[str, str]:
    """Return the last valid inputs saved for a profile (empty if none)."""
    return await store.load(profile_id)


@router.put("/{profile_id}", response_model=CalculationResponse)
async def update_inputs(
    profile_id: ProfileId,
    req: CalculationRequest,
    store: Store,
) -> CalculationResponse:
    """Merge the body over the saved inputs and recompute.

    The merged vector is persisted only when it is valid; an invalid edit
    leaves the saved profile untouched.
    """
    fields: dict[str, float | str] = {**await store.load(profile_id), **req.to_fields()}
    inputs = validate(fields)
    if isinstance(inputs, InvalidInput):
        logger.info("Not saving invalid inputs for profile %s", profile_id)
        return build_response(inputs)
    await store.save(profile_id, inputs.to_store())
    return build_response(compute(inputs))
