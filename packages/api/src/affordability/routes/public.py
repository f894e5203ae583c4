# This project was developed with assistance from AI tools.
"""Public calculator routes -- stateless, no saved profile."""

from fastapi import APIRouter

from ..core.config import settings
from ..schemas.calculator import CalculationRequest, CalculationResponse, EngineDefaults
from ..services.calculator import calculate
from ..services.presentation import build_response

router = APIRouter()


@router.get("/defaults", response_model=EngineDefaults)
async def get_defaults() -> EngineDefaults:
    """Return the configured engine fallbacks."""
    return EngineDefaults(
        max_debt_ratio=settings.MAX_DEBT_RATIO_DEFAULT,
        rent_inclusion_ratio=settings.RENT_INCLUSION_DEFAULT,
        desired_yield=settings.DESIRED_YIELD_DEFAULT,
        fixed_desired_yield=settings.FIXED_DESIRED_YIELD,
        debounce_ms=settings.RECOMPUTE_DEBOUNCE_MS,
    )


@router.post("/calculate", response_model=CalculationResponse)
async def calculate_affordability(req: CalculationRequest) -> CalculationResponse:
    """Compute every metric and the display groups for one input vector.

    Invalid input is not an HTTP error: the response carries ``valid=false``,
    the per-field errors and the blank display state.
    """
    return build_response(calculate(req.to_fields()))
