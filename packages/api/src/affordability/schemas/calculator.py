# This project was developed with assistance from AI tools.
"""Affordability calculator schemas.

``RawInputs`` uses the persistence keys (``rate``, ``term``, ``currentDebt``...)
as aliases so the same model reads a saved profile, an HTTP body, or a
flat key/value dict coming from a form.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .display import AffordabilityDisplay

# Field name -> persistence/wire key, in form order.
INPUT_KEYS: dict[str, str] = {
    "price": "price",
    "rent": "rent",
    "annual_rate_percent": "rate",
    "term_months": "term",
    "income": "income",
    "current_monthly_debt": "currentDebt",
    "max_debt_ratio": "maxDebtRatio",
    "rent_inclusion_ratio": "rentInclusionRatio",
}


class RawInputs(BaseModel):
    """A complete, valid input vector."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    price: float = Field(gt=0, description="Purchase price.")
    rent: float = Field(ge=0, description="Monthly rent; 0 means not a rental project.")
    annual_rate_percent: float = Field(gt=0, alias="rate")
    term_months: int = Field(gt=0, alias="term")
    income: float = Field(ge=0, description="Monthly net income.")
    current_monthly_debt: float = Field(ge=0, alias="currentDebt")
    max_debt_ratio: float = Field(ge=0, le=1, alias="maxDebtRatio")
    rent_inclusion_ratio: float = Field(ge=0, le=1, alias="rentInclusionRatio")

    def to_store(self) -> dict[str, str]:
        """Flat key -> string mapping for the input store.

        ``repr`` keeps every float bit-exact across a save/load cycle.
        """
        return {
            key: repr(getattr(self, name)) for name, key in INPUT_KEYS.items()
        }


class InvalidInput(BaseModel):
    """Classification of an input vector that failed validation."""

    kind: Literal["invalid_input"] = "invalid_input"
    errors: dict[str, str] = Field(
        default_factory=dict,
        description="Wire key -> reason, one entry per failing field.",
    )

    @property
    def message(self) -> str:
        parts = [f"{key}: {reason}" for key, reason in self.errors.items()]
        return "Invalid input -- " + "; ".join(parts) if parts else "Invalid input"


class DerivedResult(BaseModel):
    """Everything derived from a valid input vector.

    Ratios (``*_debt_ratio``) are fractions; yields and reductions are
    percentages. Signed values keep their sign.
    """

    model_config = ConfigDict(frozen=True)

    monthly_rate: float
    monthly_payment: float
    annuity_factor: float
    current_debt_ratio: float
    project_only_debt_ratio: float
    combined_debt_ratio: float
    capacity_from_income: float
    remaining_own_capacity: float
    rental_borrowing_capacity: float
    combined_capacity: float
    cash_flow: float
    gross_yield: float
    desired_yield: float
    target_price: float
    target_reduction_percent: float
    acceptable_monthly_payment: float
    acceptable_price: float
    minimum_reduction_percent: float

    is_rental_project: bool
    show_target_price: bool
    is_negotiation_required: bool


CalculationOutcome = DerivedResult | InvalidInput


class CalculationRequest(BaseModel):
    """Raw form values; numbers or text, any of them may be missing."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    price: float | str | None = None
    rent: float | str | None = None
    rate: float | str | None = None
    term: float | str | None = None
    income: float | str | None = None
    current_debt: float | str | None = Field(default=None, alias="currentDebt")
    max_debt_ratio: float | str | None = Field(default=None, alias="maxDebtRatio")
    rent_inclusion_ratio: float | str | None = Field(default=None, alias="rentInclusionRatio")

    def to_fields(self) -> dict[str, float | str]:
        """Wire-keyed dict of the values actually provided."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CalculationResponse(BaseModel):
    """Tagged calculation result plus its display-ready rendering."""

    valid: bool
    result: DerivedResult | None = None
    errors: dict[str, str] = Field(default_factory=dict)
    display: AffordabilityDisplay


class EngineDefaults(BaseModel):
    """Configured fallbacks applied when an input or derivation is missing."""

    max_debt_ratio: float
    rent_inclusion_ratio: float
    desired_yield: float
    fixed_desired_yield: bool
    debounce_ms: int
