# This project was developed with assistance from AI tools.
"""Affordability calculation logic.

Pure math, no I/O. Shared by the public API route, the saved-inputs route,
the recompute session and the agent tool.

Every division is guarded so a valid input vector can never fault; the
fallback for a meaningless quotient is 0, except the desired yield which
falls back to the configured default. Rental-only metrics (cash flow,
gross yield, target price and its reduction) are 0 without rent.
"""

from collections.abc import Mapping
from typing import Any

from ..core.config import Settings, settings
from ..schemas.calculator import CalculationOutcome, DerivedResult, InvalidInput, RawInputs
from .loan_math import annuity_factor, monthly_payment, monthly_rate, payment_factor
from .validation import validate


def is_rental_project(rent: float) -> bool:
    return rent > 0


def show_target_price(rent: float, price: float, target_price: float) -> bool:
    """Target-price group applies to rentals priced at or above the target."""
    return is_rental_project(rent) and price >= target_price


def is_negotiation_required(price: float, acceptable_price: float) -> bool:
    return price > acceptable_price


def _desired_yield(max_debt_ratio: float, factor: float, config: Settings) -> float:
    """Minimum gross yield (percent) at which rent alone services the loan.

    With a payment capped at ``max_debt_ratio * rent`` the serviceable
    principal is ``max_debt_ratio * rent * factor``; equating it to the price
    gives a yield of ``12 / (max_debt_ratio * factor)``.
    """
    denominator = max_debt_ratio * factor
    if config.FIXED_DESIRED_YIELD or denominator <= 0:
        return config.DESIRED_YIELD_DEFAULT * 100
    return 12 / denominator * 100


def compute(inputs: RawInputs, *, config: Settings = settings) -> DerivedResult:
    """Derive every metric and visibility flag from a valid input vector."""
    price = inputs.price
    rent = inputs.rent
    income = inputs.income
    debt = inputs.current_monthly_debt
    ratio = inputs.max_debt_ratio
    n = inputs.term_months

    r = monthly_rate(inputs.annual_rate_percent)
    payment = monthly_payment(price, inputs.annual_rate_percent, n)
    factor = annuity_factor(inputs.annual_rate_percent, n)

    # Own capacity, from income only
    capacity_from_income = ratio * income
    remaining_own_capacity = max(0.0, capacity_from_income - debt)
    current_debt_ratio = debt / income if income > 0 else 0.0

    # Rental side
    project_only_debt_ratio = payment / rent if rent > 0 else 0.0
    rental_borrowing_capacity = ratio * (inputs.rent_inclusion_ratio * rent)
    combined_capacity = capacity_from_income + rental_borrowing_capacity - payment - debt
    cash_flow = rent - payment if rent > 0 else 0.0
    gross_yield = rent * 12 / price * 100 if price > 0 and rent > 0 else 0.0

    # Target price for the desired yield
    desired_yield = _desired_yield(ratio, factor, config)
    if desired_yield > 0 and rent > 0:
        target_price = rent * 12 / (desired_yield / 100)
    else:
        target_price = 0.0
    if price > 0 and target_price > 0:
        target_reduction_percent = (price - target_price) / price * 100
    else:
        target_reduction_percent = 0.0

    # Negotiation threshold under the debt-ratio constraint
    resources = rent + income
    combined_debt_ratio = (payment + debt) / resources if resources > 0 else 0.0
    acceptable_monthly_payment = ratio * resources - debt
    pmt_factor = payment_factor(inputs.annual_rate_percent, n)
    if acceptable_monthly_payment > 0 and pmt_factor > 0:
        acceptable_price = acceptable_monthly_payment / pmt_factor
    else:
        acceptable_price = 0.0
    minimum_reduction_percent = (price - acceptable_price) / price * 100 if price > 0 else 0.0

    return DerivedResult(
        monthly_rate=r,
        monthly_payment=payment,
        annuity_factor=factor,
        current_debt_ratio=current_debt_ratio,
        project_only_debt_ratio=project_only_debt_ratio,
        combined_debt_ratio=combined_debt_ratio,
        capacity_from_income=capacity_from_income,
        remaining_own_capacity=remaining_own_capacity,
        rental_borrowing_capacity=rental_borrowing_capacity,
        combined_capacity=combined_capacity,
        cash_flow=cash_flow,
        gross_yield=gross_yield,
        desired_yield=desired_yield,
        target_price=target_price,
        target_reduction_percent=target_reduction_percent,
        acceptable_monthly_payment=acceptable_monthly_payment,
        acceptable_price=acceptable_price,
        minimum_reduction_percent=minimum_reduction_percent,
        is_rental_project=is_rental_project(rent),
        show_target_price=show_target_price(rent, price, target_price),
        is_negotiation_required=is_negotiation_required(price, acceptable_price),
    )


def calculate(raw: Mapping[str, Any], *, config: Settings = settings) -> CalculationOutcome:
    """Validate a wire-keyed mapping and compute, or return the InvalidInput."""
    inputs = validate(raw, config=config)
    if isinstance(inputs, InvalidInput):
        return inputs
    return compute(inputs, config=config)
