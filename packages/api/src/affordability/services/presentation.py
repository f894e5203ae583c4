# This project was developed with assistance from AI tools.
"""Presentation adapter: turns a calculation outcome into display groups.

Formatting follows French conventions by default (``1 160,12 €``,
``4,8 %``); separators, symbol and percent precision come from settings.
Invalid outcomes render every value as the unknown placeholder and keep
only the situation group visible.
"""

from typing import Literal

from ..core.config import Settings, settings
from ..schemas.calculator import CalculationOutcome, CalculationResponse, InvalidInput
from ..schemas.display import AffordabilityDisplay, DisplayGroup, DisplayValue, Sign

Kind = Literal["currency", "percent", "ratio"]

_NBSP = "\u00a0"

# group -> [(field, kind, clamp at zero)]
GROUP_FIELDS: dict[str, list[tuple[str, Kind, bool]]] = {
    "situation": [
        ("monthly_payment", "currency", False),
        ("current_debt_ratio", "ratio", False),
        ("combined_debt_ratio", "ratio", False),
        ("capacity_from_income", "currency", True),
        ("remaining_own_capacity", "currency", True),
        ("combined_capacity", "currency", False),
    ],
    "rental": [
        ("project_only_debt_ratio", "ratio", False),
        ("rental_borrowing_capacity", "currency", False),
        ("cash_flow", "currency", False),
        ("gross_yield", "percent", False),
    ],
    "target_price": [
        ("desired_yield", "percent", False),
        ("target_price", "currency", False),
        ("target_reduction_percent", "percent", True),
    ],
    "negotiation": [
        ("acceptable_monthly_payment", "currency", False),
        ("acceptable_price", "currency", False),
        ("minimum_reduction_percent", "percent", True),
    ],
}

LABELS: dict[str, str] = {
    "monthly_payment": "Monthly payment",
    "current_debt_ratio": "Current debt ratio",
    "combined_debt_ratio": "Debt ratio with project",
    "capacity_from_income": "Capacity from income",
    "remaining_own_capacity": "Remaining own capacity",
    "combined_capacity": "Remaining capacity after project",
    "project_only_debt_ratio": "Project debt ratio (rent only)",
    "rental_borrowing_capacity": "Rental borrowing capacity",
    "cash_flow": "Gross cash flow",
    "gross_yield": "Gross yield",
    "desired_yield": "Target yield",
    "target_price": "Target price",
    "target_reduction_percent": "Reduction to reach target price",
    "acceptable_monthly_payment": "Acceptable monthly payment",
    "acceptable_price": "Acceptable price",
    "minimum_reduction_percent": "Minimum reduction to negotiate",
}


def format_number(value: float, decimals: int, *, config: Settings = settings) -> str:
    """Group thousands and use the configured decimal separator."""
    rounded = round(value, decimals)
    body = f"{abs(rounded):_.{decimals}f}"
    body = body.replace(".", config.DECIMAL_SEPARATOR).replace("_", config.GROUP_SEPARATOR)
    return f"-{body}" if rounded < 0 else body


def format_currency(value: float, *, config: Settings = settings) -> str:
    return f"{format_number(value, 2, config=config)}{_NBSP}{config.CURRENCY_SYMBOL}"


def format_percent(value: float, *, config: Settings = settings) -> str:
    """Format a value already expressed in percent."""
    return f"{format_number(value, config.PERCENT_DECIMALS, config=config)}{_NBSP}%"


def sign_of(value: float, decimals: int = 2) -> Sign:
    rounded = round(value, decimals)
    if rounded > 0:
        return "positive"
    if rounded < 0:
        return "negative"
    return "zero"


def display_value(value: float, kind: Kind, *, clamp: bool = False, config: Settings = settings) -> DisplayValue:
    """Format one metric; ``ratio`` values are fractions shown as percent."""
    if clamp:
        value = max(0.0, value)
    if kind == "currency":
        return DisplayValue(text=format_currency(value, config=config), value=value, sign=sign_of(value))
    shown = value * 100 if kind == "ratio" else value
    return DisplayValue(
        text=format_percent(shown, config=config),
        value=value,
        sign=sign_of(shown, config.PERCENT_DECIMALS),
    )


def _blank_group(name: str, visible: bool, config: Settings) -> DisplayGroup:
    unknown = DisplayValue(text=config.UNKNOWN_PLACEHOLDER)
    return DisplayGroup(
        visible=visible,
        fields={field: unknown for field, _, _ in GROUP_FIELDS[name]},
    )


def blank_display(error: str | None = None, *, config: Settings = settings) -> AffordabilityDisplay:
    """Display state for an invalid or not-yet-entered input vector.

    The situation group stays visible with placeholder values; every
    conditional group is hidden.
    """
    return AffordabilityDisplay(
        situation=_blank_group("situation", True, config),
        rental=_blank_group("rental", False, config),
        target_price=_blank_group("target_price", False, config),
        negotiation=_blank_group("negotiation", False, config),
        error=error,
    )


def present(outcome: CalculationOutcome, *, config: Settings = settings) -> AffordabilityDisplay:
    """Render an outcome for the front end."""
    if isinstance(outcome, InvalidInput):
        return blank_display(outcome.message, config=config)

    visibility = {
        "situation": True,
        "rental": outcome.is_rental_project,
        "target_price": outcome.show_target_price,
        "negotiation": outcome.is_negotiation_required,
    }
    groups = {}
    for name, specs in GROUP_FIELDS.items():
        groups[name] = DisplayGroup(
            visible=visibility[name],
            fields={
                field: display_value(getattr(outcome, field), kind, clamp=clamp, config=config)
                for field, kind, clamp in specs
            },
        )
    return AffordabilityDisplay(**groups)


def summarize(display: AffordabilityDisplay) -> list[str]:
    """``Label: text`` lines for every visible group, in display order."""
    lines = []
    if display.error:
        lines.append(display.error)
    for name in GROUP_FIELDS:
        group: DisplayGroup = getattr(display, name)
        if not group.visible:
            continue
        for field, value in group.fields.items():
            lines.append(f"{LABELS[field]}: {value.text}")
    return lines


def build_response(outcome: CalculationOutcome, *, config: Settings = settings) -> CalculationResponse:
    """Tagged HTTP response: ``valid`` plus either the result or the errors."""
    display = present(outcome, config=config)
    if isinstance(outcome, InvalidInput):
        return CalculationResponse(valid=False, errors=outcome.errors, display=display)
    return CalculationResponse(valid=True, result=outcome, display=display)
