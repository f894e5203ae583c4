# This project was developed with assistance from AI tools.
"""Input validation for the affordability calculator.

Pure functions. Each field is parsed and checked on its own, then the whole
vector is classified once: either a ``RawInputs`` or an ``InvalidInput``
listing every failing field. Nothing is raised.
"""

import logging
import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from ..core.config import Settings, settings
from ..schemas.calculator import INPUT_KEYS, InvalidInput, RawInputs

logger = logging.getLogger(__name__)

# Any Unicode whitespace (no-break spaces included) plus currency/percent symbols.
_NOISE = re.compile(r"[\s€%]")

FieldResult = tuple[bool, str, float | int | None]


def parse_amount(value: Any) -> float | None:
    """Parse a form value to a finite float, or None.

    Accepts ints, floats and text such as ``"200 000"``, ``"3,5"`` or
    ``"1 160,12 €"``. A comma is read as the decimal separator.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        cleaned = _NOISE.sub("", value)
        if cleaned.count(",") > 1 or ("," in cleaned and "." in cleaned):
            return None
        cleaned = cleaned.replace(",", ".")
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _positive(label: str) -> Callable[[Any], FieldResult]:
    def check(value: Any) -> FieldResult:
        number = parse_amount(value)
        if number is None:
            return False, f"{label} must be a number", None
        if number <= 0:
            return False, f"{label} must be positive", None
        return True, "", number

    return check


def _non_negative(label: str) -> Callable[[Any], FieldResult]:
    def check(value: Any) -> FieldResult:
        number = parse_amount(value)
        if number is None:
            return False, f"{label} must be a number", None
        if number < 0:
            return False, f"{label} cannot be negative", None
        return True, "", number

    return check


def _fraction(label: str) -> Callable[[Any], FieldResult]:
    def check(value: Any) -> FieldResult:
        number = parse_amount(value)
        if number is None:
            return False, f"{label} must be a number", None
        if number < 0 or number > 1:
            return False, f"{label} must be between 0 and 1", None
        return True, "", number

    return check


def validate_term(value: Any) -> FieldResult:
    """Loan duration in months: a positive whole number."""
    number = parse_amount(value)
    if number is None:
        return False, "Term must be a number", None
    if number <= 0:
        return False, "Term must be positive", None
    if not number.is_integer():
        return False, "Term must be a whole number of months", None
    return True, "", int(number)


_VALIDATORS: dict[str, Callable[[Any], FieldResult]] = {
    "price": _positive("Price"),
    "rent": _non_negative("Rent"),
    "rate": _positive("Rate"),
    "term": validate_term,
    "income": _non_negative("Income"),
    "currentDebt": _non_negative("Current debt"),
    "maxDebtRatio": _fraction("Max debt ratio"),
    "rentInclusionRatio": _fraction("Rent inclusion ratio"),
}


def validate_field(key: str, value: Any) -> FieldResult:
    """Validate a single field by its wire key.

    Returns (is_valid, error_message, normalized_value).
    """
    validator = _VALIDATORS.get(key)
    if validator is None:
        return False, "Unknown field", None
    return validator(value)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate(raw: Mapping[str, Any], *, config: Settings = settings) -> RawInputs | InvalidInput:
    """Classify a wire-keyed mapping of raw values as valid or invalid.

    Blank ``maxDebtRatio`` / ``rentInclusionRatio`` take the configured
    defaults. Keys outside the known set are ignored.
    """
    fallbacks = {
        "maxDebtRatio": config.MAX_DEBT_RATIO_DEFAULT,
        "rentInclusionRatio": config.RENT_INCLUSION_DEFAULT,
    }
    values: dict[str, float | int] = {}
    errors: dict[str, str] = {}

    for key in INPUT_KEYS.values():
        value = raw.get(key)
        if _is_blank(value):
            if key in fallbacks:
                values[key] = fallbacks[key]
                continue
            errors[key] = "Required"
            continue
        ok, message, normalized = validate_field(key, value)
        if ok:
            values[key] = normalized
        else:
            errors[key] = message

    if errors:
        logger.debug("Invalid calculator input: %s", errors)
        return InvalidInput(errors=errors)
    return RawInputs.model_validate(values)
