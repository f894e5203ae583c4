# This project was developed with assistance from AI tools.
"""Display-ready rendering of a calculation outcome."""

from typing import Literal

from pydantic import BaseModel, Field

Sign = Literal["positive", "negative", "zero", "unknown"]


class DisplayValue(BaseModel):
    """One formatted output field."""

    text: str
    value: float | None = None
    sign: Sign = "unknown"


class DisplayGroup(BaseModel):
    """A result group the front end shows or hides as a whole."""

    visible: bool
    fields: dict[str, DisplayValue] = Field(default_factory=dict)


class AffordabilityDisplay(BaseModel):
    """All result groups plus the error banner text."""

    situation: DisplayGroup
    rental: DisplayGroup
    target_price: DisplayGroup
    negotiation: DisplayGroup
    error: str | None = None
