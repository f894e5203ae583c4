# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Engine defaults unify the simpler and the fuller calculator variants: the
simpler one had a fixed 35% debt ratio, 70% rent inclusion and 5% target yield.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[5]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "affordability-engine"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:5173"]

    # -- Engine defaults --
    MAX_DEBT_RATIO_DEFAULT: float = Field(
        default=0.35,
        ge=0,
        le=1,
        description="Acceptable debt ratio used when the input omits maxDebtRatio.",
    )
    RENT_INCLUSION_DEFAULT: float = Field(
        default=0.7,
        ge=0,
        le=1,
        description="Share of rent counted by lenders when the input omits rentInclusionRatio.",
    )
    DESIRED_YIELD_DEFAULT: float = Field(
        default=0.05,
        gt=0,
        description="Fallback gross yield (fraction) when it cannot be derived from the debt ratio.",
    )
    FIXED_DESIRED_YIELD: bool = Field(
        default=False,
        description="Always use DESIRED_YIELD_DEFAULT instead of deriving it.",
    )
    RECOMPUTE_DEBOUNCE_MS: int = Field(
        default=300,
        ge=0,
        description="Delay before a burst of field changes triggers one recomputation.",
    )

    # -- Presentation --
    CURRENCY_SYMBOL: str = "€"
    DECIMAL_SEPARATOR: str = ","
    GROUP_SEPARATOR: str = "\u202f"
    PERCENT_DECIMALS: int = Field(default=1, ge=0, le=4)
    UNKNOWN_PLACEHOLDER: str = "..."


settings = Settings()
