"""
SuryaPlan: Engine Configuration
Immutable economics for the sizing engine, overridable from the environment.
"""

import os
import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class EngineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost_per_kw_inr: float   = Field(default=50_000, gt=0)   # ₹/kW reference (MNRE benchmark)
    oversizing_buffer: float = Field(default=1.3, gt=0)      # +30% over daily demand
    days_per_month: int      = Field(default=30, gt=0)
    months_per_year: int     = Field(default=12, gt=0)
    sqft_per_kw_base: float  = Field(default=100.0, gt=0)    # at 100% panel efficiency
    degradation_rate: float  = Field(default=0.008, ge=0, lt=1)
    lifetime_years: int      = Field(default=25, gt=0)


DEFAULT_CONFIG = EngineConfig()

# env var → EngineConfig field
_ENV_OVERRIDES = {
    "SOLAR_COST_PER_KW_INR":   "cost_per_kw_inr",
    "SOLAR_OVERSIZING_BUFFER": "oversizing_buffer",
    "SOLAR_DEGRADATION_RATE":  "degradation_rate",
    "SOLAR_LIFETIME_YEARS":    "lifetime_years",
}


def load_config() -> EngineConfig:
    """
    Build an EngineConfig from `.env` + SOLAR_* environment variables.
    Unset variables keep their defaults; malformed ones raise ValidationError.
    """
    load_dotenv()
    overrides = {
        field: os.getenv(env)
        for env, field in _ENV_OVERRIDES.items()
        if os.getenv(env) not in (None, "")
    }
    return EngineConfig(**overrides)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format=LOG_FORMAT,
    )
