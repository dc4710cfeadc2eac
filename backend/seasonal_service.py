"""
SuryaPlan: Generation & Seasonal Service
========================================
Stage 4: daily / monthly / annual generation and the four-season split.

Each city carries a fixed multiplier per season (pre-monsoon summer peaks,
monsoon cloud cover troughs). Generation uses the mean of the four factors;
the seasonal split gives each season a quarter of the annual total, weighted
by its factor relative to that mean, so the four seasons sum to the year.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from config import DEFAULT_CONFIG, EngineConfig
from models import Season, SeasonalBreakdown

logger = logging.getLogger(__name__)

SEASONAL_FACTORS: Dict[str, Dict[Season, float]] = {
    "bangalore": {Season.summer: 1.15, Season.monsoon: 0.80, Season.winter: 0.95, Season.spring: 1.10},
    "mumbai":    {Season.summer: 1.20, Season.monsoon: 0.65, Season.winter: 1.00, Season.spring: 1.15},
    "new delhi": {Season.summer: 1.25, Season.monsoon: 0.85, Season.winter: 0.75, Season.spring: 1.10},
    "chennai":   {Season.summer: 1.20, Season.monsoon: 0.90, Season.winter: 0.90, Season.spring: 1.10},
    "kolkata":   {Season.summer: 1.15, Season.monsoon: 0.75, Season.winter: 0.90, Season.spring: 1.10},
}
SEASONAL_FACTORS["delhi"] = SEASONAL_FACTORS["new delhi"]

DEFAULT_SEASONAL_FACTORS: Dict[Season, float] = {
    Season.summer: 1.15, Season.monsoon: 0.80, Season.winter: 0.90, Season.spring: 1.10,
}


@dataclass(frozen=True)
class GenerationEstimate:
    daily_kwh: float
    monthly_kwh: float
    annual_kwh: float
    average_seasonal_factor: float


def seasonal_factors(city: str) -> Dict[Season, float]:
    """Factor profile for a city; unknown cities get the default profile."""
    key = (city or "").strip().lower()
    if key not in SEASONAL_FACTORS:
        logger.debug(f"[Seasonal] No profile for city={city!r}, using default factors.")
        return DEFAULT_SEASONAL_FACTORS
    return SEASONAL_FACTORS[key]


def average_seasonal_factor(city: str) -> float:
    factors = seasonal_factors(city)
    return sum(factors.values()) / len(factors)


def estimate_generation(
    system_kw: float,
    solar_irradiance: float,
    system_efficiency: float,
    city: str,
    config: EngineConfig = DEFAULT_CONFIG,
) -> GenerationEstimate:
    avg = average_seasonal_factor(city)
    daily = system_kw * solar_irradiance * system_efficiency * avg
    monthly = daily * config.days_per_month
    return GenerationEstimate(
        daily_kwh=daily,
        monthly_kwh=monthly,
        annual_kwh=monthly * config.months_per_year,
        average_seasonal_factor=avg,
    )


def seasonal_breakdown(annual_kwh: float, city: str) -> SeasonalBreakdown:
    factors = seasonal_factors(city)
    avg = sum(factors.values()) / len(factors)
    quarter = annual_kwh / len(factors)
    return SeasonalBreakdown(**{
        season.value: quarter * factor / avg
        for season, factor in factors.items()
    })
