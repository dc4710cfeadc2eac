"""
SuryaPlan: Savings & Payback Engine
===================================
Stage 5: annual savings (self-consumption + net metering + time-of-use
overlay), degradation-aware payback, and lifetime yield.

Time-of-use overlay: no sun during off-peak hours, so generation is split
5% peak (1.5× tariff) / 95% normal (1.0× tariff) / 0% off-peak. The overlay
is added on top of direct + net-metering savings rather than decomposing them.

Degradation compounds at 0.8%/yr: factor(year) = (1 − 0.008)^(year − 1).
Payback is the first year cumulative degraded savings reach the net cost,
saturating at the 25-year lifetime.
"""

from dataclasses import dataclass
from typing import Dict

from config import DEFAULT_CONFIG, EngineConfig
from models import SavingsBreakdown

# ── Time-of-use tariff ────────────────────────────────────────────────────────
TOU_GENERATION_SHARE: Dict[str, float] = {
    "peak":     0.05,
    "normal":   0.95,
    "off_peak": 0.0,
}
TOU_TARIFF_MULTIPLIER: Dict[str, float] = {
    "peak":     1.5,
    "normal":   1.0,
    "off_peak": 0.8,
}


@dataclass(frozen=True)
class PaybackResult:
    payback_years: int
    lifetime_generation_kwh: float
    lifetime_savings: float
    end_of_life_degradation: float


def degradation_factor(year: int, config: EngineConfig = DEFAULT_CONFIG) -> float:
    """Output multiplier for a 1-based operating year."""
    return (1 - config.degradation_rate) ** (year - 1)


def lifetime_degradation_percent(config: EngineConfig = DEFAULT_CONFIG) -> float:
    return (1 - config.degradation_rate) ** config.lifetime_years * 100


def _tou_savings(annual_generation: float, tariff: float, band: str) -> float:
    return annual_generation * TOU_GENERATION_SHARE[band] * tariff * TOU_TARIFF_MULTIPLIER[band]


def calculate_savings(
    annual_generation: float,
    annual_consumption: float,
    electricity_tariff: float,
    feed_in_tariff: float,
) -> SavingsBreakdown:
    excess = max(0.0, annual_generation - annual_consumption)
    return SavingsBreakdown(
        direct_savings=min(annual_generation, annual_consumption) * electricity_tariff,
        net_metering_savings=excess * feed_in_tariff,
        peak_savings=_tou_savings(annual_generation, electricity_tariff, "peak"),
        off_peak_savings=_tou_savings(annual_generation, electricity_tariff, "off_peak"),
        normal_savings=_tou_savings(annual_generation, electricity_tariff, "normal"),
    )


def total_annual_savings(breakdown: SavingsBreakdown) -> float:
    return (
        breakdown.direct_savings
        + breakdown.net_metering_savings
        + breakdown.peak_savings
        + breakdown.normal_savings
    )


def calculate_payback(
    annual_savings: float,
    annual_generation: float,
    final_cost: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> PaybackResult:
    lifetime = config.lifetime_years
    payback = None
    cumulative_savings = 0.0
    lifetime_kwh = 0.0

    for year in range(1, lifetime + 1):
        factor = degradation_factor(year, config)
        cumulative_savings += annual_savings * factor
        lifetime_kwh += annual_generation * factor
        if payback is None and cumulative_savings >= final_cost:
            payback = year

    return PaybackResult(
        # Never recovered within the lifetime → report the lifetime
        payback_years=payback if payback is not None else lifetime,
        lifetime_generation_kwh=lifetime_kwh,
        lifetime_savings=cumulative_savings,
        end_of_life_degradation=lifetime_degradation_percent(config),
    )
