"""
SuryaPlan: Pydantic Data Models
Household assessment + location subsidy profile in, sizing & financial result out.
"""
import enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Categories ────────────────────────────────────────────────────────────────

class PanelTier(str, enum.Enum):
    budget   = "budget"
    standard = "standard"
    premium  = "premium"


class Season(str, enum.Enum):
    summer  = "summer"
    monsoon = "monsoon"
    winter  = "winter"
    spring  = "spring"


# ── Household assessment ──────────────────────────────────────────────────────

class HouseholdAssessment(BaseModel):
    """
    One household's self-reported intake. Shading and panel quality stay as the
    free text the intake form collected; the engine classifies them.
    """
    model_config = ConfigDict(frozen=True)

    pincode: str = Field(default="", description="Location key for the subsidy table")
    monthly_energy_consumption: float = Field(..., ge=0, allow_inf_nan=False, description="kWh/month")
    roof_area: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="Usable roof area, sq ft")
    shading_description: str = Field(default="minimal")
    panel_quality_tier: str = Field(default="standard")

    # Intake pass-through, not used by the arithmetic
    sunlight_exposure: Optional[str] = None
    budget: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False, description="₹")


# ── Location / subsidy profile ────────────────────────────────────────────────

class CentralSubsidy(BaseModel):
    """PM Surya Ghar CFA: two per-kW tiers and an absolute cap."""
    model_config = ConfigDict(frozen=True)

    up_to_3kw: float = Field(default=14_588, ge=0, description="₹/kW for the first 3 kW")
    above_3kw: float = Field(default=7_294, ge=0, description="₹/kW beyond 3 kW")
    max_amount: float = Field(default=78_000, ge=0)


class FixedAmount(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    amount: float = Field(..., ge=0, description="₹")
    max_amount: float = Field(..., ge=0)


class PercentageRate(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["percentage"] = "percentage"
    rate: float = Field(..., ge=0, le=1, description="Fraction of total system cost")
    max_amount: float = Field(..., ge=0)


StateSubsidy = Annotated[Union[FixedAmount, PercentageRate], Field(discriminator="kind")]


def state_subsidy_from_rate(rate: float, max_amount: float) -> Union[FixedAmount, PercentageRate]:
    """
    Legacy table rows carry one `rate` field: above 1 it is a rupee amount,
    otherwise a fraction of system cost.
    """
    if rate > 1:
        return FixedAmount(amount=rate, max_amount=max_amount)
    return PercentageRate(rate=rate, max_amount=max_amount)


class NetMetering(BaseModel):
    model_config = ConfigDict(frozen=True)

    feed_in_tariff: float = Field(default=7.0, ge=0, allow_inf_nan=False, description="₹/kWh for exported energy")
    max_capacity_kw: float = Field(default=10.0, gt=0)
    settlement_period: str = "Annual"
    banking_allowed: bool = True


class LocationProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    pincode: str
    city: str = "Unknown"
    state: str = "Unknown"
    district: str = "Unknown"
    discom: str = "Local DISCOM"

    solar_irradiance: float = Field(..., gt=0, allow_inf_nan=False, description="kWh/m²/day")
    electricity_tariff: float = Field(..., ge=0, allow_inf_nan=False, description="₹/kWh")

    central_subsidy: CentralSubsidy = Field(default_factory=CentralSubsidy)
    state_subsidy: StateSubsidy
    net_metering: NetMetering = Field(default_factory=NetMetering)

    additional_incentives: List[str] = Field(default_factory=list)
    approved_vendors: int = 0
    last_updated: str = ""

    @field_validator("state_subsidy", mode="before")
    @classmethod
    def _convert_legacy_rate(cls, value):
        if isinstance(value, dict) and "kind" not in value and "rate" in value:
            return state_subsidy_from_rate(value["rate"], value.get("max_amount", 0.0)).model_dump()
        return value


# ── Calculation result ────────────────────────────────────────────────────────

class SeasonalBreakdown(BaseModel):
    summer: float
    monsoon: float
    winter: float
    spring: float


class SavingsBreakdown(BaseModel):
    direct_savings: float
    net_metering_savings: float
    peak_savings: float
    off_peak_savings: float
    normal_savings: float = 0.0


class CalculationResult(BaseModel):
    # ── Sizing ────────────────────────────────────────────────────────────
    system_size_kw: float
    demand_size_kw: int
    roof_cap_kw: int
    limited_by_roof: bool

    # ── Cost & subsidy ────────────────────────────────────────────────────
    cost_per_kw: float
    total_cost: float
    central_subsidy: float
    state_subsidy: float
    subsidy_amount: float
    final_cost: float

    # ── Generation ────────────────────────────────────────────────────────
    daily_generation: float
    monthly_generation: float
    annual_generation: float
    seasonal_breakdown: SeasonalBreakdown

    # ── Savings & payback ─────────────────────────────────────────────────
    annual_savings: float
    savings_breakdown: SavingsBreakdown
    payback_years: int
    system_lifetime_years: int

    # ── Efficiency & degradation ──────────────────────────────────────────
    panel_tier: PanelTier
    panel_efficiency_percent: float
    system_efficiency_percent: float
    lifetime_degradation_factor_percent: float
    lifetime_generation_kwh: float

    # ── Environmental impact ──────────────────────────────────────────────
    co2_offset_kg_per_year: float = 0.0
    co2_offset_tonnes_lifetime: float = 0.0
    trees_equivalent_per_year: float = 0.0
