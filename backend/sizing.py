"""
SuryaPlan: System Sizing
Stage 2: demand-driven capacity, capped by what the roof can hold.
"""

import math
from dataclasses import dataclass

from config import DEFAULT_CONFIG, EngineConfig

MIN_SYSTEM_KW = 1


@dataclass(frozen=True)
class SizingResult:
    demand_kw: int
    roof_cap_kw: int
    system_size_kw: int
    space_per_kw_sqft: float
    limited_by_roof: bool


def demand_size_kw(
    monthly_consumption: float,
    solar_irradiance: float,
    system_efficiency: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> int:
    """
    kW needed to cover daily demand plus the oversizing buffer:
      ceil(daily_kwh × 1.3 / (irradiance × system_efficiency))
    """
    daily_kwh = monthly_consumption / config.days_per_month
    yield_per_kw = solar_irradiance * system_efficiency
    if yield_per_kw <= 0:
        return 0
    return math.ceil(daily_kwh * config.oversizing_buffer / yield_per_kw)


def space_per_kw(panel_efficiency: float, config: EngineConfig = DEFAULT_CONFIG) -> float:
    # sq ft per kW; lower-efficiency panels need proportionally more roof
    return config.sqft_per_kw_base / panel_efficiency


def roof_cap_kw(roof_area: float, panel_efficiency: float, config: EngineConfig = DEFAULT_CONFIG) -> int:
    return math.floor(roof_area / space_per_kw(panel_efficiency, config))


def size_system(
    monthly_consumption: float,
    roof_area: float,
    solar_irradiance: float,
    panel_efficiency: float,
    system_efficiency: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SizingResult:
    demand = demand_size_kw(monthly_consumption, solar_irradiance, system_efficiency, config)
    cap = roof_cap_kw(roof_area, panel_efficiency, config)

    # Floor of 1 kW applies even when the roof cap is 0
    size = max(MIN_SYSTEM_KW, math.floor(min(demand, cap)))

    return SizingResult(
        demand_kw=demand,
        roof_cap_kw=cap,
        system_size_kw=size,
        space_per_kw_sqft=space_per_kw(panel_efficiency, config),
        limited_by_roof=cap < demand,
    )
