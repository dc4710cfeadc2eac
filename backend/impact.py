"""
SuryaPlan: Environmental Impact
CO2 avoided by displacing grid electricity, and its tree-year equivalent.
"""

from dataclasses import dataclass

# India grid CO2 emission factor (kg CO2e / kWh), CEA 2024-25
CO2_KG_PER_KWH_INDIA = 0.82

# 1 mature tree absorbs ~21 kg CO2/year
TREE_KG_CO2_PER_YEAR = 21.0


@dataclass(frozen=True)
class CarbonSavings:
    co2_kg_per_year: float
    co2_tonnes_lifetime: float
    trees_equivalent_year: float


def calculate_carbon_savings(annual_generation_kwh: float, lifetime_generation_kwh: float) -> CarbonSavings:
    """
    CO2 avoided per year and over the system life. The lifetime figure uses the
    degradation-adjusted lifetime yield rather than 25 × the first year.
    """
    co2_kg_year = annual_generation_kwh * CO2_KG_PER_KWH_INDIA
    return CarbonSavings(
        co2_kg_per_year=co2_kg_year,
        co2_tonnes_lifetime=lifetime_generation_kwh * CO2_KG_PER_KWH_INDIA / 1000,
        trees_equivalent_year=co2_kg_year / TREE_KG_CO2_PER_YEAR,
    )
