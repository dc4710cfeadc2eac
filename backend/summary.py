"""
SuryaPlan: Template Recommendation
Plain-text recommendation for a calculation result, graded by payback period.
"""

from typing import Tuple

from currency import format_indian_currency, format_kwh, format_power
from models import CalculationResult, LocationProfile


def _grade(payback_years: int) -> Tuple[str, str]:
    if payback_years <= 5:
        return "an excellent", "The investment outlook is very strong"
    if payback_years <= 8:
        return "a good", "The investment outlook is favorable"
    if payback_years <= 12:
        return "a moderate", "The investment outlook is acceptable"
    return "a below-average", "Consider a smaller system or higher-efficiency panels for better returns"


def template_summary(result: CalculationResult, location: LocationProfile) -> str:
    suitability, outlook = _grade(result.payback_years)
    city = location.city if location.city != "Unknown" else f"pincode {location.pincode}"

    roof_note = " (limited by available roof area)" if result.limited_by_roof else ""
    subsidy_note = (
        f" after {format_indian_currency(result.subsidy_amount, precision=1)} in PM Surya Ghar"
        f" and state subsidies" if result.subsidy_amount > 0 else ""
    )

    return (
        f"A {format_power(result.system_size_kw)} {result.panel_tier.value} rooftop system{roof_note} "
        f"in {city} is {suitability} investment, generating about "
        f"{format_kwh(result.annual_generation)} per year at {location.solar_irradiance:.1f} kWh/m²/day. "
        f"Net cost is {format_indian_currency(result.final_cost, precision=1)}{subsidy_note}, "
        f"with estimated annual savings of {format_indian_currency(result.annual_savings, precision=1)}. "
        f"Accounting for {100 - result.lifetime_degradation_factor_percent:.1f}% panel degradation over "
        f"{result.system_lifetime_years} years, the system pays back in about {result.payback_years} years "
        f"and avoids roughly {result.co2_offset_tonnes_lifetime:.1f} tonnes of CO2. "
        f"{outlook}."
    )
