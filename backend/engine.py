"""
SuryaPlan: Calculation Engine
=============================
Household assessment + location profile → sizing & 25-year financial forecast.

  Step 1 → panel efficiency + system losses     (efficiency)
  Step 2 → system size, demand vs roof          (sizing)
  Step 3 → installed cost + central/state CFA   (subsidy)
  Step 4 → generation + seasonal split          (seasonal_service)
  Step 5 → savings, payback, lifetime yield     (roi)
  Step 6 → CO2 avoided                          (impact)

Pure and deterministic: no I/O besides DEBUG logging, no shared mutable state.
Currency is reported in whole rupees; the cost identity
final_cost == total_cost − subsidy_amount holds on the reported figures.
"""

import logging

from config import DEFAULT_CONFIG, EngineConfig
from efficiency import resolve_efficiency
from impact import calculate_carbon_savings
from models import CalculationResult, HouseholdAssessment, LocationProfile, SavingsBreakdown
from roi import calculate_payback, calculate_savings, total_annual_savings
from seasonal_service import estimate_generation, seasonal_breakdown
from sizing import size_system
from subsidy import calculate_costs

logger = logging.getLogger(__name__)


def _rupees(value: float) -> float:
    return round(value, 0)


def compute_solar_plan(
    assessment: HouseholdAssessment,
    location: LocationProfile,
    config: EngineConfig = DEFAULT_CONFIG,
) -> CalculationResult:
    # ── STEP 1: efficiency ────────────────────────────────────────────────
    eff = resolve_efficiency(assessment)
    logger.debug(
        f"[Engine] Step 1: tier={eff.panel_tier.value} panel_eff={eff.panel_efficiency:.2f} "
        f"shading={eff.shading_factor:.2f} system_eff={eff.system_efficiency:.4f}"
    )

    # ── STEP 2: sizing ────────────────────────────────────────────────────
    sizing = size_system(
        monthly_consumption=assessment.monthly_energy_consumption,
        roof_area=assessment.roof_area,
        solar_irradiance=location.solar_irradiance,
        panel_efficiency=eff.panel_efficiency,
        system_efficiency=eff.system_efficiency,
        config=config,
    )
    size_kw = sizing.system_size_kw
    logger.debug(
        f"[Engine] Step 2: demand={sizing.demand_kw}kW roof_cap={sizing.roof_cap_kw}kW "
        f"→ {size_kw}kW (roof-limited={sizing.limited_by_roof})"
    )

    # ── STEP 3: cost & subsidy ────────────────────────────────────────────
    costs = calculate_costs(
        system_kw=size_kw,
        tier=eff.panel_tier,
        panel_efficiency=eff.panel_efficiency,
        central=location.central_subsidy,
        state=location.state_subsidy,
        config=config,
    )
    logger.debug(
        f"[Engine] Step 3: total=₹{costs.total_cost:,.0f} central=₹{costs.central_subsidy:,.0f} "
        f"state=₹{costs.state_subsidy:,.0f} final=₹{costs.final_cost:,.0f}"
    )

    # ── STEP 4: generation ────────────────────────────────────────────────
    gen = estimate_generation(
        system_kw=size_kw,
        solar_irradiance=location.solar_irradiance,
        system_efficiency=eff.system_efficiency,
        city=location.city,
        config=config,
    )
    seasons = seasonal_breakdown(gen.annual_kwh, location.city)
    logger.debug(f"[Engine] Step 4: daily={gen.daily_kwh:.2f}kWh annual={gen.annual_kwh:,.0f}kWh")

    # ── STEP 5: savings & payback ─────────────────────────────────────────
    annual_consumption = assessment.monthly_energy_consumption * config.months_per_year
    savings = calculate_savings(
        annual_generation=gen.annual_kwh,
        annual_consumption=annual_consumption,
        electricity_tariff=location.electricity_tariff,
        feed_in_tariff=location.net_metering.feed_in_tariff,
    )
    annual_savings = total_annual_savings(savings)
    payback = calculate_payback(annual_savings, gen.annual_kwh, costs.final_cost, config)
    logger.debug(
        f"[Engine] Step 5: savings=₹{annual_savings:,.0f}/yr payback={payback.payback_years}yr "
        f"lifetime={payback.lifetime_generation_kwh:,.0f}kWh"
    )

    # ── STEP 6: environmental impact ──────────────────────────────────────
    carbon = calculate_carbon_savings(gen.annual_kwh, payback.lifetime_generation_kwh)
    logger.debug(
        f"[Engine] Step 6: co2={carbon.co2_kg_per_year:,.0f}kg/yr "
        f"lifetime={carbon.co2_tonnes_lifetime:,.1f}t"
    )

    total_cost = _rupees(costs.total_cost)
    subsidy_amount = _rupees(costs.central_subsidy) + _rupees(costs.state_subsidy)

    return CalculationResult(
        system_size_kw=round(size_kw, 1),
        demand_size_kw=sizing.demand_kw,
        roof_cap_kw=sizing.roof_cap_kw,
        limited_by_roof=sizing.limited_by_roof,
        cost_per_kw=_rupees(costs.cost_per_kw),
        total_cost=total_cost,
        central_subsidy=_rupees(costs.central_subsidy),
        state_subsidy=_rupees(costs.state_subsidy),
        subsidy_amount=subsidy_amount,
        final_cost=total_cost - subsidy_amount,
        daily_generation=round(gen.daily_kwh, 1),
        monthly_generation=round(gen.monthly_kwh, 0),
        annual_generation=round(gen.annual_kwh, 0),
        # Unrounded so low-yield seasons keep their ordering
        seasonal_breakdown=seasons,
        annual_savings=_rupees(annual_savings),
        savings_breakdown=SavingsBreakdown(**{
            k: _rupees(v) for k, v in savings.model_dump().items()
        }),
        payback_years=payback.payback_years,
        system_lifetime_years=config.lifetime_years,
        panel_tier=eff.panel_tier,
        panel_efficiency_percent=round(eff.panel_efficiency * 100, 1),
        system_efficiency_percent=round(eff.system_efficiency * 100, 1),
        lifetime_degradation_factor_percent=round(payback.end_of_life_degradation, 1),
        lifetime_generation_kwh=round(payback.lifetime_generation_kwh, 0),
        co2_offset_kg_per_year=round(carbon.co2_kg_per_year, 1),
        co2_offset_tonnes_lifetime=round(carbon.co2_tonnes_lifetime, 1),
        trees_equivalent_per_year=round(carbon.trees_equivalent_year, 0),
    )
