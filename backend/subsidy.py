"""
SuryaPlan: Cost & Subsidy Engine
================================
Stage 3: installed cost from panel tier, then the two-tier PM Surya Ghar
central CFA plus the state top-up.

  cost_per_kw   = ₹50,000 × (1 / panel_efficiency) × tier multiplier
  central CFA   = size × ₹/kW(≤3 kW)                         if size ≤ 3
                = 3 × ₹/kW(≤3 kW) + (size − 3) × ₹/kW(>3 kW)  otherwise
                  capped at the scheme maximum
  state subsidy = fixed ₹ amount, or rate × total cost, capped at its maximum
  final cost    = total − (central + state)   (not clamped at zero)
"""

from dataclasses import dataclass
from typing import Dict, Union

from config import DEFAULT_CONFIG, EngineConfig
from models import CentralSubsidy, FixedAmount, PanelTier, PercentageRate

TIER_COST_MULTIPLIER: Dict[PanelTier, float] = {
    PanelTier.budget:   0.8,
    PanelTier.standard: 1.0,
    PanelTier.premium:  1.3,
}

CENTRAL_TIER_BOUNDARY_KW = 3


@dataclass(frozen=True)
class CostBreakdown:
    cost_per_kw: float
    total_cost: float
    central_subsidy: float
    state_subsidy: float
    subsidy_amount: float
    final_cost: float


def cost_per_kw(tier: PanelTier, panel_efficiency: float, config: EngineConfig = DEFAULT_CONFIG) -> float:
    return config.cost_per_kw_inr * (1 / panel_efficiency) * TIER_COST_MULTIPLIER[tier]


def calculate_central_subsidy(system_kw: float, schedule: CentralSubsidy) -> float:
    if system_kw <= CENTRAL_TIER_BOUNDARY_KW:
        amount = system_kw * schedule.up_to_3kw
    else:
        amount = (
            CENTRAL_TIER_BOUNDARY_KW * schedule.up_to_3kw
            + (system_kw - CENTRAL_TIER_BOUNDARY_KW) * schedule.above_3kw
        )
    return min(amount, schedule.max_amount)


def calculate_state_subsidy(total_cost: float, schedule: Union[FixedAmount, PercentageRate]) -> float:
    if isinstance(schedule, FixedAmount):
        amount = schedule.amount
    else:
        amount = total_cost * schedule.rate
    return min(amount, schedule.max_amount)


def calculate_costs(
    system_kw: int,
    tier: PanelTier,
    panel_efficiency: float,
    central: CentralSubsidy,
    state: Union[FixedAmount, PercentageRate],
    config: EngineConfig = DEFAULT_CONFIG,
) -> CostBreakdown:
    per_kw  = cost_per_kw(tier, panel_efficiency, config)
    total   = system_kw * per_kw
    central_amt = calculate_central_subsidy(system_kw, central)
    state_amt   = calculate_state_subsidy(total, state)
    subsidy = central_amt + state_amt

    return CostBreakdown(
        cost_per_kw=per_kw,
        total_cost=total,
        central_subsidy=central_amt,
        state_subsidy=state_amt,
        subsidy_amount=subsidy,
        final_cost=total - subsidy,
    )
