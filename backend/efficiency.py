"""
SuryaPlan: Panel Efficiency & System Loss Resolution
====================================================
Stage 1 of the engine. Classifies the intake's free-text panel quality and
shading answers and folds them, together with the fixed balance-of-system
losses, into one total system efficiency (a fraction, not a percentage).

Loss chain (multiplicative):
  shading      0.80 / 0.90 / 0.95   (from the shading answer)
  temperature  0.85
  dust/soiling 0.95
  inverter     0.95
  DC/AC wiring 0.98
  mismatch     0.97
"""

from dataclasses import dataclass
from typing import Dict

from models import HouseholdAssessment, PanelTier

# ── Lookup tables ─────────────────────────────────────────────────────────────
PANEL_EFFICIENCY: Dict[PanelTier, float] = {
    PanelTier.budget:   0.15,
    PanelTier.standard: 0.18,
    PanelTier.premium:  0.21,
}

SYSTEM_LOSSES: Dict[str, float] = {
    "temperature": 0.85,
    "dust":        0.95,
    "inverter":    0.95,
    "wiring":      0.98,
    "mismatch":    0.97,
}

# Evaluated in order; first keyword hit wins
SHADING_RULES = (
    (("significant", "heavy"), 0.80),
    (("moderate", "some"),     0.90),
    (("minimal", "none"),      0.95),
)
DEFAULT_SHADING_FACTOR = 0.95


@dataclass(frozen=True)
class EfficiencyProfile:
    panel_tier: PanelTier
    panel_efficiency: float
    shading_factor: float
    system_efficiency: float


def resolve_panel_tier(text: str) -> PanelTier:
    """Premium, then budget, else standard."""
    lowered = (text or "").lower()
    if PanelTier.premium.value in lowered:
        return PanelTier.premium
    if PanelTier.budget.value in lowered:
        return PanelTier.budget
    return PanelTier.standard


def panel_efficiency(text: str) -> float:
    return PANEL_EFFICIENCY[resolve_panel_tier(text)]


def shading_factor(text: str) -> float:
    lowered = (text or "").lower()
    for keywords, factor in SHADING_RULES:
        if any(k in lowered for k in keywords):
            return factor
    return DEFAULT_SHADING_FACTOR


def system_efficiency(shading_text: str) -> float:
    eff = shading_factor(shading_text)
    for factor in SYSTEM_LOSSES.values():
        eff *= factor
    return eff


def resolve_efficiency(assessment: HouseholdAssessment) -> EfficiencyProfile:
    tier = resolve_panel_tier(assessment.panel_quality_tier)
    return EfficiencyProfile(
        panel_tier=tier,
        panel_efficiency=PANEL_EFFICIENCY[tier],
        shading_factor=shading_factor(assessment.shading_description),
        system_efficiency=system_efficiency(assessment.shading_description),
    )
