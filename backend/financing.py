"""
SuryaPlan: Solar Loan Financing
===============================
Amortizing EMI on the post-subsidy cost, and how the monthly bill savings
compare with that instalment.

  r   = annual_rate% / 100 / 12
  n   = tenure_years × 12
  EMI = P · r · (1+r)^n / ((1+r)^n − 1)        (P / n when r == 0)
"""

from dataclasses import dataclass

DEFAULT_INTEREST_RATE_PERCENT = 9.5
DEFAULT_TENURE_YEARS = 7


@dataclass(frozen=True)
class EmiComparison:
    emi: float
    monthly_savings: float
    net_benefit: float


def calculate_emi(
    principal: float,
    annual_rate_percent: float = DEFAULT_INTEREST_RATE_PERCENT,
    tenure_years: int = DEFAULT_TENURE_YEARS,
) -> float:
    """Monthly instalment in whole rupees. Nothing to borrow → 0."""
    if tenure_years <= 0:
        raise ValueError(f"tenure_years must be positive, got {tenure_years}")
    if annual_rate_percent < 0:
        raise ValueError(f"annual_rate_percent must be non-negative, got {annual_rate_percent}")
    if principal <= 0:
        return 0.0

    months = tenure_years * 12
    rate = annual_rate_percent / 100 / 12
    if rate == 0:
        return float(round(principal / months))

    growth = (1 + rate) ** months
    return float(round(principal * rate * growth / (growth - 1)))


def savings_vs_emi(
    annual_savings: float,
    principal: float,
    annual_rate_percent: float = DEFAULT_INTEREST_RATE_PERCENT,
    tenure_years: int = DEFAULT_TENURE_YEARS,
) -> EmiComparison:
    """Positive net_benefit means the savings cover the instalment."""
    emi = calculate_emi(principal, annual_rate_percent, tenure_years)
    monthly_savings = annual_savings / 12
    return EmiComparison(
        emi=emi,
        monthly_savings=float(round(monthly_savings)),
        net_benefit=float(round(monthly_savings - emi)),
    )
