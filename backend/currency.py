"""
SuryaPlan: Indian Currency Formatting
Lakh / Crore abbreviations and xx,xx,xxx digit grouping.
"""

import math
import re
from typing import Optional

CRORE = 10_000_000
LAKH  = 100_000


def _is_missing(amount: Optional[float]) -> bool:
    return amount is None or (isinstance(amount, float) and math.isnan(amount))


def format_indian_currency(
    amount: Optional[float],
    show_symbol: bool = True,
    precision: int = 0,
    show_full_form: bool = False,
) -> str:
    """
    ₹1.2 Cr / ₹3 L / ₹45K / ₹850, abbreviated per the Indian numbering system.
    Missing or NaN amounts render as zero.
    """
    symbol = "₹" if show_symbol else ""
    if _is_missing(amount):
        return f"{symbol}0"

    abs_amount = abs(amount)
    if abs_amount >= CRORE:
        formatted = f"{abs_amount / CRORE:.{precision}f} {'Crore' if show_full_form else 'Cr'}"
    elif abs_amount >= LAKH:
        formatted = f"{abs_amount / LAKH:.{precision}f} {'Lakh' if show_full_form else 'L'}"
    elif abs_amount >= 1000:
        formatted = f"{abs_amount / 1000:.{precision}f}K"
    else:
        formatted = f"{abs_amount:.{precision}f}"

    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{formatted}"


def format_indian_number(amount: Optional[float]) -> str:
    """12345678 → '1,23,45,678' (last three digits, then groups of two)."""
    if _is_missing(amount):
        return "0"

    # Positional notation only; str() switches to exponent form at 1e16
    if isinstance(amount, float):
        text = str(int(amount)) if amount.is_integer() else f"{amount:f}".rstrip("0").rstrip(".")
    else:
        text = str(amount)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    integer, _, decimal = text.partition(".")
    decimal = f".{decimal}" if decimal else ""

    if len(integer) <= 3:
        return f"{sign}{integer}{decimal}"

    head, last_three = integer[:-3], integer[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return f"{sign}{','.join(groups)},{last_three}{decimal}"


def parse_indian_currency(value: str) -> float:
    """Inverse of the abbreviations: '₹1.5 L' → 150000.0. Unparseable text → 0."""
    cleaned = re.sub(r"[₹,\s]", "", value or "").lower()
    number_text = re.sub(r"[^\d.]", "", cleaned)
    try:
        number = float(number_text)
    except ValueError:
        return 0.0

    if "cr" in cleaned:
        return number * CRORE
    if "l" in cleaned:
        return number * LAKH
    if "k" in cleaned:
        return number * 1000
    return number


def format_percentage(value: float, precision: int = 1) -> str:
    return f"{value:.{precision}f}%"


def format_kwh(value: float) -> str:
    if value >= 1000:
        return f"{value / 1000:.1f} MWh"
    return f"{value:.0f} kWh"


def format_power(value: float) -> str:
    if value >= 1000:
        return f"{value / 1000:.1f} MW"
    return f"{value:.1f} kW"
