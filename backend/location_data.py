"""
SuryaPlan: PM Surya Ghar Location Data
Static per-pincode irradiance, tariff, subsidy and net-metering reference table
(MNRE guidelines + state policies). Rows keep the legacy single `rate` field
for the state subsidy; LocationProfile converts it on load.
"""

import logging
from typing import Dict, List

from models import LocationProfile

logger = logging.getLogger(__name__)

_CENTRAL_CFA = {"up_to_3kw": 14_588, "above_3kw": 7_294, "max_amount": 78_000}

PM_SURYA_GHAR_TABLE: Dict[str, dict] = {
    "560001": {
        "pincode": "560001", "city": "Bangalore", "state": "Karnataka",
        "district": "Bangalore Urban", "discom": "BESCOM",
        "solar_irradiance": 5.2, "electricity_tariff": 8.5,
        "central_subsidy": _CENTRAL_CFA,
        "state_subsidy": {"rate": 0.20, "max_amount": 50_000},
        "net_metering": {"feed_in_tariff": 7.5, "max_capacity_kw": 10},
        "additional_incentives": [
            "Net metering facility",
            "Accelerated depreciation for commercial",
            "Property tax exemption for 5 years",
        ],
        "approved_vendors": 87, "last_updated": "2024-12-15",
    },
    "400001": {
        "pincode": "400001", "city": "Mumbai", "state": "Maharashtra",
        "district": "Mumbai City", "discom": "BEST",
        "solar_irradiance": 4.8, "electricity_tariff": 9.2,
        "central_subsidy": _CENTRAL_CFA,
        "state_subsidy": {"rate": 0.25, "max_amount": 75_000},
        "net_metering": {"feed_in_tariff": 8.5, "max_capacity_kw": 25},
        "additional_incentives": [
            "Wheeling charges waiver",
            "Banking facility up to 12 months",
            "Priority grid connection",
        ],
        "approved_vendors": 156, "last_updated": "2024-12-10",
    },
    "110001": {
        "pincode": "110001", "city": "New Delhi", "state": "Delhi",
        "district": "Central Delhi", "discom": "BSES",
        "solar_irradiance": 4.5, "electricity_tariff": 7.8,
        "central_subsidy": _CENTRAL_CFA,
        "state_subsidy": {"rate": 0.30, "max_amount": 90_000},
        "net_metering": {"feed_in_tariff": 7.0, "max_capacity_kw": 10},
        "additional_incentives": [
            "Generation based incentive",
            "Interest subsidy on loans",
        ],
        "approved_vendors": 134, "last_updated": "2024-11-28",
    },
    "600001": {
        "pincode": "600001", "city": "Chennai", "state": "Tamil Nadu",
        "district": "Chennai", "discom": "TANGEDCO",
        "solar_irradiance": 5.5, "electricity_tariff": 8.0,
        "central_subsidy": _CENTRAL_CFA,
        "state_subsidy": {"rate": 0.20, "max_amount": 60_000},
        "net_metering": {"feed_in_tariff": 7.5, "max_capacity_kw": 15},
        "additional_incentives": [
            "Renewable energy certificate benefits",
            "Capital subsidy for manufacturing",
            "Exemption from electricity duty",
        ],
        "approved_vendors": 203, "last_updated": "2024-12-01",
    },
    "700001": {
        "pincode": "700001", "city": "Kolkata", "state": "West Bengal",
        "district": "Kolkata", "discom": "CESC",
        "solar_irradiance": 4.2, "electricity_tariff": 7.5,
        "central_subsidy": _CENTRAL_CFA,
        "state_subsidy": {"rate": 0.15, "max_amount": 40_000},
        "net_metering": {"feed_in_tariff": 6.5, "max_capacity_kw": 10},
        "additional_incentives": [
            "Simplified approval process",
            "Single window clearance",
            "Priority for grid synchronization",
        ],
        "approved_vendors": 89, "last_updated": "2024-11-15",
    },
}

_DEFAULT_ROW = {
    "city": "Unknown", "state": "Unknown", "district": "Unknown", "discom": "Local DISCOM",
    "solar_irradiance": 4.8, "electricity_tariff": 8.0,
    "central_subsidy": _CENTRAL_CFA,
    "state_subsidy": {"rate": 0.15, "max_amount": 30_000},
    "net_metering": {"feed_in_tariff": 7.0, "max_capacity_kw": 10},
    "additional_incentives": ["Contact local authorities for specific incentives"],
    "approved_vendors": 25, "last_updated": "2024-12-01",
}

# Converted once at import; a malformed row fails loudly here
_PROFILES: Dict[str, LocationProfile] = {
    pincode: LocationProfile.model_validate(row)
    for pincode, row in PM_SURYA_GHAR_TABLE.items()
}


def known_pincodes() -> List[str]:
    return sorted(_PROFILES)


def default_profile(pincode: str) -> LocationProfile:
    return LocationProfile.model_validate({**_DEFAULT_ROW, "pincode": pincode})


def get_location_profile(pincode: str) -> LocationProfile:
    """Exact pincode match, or the national default profile for unknown pincodes."""
    key = (pincode or "").strip()
    profile = _PROFILES.get(key)
    if profile is None:
        logger.info(f"[Location] Pincode {key!r} not in PM Surya Ghar table, using default profile.")
        return default_profile(key)
    return profile
