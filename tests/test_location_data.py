import unittest

from pydantic import ValidationError

from location_data import PM_SURYA_GHAR_TABLE, get_location_profile, known_pincodes
from models import FixedAmount, LocationProfile, PercentageRate, state_subsidy_from_rate


class TestLegacyRateConversion(unittest.TestCase):
    def test_fraction_becomes_percentage(self):
        s = state_subsidy_from_rate(0.25, 75_000)
        self.assertIsInstance(s, PercentageRate)
        self.assertEqual(0.25, s.rate)
        self.assertEqual(75_000, s.max_amount)

    def test_rate_of_one_is_still_a_percentage(self):
        self.assertIsInstance(state_subsidy_from_rate(1.0, 10_000), PercentageRate)

    def test_large_rate_becomes_fixed_amount(self):
        s = state_subsidy_from_rate(30_000, 25_000)
        self.assertIsInstance(s, FixedAmount)
        self.assertEqual(30_000, s.amount)

    def test_profile_converts_raw_rows(self):
        row = dict(PM_SURYA_GHAR_TABLE["400001"])
        row["state_subsidy"] = {"rate": 20_000, "max_amount": 20_000}
        profile = LocationProfile.model_validate(row)
        self.assertIsInstance(profile.state_subsidy, FixedAmount)

    def test_profile_accepts_tagged_variant(self):
        row = dict(PM_SURYA_GHAR_TABLE["400001"])
        row["state_subsidy"] = {"kind": "fixed", "amount": 10_000, "max_amount": 12_000}
        profile = LocationProfile.model_validate(row)
        self.assertEqual(10_000, profile.state_subsidy.amount)

    def test_zero_irradiance_rejected(self):
        row = dict(PM_SURYA_GHAR_TABLE["400001"], solar_irradiance=0)
        with self.assertRaises(ValidationError):
            LocationProfile.model_validate(row)


class TestLocationLookup(unittest.TestCase):
    def test_known_pincodes(self):
        self.assertEqual(["110001", "400001", "560001", "600001", "700001"], known_pincodes())

    def test_bangalore(self):
        p = get_location_profile("560001")
        self.assertEqual("Bangalore", p.city)
        self.assertEqual("BESCOM", p.discom)
        self.assertEqual(5.2, p.solar_irradiance)
        self.assertEqual(7.5, p.net_metering.feed_in_tariff)
        self.assertIsInstance(p.state_subsidy, PercentageRate)
        self.assertEqual(0.20, p.state_subsidy.rate)
        self.assertEqual(78_000, p.central_subsidy.max_amount)

    def test_whitespace_is_ignored(self):
        self.assertEqual("Mumbai", get_location_profile(" 400001 ").city)

    def test_unknown_pincode_gets_default_profile(self):
        with self.assertLogs("location_data", level="INFO"):
            p = get_location_profile("999999")
        self.assertEqual("999999", p.pincode)
        self.assertEqual("Unknown", p.city)
        self.assertEqual(4.8, p.solar_irradiance)
        self.assertEqual(8.0, p.electricity_tariff)
        self.assertEqual(0.15, p.state_subsidy.rate)
        self.assertEqual(30_000, p.state_subsidy.max_amount)
        self.assertEqual(7.0, p.net_metering.feed_in_tariff)


if __name__ == "__main__":
    unittest.main()
