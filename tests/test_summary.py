import unittest

from engine import compute_solar_plan
from location_data import get_location_profile
from models import HouseholdAssessment
from summary import _grade, template_summary


class TestTemplateSummary(unittest.TestCase):
    def _assessment(self, **overrides) -> HouseholdAssessment:
        fields = dict(
            pincode="560001",
            monthly_energy_consumption=600,
            roof_area=500,
            shading_description="minimal",
            panel_quality_tier="premium",
        )
        fields.update(overrides)
        return HouseholdAssessment(**fields)

    def test_mentions_key_figures(self):
        location = get_location_profile("560001")
        result = compute_solar_plan(self._assessment(), location)
        text = template_summary(result, location)
        self.assertIn("Bangalore", text)
        self.assertIn("1.0 kW premium", text)
        self.assertIn("limited by available roof area", text)
        self.assertIn("₹2.4 L", text)
        self.assertIn(f"{result.payback_years} years", text)
        self.assertIn("a moderate investment", text)

    def test_unknown_location_names_pincode(self):
        location = get_location_profile("123456")
        result = compute_solar_plan(self._assessment(pincode="123456"), location)
        self.assertIn("pincode 123456", template_summary(result, location))

    def test_long_payback_is_below_average(self):
        location = get_location_profile("560001").model_copy(update={"electricity_tariff": 0.01})
        result = compute_solar_plan(self._assessment(), location)
        self.assertIn("below-average", template_summary(result, location))

    def test_mentions_carbon_offset(self):
        location = get_location_profile("560001")
        result = compute_solar_plan(self._assessment(), location)
        self.assertIn(f"{result.co2_offset_tonnes_lifetime:.1f} tonnes of CO2", template_summary(result, location))


class TestGrade(unittest.TestCase):
    def test_thresholds(self):
        self.assertEqual("an excellent", _grade(5)[0])
        self.assertEqual("a good", _grade(8)[0])
        self.assertEqual("a moderate", _grade(12)[0])
        self.assertEqual("a below-average", _grade(13)[0])

    def test_returns_phrase_pair(self):
        suitability, outlook = _grade(6)
        self.assertIsInstance(suitability, str)
        self.assertTrue(outlook.startswith("The investment outlook"))


if __name__ == "__main__":
    unittest.main()
