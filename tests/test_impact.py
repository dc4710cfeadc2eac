import unittest

from impact import CO2_KG_PER_KWH_INDIA, calculate_carbon_savings


class TestCarbonSavings(unittest.TestCase):
    def test_grid_emission_factor(self):
        self.assertEqual(0.82, CO2_KG_PER_KWH_INDIA)

    def test_annual_and_lifetime_figures(self):
        c = calculate_carbon_savings(1000, 20_000)
        self.assertAlmostEqual(820, c.co2_kg_per_year)
        self.assertAlmostEqual(16.4, c.co2_tonnes_lifetime)
        self.assertAlmostEqual(820 / 21, c.trees_equivalent_year)

    def test_no_generation_no_offset(self):
        c = calculate_carbon_savings(0, 0)
        self.assertEqual(0, c.co2_kg_per_year)
        self.assertEqual(0, c.co2_tonnes_lifetime)
        self.assertEqual(0, c.trees_equivalent_year)


if __name__ == "__main__":
    unittest.main()
