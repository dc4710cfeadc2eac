import unittest

from config import EngineConfig
from sizing import demand_size_kw, roof_cap_kw, size_system, space_per_kw

MINIMAL_EFF = 0.69276757375


class TestSizing(unittest.TestCase):
    def test_demand_includes_oversizing_buffer(self):
        # 600 kWh/month → 20 kWh/day × 1.3 / (5.2 × 0.6928) = 7.2 → 8 kW
        self.assertEqual(8, demand_size_kw(600, 5.2, MINIMAL_EFF))

    def test_buffer_comes_from_config(self):
        no_buffer = EngineConfig(oversizing_buffer=1.0)
        self.assertEqual(6, demand_size_kw(600, 5.2, MINIMAL_EFF, no_buffer))

    def test_space_per_kw_scales_with_panel_efficiency(self):
        self.assertAlmostEqual(100 / 0.15, space_per_kw(0.15))
        self.assertGreater(space_per_kw(0.15), space_per_kw(0.21))

    def test_roof_cap(self):
        self.assertEqual(1, roof_cap_kw(500, 0.21))
        self.assertEqual(2, roof_cap_kw(1000, 0.21))
        self.assertEqual(0, roof_cap_kw(100, 0.21))

    def test_roof_constraint_binds(self):
        for consumption in (50, 600, 2000, 10_000):
            res = size_system(consumption, 100, 5.2, 0.21, MINIMAL_EFF)
            self.assertLessEqual(res.system_size_kw, 1)

    def test_zero_roof_still_gives_minimum_system(self):
        res = size_system(600, 0, 5.2, 0.21, MINIMAL_EFF)
        self.assertEqual(1, res.system_size_kw)
        self.assertEqual(0, res.roof_cap_kw)
        self.assertTrue(res.limited_by_roof)

    def test_zero_consumption_gives_minimum_system(self):
        res = size_system(0, 5000, 5.2, 0.21, MINIMAL_EFF)
        self.assertEqual(0, res.demand_kw)
        self.assertEqual(1, res.system_size_kw)
        self.assertFalse(res.limited_by_roof)

    def test_demand_binds_on_large_roof(self):
        res = size_system(600, 10_000, 5.2, 0.21, MINIMAL_EFF)
        self.assertEqual(8, res.system_size_kw)
        self.assertFalse(res.limited_by_roof)

    def test_non_positive_yield_does_not_divide_by_zero(self):
        self.assertEqual(0, demand_size_kw(600, 0.0, MINIMAL_EFF))
        self.assertEqual(1, size_system(600, 1000, 0.0, 0.21, MINIMAL_EFF).system_size_kw)


if __name__ == "__main__":
    unittest.main()
