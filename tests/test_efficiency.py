import unittest

from efficiency import (
    panel_efficiency,
    resolve_efficiency,
    resolve_panel_tier,
    shading_factor,
    system_efficiency,
)
from models import HouseholdAssessment, PanelTier


class TestPanelTier(unittest.TestCase):
    def test_substring_match_is_case_insensitive(self):
        self.assertEqual(PanelTier.premium, resolve_panel_tier("Premium (Monocrystalline)"))
        self.assertEqual(PanelTier.budget, resolve_panel_tier("BUDGET friendly"))
        self.assertEqual(PanelTier.standard, resolve_panel_tier("standard"))

    def test_unmatched_tier_falls_back_to_standard(self):
        self.assertEqual(PanelTier.standard, resolve_panel_tier("whatever the installer has"))
        self.assertEqual(PanelTier.standard, resolve_panel_tier(""))

    def test_efficiency_ordering(self):
        self.assertGreater(panel_efficiency("premium"), panel_efficiency("standard"))
        self.assertGreater(panel_efficiency("standard"), panel_efficiency("budget"))
        self.assertEqual(0.15, panel_efficiency("budget"))
        self.assertEqual(0.18, panel_efficiency("unknown"))
        self.assertEqual(0.21, panel_efficiency("premium"))


class TestShading(unittest.TestCase):
    def test_shading_classes(self):
        self.assertEqual(0.80, shading_factor("Significant shading from trees"))
        self.assertEqual(0.80, shading_factor("heavy"))
        self.assertEqual(0.90, shading_factor("moderate"))
        self.assertEqual(0.90, shading_factor("some in the evening"))
        self.assertEqual(0.95, shading_factor("minimal"))
        self.assertEqual(0.95, shading_factor("none"))
        self.assertEqual(0.95, shading_factor("not sure"))

    def test_heavier_keyword_wins(self):
        # "significant" is checked before "some"
        self.assertEqual(0.80, shading_factor("some significant obstructions"))

    def test_system_efficiency_is_a_fraction(self):
        for text in ("heavy", "moderate", "minimal", "???"):
            eff = system_efficiency(text)
            self.assertGreater(eff, 0.0)
            self.assertLessEqual(eff, 1.0)
        self.assertAlmostEqual(0.69276757375, system_efficiency("minimal"), places=9)
        self.assertAlmostEqual(0.5833832200, system_efficiency("heavy"), places=9)

    def test_resolve_efficiency_bundles_all_factors(self):
        a = HouseholdAssessment(
            monthly_energy_consumption=300,
            roof_area=400,
            shading_description="moderate",
            panel_quality_tier="budget",
        )
        eff = resolve_efficiency(a)
        self.assertEqual(PanelTier.budget, eff.panel_tier)
        self.assertEqual(0.15, eff.panel_efficiency)
        self.assertEqual(0.90, eff.shading_factor)
        self.assertAlmostEqual(system_efficiency("moderate"), eff.system_efficiency)


if __name__ == "__main__":
    unittest.main()
