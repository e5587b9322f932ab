"""
Unit tests for tone ladders: fixed steps, specific tones, closest-step lookup, consistency.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from palettekit.color import tones
from palettekit.color.converter import create_color_from_hsl, hex_to_hsl
from palettekit.color.errors import InvalidLightness
from palettekit.color.schema import ColorTone

LABELS = ["50", "100", "200", "300", "400", "500", "600", "700", "800", "900"]
LIGHTNESS = [95, 90, 80, 70, 60, 50, 40, 30, 20, 10]


class TestStandardTable(unittest.TestCase):
    def test_labels_and_lightness(self):
        self.assertEqual(tones.get_standard_labels(), LABELS)
        self.assertEqual(tones.get_standard_lightness(), LIGHTNESS)


class TestLadders(unittest.TestCase):
    """All ten / middle seven steps with hue and saturation held."""

    def setUp(self):
        self.red = create_color_from_hsl(0, 100, 50)

    def test_all_tones(self):
        ladder = tones.generate_all_tones(self.red)
        self.assertEqual(len(ladder), 10)
        self.assertEqual([t.label for t in ladder], LABELS)
        self.assertEqual([t.lightness for t in ladder], LIGHTNESS)
        by_label = {t.label: t.hex for t in ladder}
        self.assertEqual(by_label["500"], "#FF0000")
        self.assertEqual(by_label["900"], "#330000")

    def test_middle_tones(self):
        ladder = tones.generate_tones(self.red)
        self.assertEqual(len(ladder), 7)
        self.assertEqual([t.label for t in ladder], LABELS[1:8])
        self.assertEqual([t.lightness for t in ladder], [90, 80, 70, 60, 50, 40, 30])

    def test_ladders_preserve_hue_and_saturation(self):
        for hue in (0, 60, 120, 180, 240, 300):
            base = create_color_from_hsl(hue, 100, 50)
            with self.subTest(hue=hue):
                self.assertTrue(tones.validate_tone_consistency(base, tones.generate_all_tones(base)))
                self.assertTrue(tones.validate_tone_consistency(base, tones.generate_tones(base)))
                for t in tones.generate_tones(base):
                    h, s, _ = hex_to_hsl(t.hex)
                    self.assertEqual((h, s), (hue, 100))

    def test_ladders_hold_hue_and_saturation_across_generator_range(self):
        """Within 4 degrees / 4 percent for every hue at saturation 60-100."""
        for hue in range(0, 360, 3):
            for sat in range(60, 101, 5):
                base = create_color_from_hsl(hue, sat, 55)
                with self.subTest(hue=hue, saturation=sat):
                    self.assertTrue(tones.validate_tone_consistency(base, tones.generate_all_tones(base)))

    def test_ladder_does_not_depend_on_base_lightness(self):
        light = create_color_from_hsl(200, 70, 85)
        dark = create_color_from_hsl(200, 70, 15)
        self.assertEqual(tones.generate_all_tones(light), tones.generate_all_tones(dark))


class TestSpecificTone(unittest.TestCase):
    def setUp(self):
        self.base = create_color_from_hsl(120, 100, 50)

    def test_default_label(self):
        t = tones.generate_specific_tone(self.base, 42)
        self.assertEqual(t.label, "42")
        self.assertEqual(t.lightness, 42)
        self.assertEqual(hex_to_hsl(t.hex)[0], 120)

    def test_custom_label(self):
        self.assertEqual(tones.generate_specific_tone(self.base, 42, "accent").label, "accent")
        self.assertEqual(tones.generate_specific_tone(self.base, 42, "").label, "42")

    def test_bounds(self):
        self.assertEqual(tones.generate_specific_tone(self.base, 0).hex, "#000000")
        self.assertEqual(tones.generate_specific_tone(self.base, 100).hex, "#FFFFFF")
        for bad in (-1, 101, 100.5):
            with self.subTest(lightness=bad):
                with self.assertRaises(InvalidLightness):
                    tones.generate_specific_tone(self.base, bad)


class TestClosestTone(unittest.TestCase):
    def test_closest(self):
        self.assertEqual(tones.find_closest_tone(52).label, "500")
        self.assertEqual(tones.find_closest_tone(52).lightness, 50)
        self.assertEqual(tones.find_closest_tone(0).label, "900")
        self.assertEqual(tones.find_closest_tone(100).label, "50")
        self.assertEqual(tones.find_closest_tone(84).label, "200")

    def test_ties_go_to_lighter_step(self):
        self.assertEqual(tones.find_closest_tone(55).label, "400")
        self.assertEqual(tones.find_closest_tone(92.5).label, "50")
        self.assertEqual(tones.find_closest_tone(15).label, "800")

    def test_invalid(self):
        for bad in (-0.1, 100.5, 200):
            with self.assertRaises(InvalidLightness):
                tones.find_closest_tone(bad)

    def test_non_numeric_lightness(self):
        for bad in ("50", None, True, [50]):
            with self.subTest(lightness=bad):
                with self.assertRaises(InvalidLightness):
                    tones.find_closest_tone(bad)
                with self.assertRaises(InvalidLightness):
                    tones.generate_specific_tone(create_color_from_hsl(200, 70, 50), bad)


class TestToneToColor(unittest.TestCase):
    def test_builds_full_color(self):
        base = create_color_from_hsl(240, 100, 50)
        tone = tones.generate_specific_tone(base, 30)
        c = tones.tone_to_color(tone, base, is_locked=True)
        self.assertEqual(c.hsl, (240, 100, 30))
        self.assertEqual(c.hex, tone.hex)
        self.assertTrue(c.is_locked)
        self.assertNotEqual(c.id, base.id)
        self.assertFalse(tones.tone_to_color(tone, base).is_locked)


class TestConsistency(unittest.TestCase):
    def test_bad_hex_fails(self):
        base = create_color_from_hsl(0, 100, 50)
        self.assertFalse(tones.validate_tone_consistency(base, [ColorTone("x", 50, "nothex")]))

    def test_lightness_mismatch_fails(self):
        base = create_color_from_hsl(0, 100, 50)
        self.assertFalse(tones.validate_tone_consistency(base, [ColorTone("x", 90, "#FF0000")]))

    def test_hue_mismatch_fails(self):
        base = create_color_from_hsl(0, 100, 50)
        self.assertFalse(tones.validate_tone_consistency(base, [ColorTone("x", 50, "#00FF00")]))

    def test_hue_wraparound(self):
        base = create_color_from_hsl(359, 100, 50)
        self.assertTrue(tones.validate_tone_consistency(base, [ColorTone("x", 50, "#FF0000")]))

    def test_empty_is_consistent(self):
        base = create_color_from_hsl(0, 100, 50)
        self.assertTrue(tones.validate_tone_consistency(base, []))


if __name__ == "__main__":
    unittest.main()
