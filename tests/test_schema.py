"""
Unit tests for rebuilding colors and palettes from their JSON shape.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from palettekit.color.converter import create_color_from_hsl, create_color_from_rgb
from palettekit.color.errors import ColorError, InvalidColorValue
from palettekit.color.schema import Color, Palette


def _coral(**overrides):
    data = {
        "id": "c1",
        "hex": "#FF5233",
        "rgb": {"r": 255, "g": 82, "b": 51},
        "hsl": {"h": 9, "s": 100, "l": 60},
        "isLocked": True,
    }
    data.update(overrides)
    return data


class TestColorFromDict(unittest.TestCase):
    def test_round_trip_is_exact(self):
        for color in (
            create_color_from_hsl(9, 100, 60, True),
            create_color_from_rgb(20, 155, 166),
            create_color_from_hsl(120, 100, 100),
            create_color_from_hsl(200, 0, 50),
        ):
            with self.subTest(hex=color.hex):
                self.assertEqual(Color.from_dict(color.to_dict()), color)

    def test_accepts_consistent_hand_written_color(self):
        color = Color.from_dict(_coral(hex="ff5233"))
        self.assertEqual(color.hex, "#FF5233")
        self.assertEqual(color.rgb, (255, 82, 51))
        self.assertEqual(color.hsl, (9, 100, 60))
        self.assertTrue(color.is_locked)

    def test_whole_floats_become_ints(self):
        color = Color.from_dict(_coral(rgb={"r": 255.0, "g": 82.0, "b": 51.0}))
        self.assertEqual(color.rgb, (255, 82, 51))
        self.assertIsInstance(color.rgb[0], int)

    def test_hue_360_is_stored_as_0(self):
        data = create_color_from_hsl(0, 100, 50).to_dict()
        data["hsl"]["h"] = 360
        self.assertEqual(Color.from_dict(data).hsl, (0, 100, 50))

    def test_hex_must_match_rgb(self):
        data = {
            "id": "x",
            "hex": "#000000",
            "rgb": {"r": 255, "g": 255, "b": 255},
            "hsl": {"h": 120, "s": 100, "l": 50},
            "isLocked": True,
        }
        with self.assertRaises(InvalidColorValue):
            Color.from_dict(data)

    def test_hsl_must_match_rgb(self):
        with self.assertRaises(InvalidColorValue):
            Color.from_dict(_coral(hsl={"h": 200, "s": 100, "l": 60}))
        with self.assertRaises(InvalidColorValue):
            Color.from_dict(_coral(hsl={"h": 9, "s": 100, "l": 30}))

    def test_fractional_channels_are_rejected(self):
        with self.assertRaises(InvalidColorValue):
            Color.from_dict(_coral(rgb={"r": 254.9, "g": 82, "b": 51}))
        with self.assertRaises(InvalidColorValue):
            Color.from_dict(_coral(hsl={"h": 9.5, "s": 100, "l": 60}))

    def test_non_numeric_channels_are_rejected(self):
        for bad in ("255", None, True):
            with self.subTest(r=bad):
                with self.assertRaises(InvalidColorValue):
                    Color.from_dict(_coral(rgb={"r": bad, "g": 82, "b": 51}))

    def test_malformed_objects(self):
        with self.assertRaises(InvalidColorValue):
            Color.from_dict({"id": "x"})
        with self.assertRaises(InvalidColorValue):
            Color.from_dict(_coral(hex="#GG5233"))
        with self.assertRaises(InvalidColorValue):
            Color.from_dict(_coral(rgb={"r": 300, "g": 82, "b": 51}))


class TestPaletteFromDict(unittest.TestCase):
    def test_round_trip(self):
        palette = Palette(colors=(create_color_from_hsl(9, 100, 60), create_color_from_hsl(200, 70, 50)))
        self.assertEqual(Palette.from_dict(palette.to_dict()), palette)

    def test_mismatched_color_is_rejected(self):
        data = {"colors": [_coral(), _coral(id="c2", hex="#000000")]}
        with self.assertRaises(ColorError):
            Palette.from_dict(data)

    def test_missing_colors_list(self):
        with self.assertRaises(InvalidColorValue):
            Palette.from_dict({"createdAt": "2024-01-01T00:00:00Z"})


if __name__ == "__main__":
    unittest.main()
