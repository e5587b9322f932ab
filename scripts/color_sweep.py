#!/usr/bin/env python3
"""
Check converter round-trips over a grid of RGB cells and a sample of HSL values.
HEX round-trips must be exact; HSL-based ones are reported as maximum drift.

Usage:
  python scripts/color_sweep.py --steps 18
  python scripts/color_sweep.py --steps 52 --samples 5000 --seed 1
"""
from __future__ import annotations

import argparse
import sys


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Sweep RGB/HEX/HSL round-trips and print the worst drift per representation."
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=18,
        help="Values per RGB channel (e.g. 6 -> 0,51,...,255 -> 216 cells). Default 18.",
    )
    parser.add_argument("--samples", type=int, default=1000, help="HSL samples inside the generator bounds")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the HSL sample")
    args = parser.parse_args()

    try:
        from palettekit.analysis import rgb_grid, sweep_hsl, sweep_rgb
        from palettekit.random_utils import make_rng
    except ImportError:
        sys.path.insert(0, ".")
        from palettekit.analysis import rgb_grid, sweep_hsl, sweep_rgb
        from palettekit.random_utils import make_rng

    rgb = sweep_rgb(rgb_grid(args.steps))
    print(f"RGB grid: {rgb['cells']} cells, {rgb['hex_mismatches']} HEX round-trip mismatches")
    print(
        f"RGB -> HSL -> RGB: {rgb['checked_cells']} cells checked, "
        f"max channel error {rgb['max_rgb_error']} (histogram {rgb['error_histogram']})"
    )
    hsl = sweep_hsl(make_rng(args.seed), args.samples)
    print(
        f"HSL -> HEX -> HSL: {hsl['samples']} samples, max error "
        f"h={hsl['max_h_error']} s={hsl['max_s_error']} l={hsl['max_l_error']}"
    )
    return 1 if rgb["hex_mismatches"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
