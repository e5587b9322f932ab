#!/usr/bin/env python3
"""
Generate palettes, tone ladders and conversions from the command line (JSON output).

Usage:
  python scripts/generate_palette.py fresh --seed 7
  python scripts/generate_palette.py tones "#3A7BD5" --all
"""
import sys

try:
    from palettekit.cli import main
except ImportError:
    sys.path.insert(0, ".")
    from palettekit.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
