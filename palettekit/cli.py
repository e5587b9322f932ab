"""
Command-line shell around the color core. Every command prints JSON on stdout.

Usage:
  python -m palettekit.cli fresh --seed 7
  python -m palettekit.cli regenerate palette.json      # or "-" for stdin
  python -m palettekit.cli tones "#3A7BD5" --all
  python -m palettekit.cli closest-tone 52
  python -m palettekit.cli convert "hsl(210, 65, 53)"
"""
from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any

from .color import (
    ColorError,
    InvalidColorValue,
    Palette,
    create_color_from_hex,
    create_color_from_hsl,
    create_color_from_rgb,
    find_closest_tone,
    generate_all_tones,
    generate_fresh_palette,
    generate_harmonious_palette,
    generate_tones,
    get_contrast_color,
    validate_palette,
)
from .config import generation_options, load_config, rng_from_config
from .workflow_utils import log_structured, setup_logging

logger = logging.getLogger(__name__)

_FUNC_RE = re.compile(r"^\s*(rgb|hsl)\s*\(\s*([^)]*)\)\s*$", re.IGNORECASE)


def parse_color(value: str):
    """Color from "#RRGGBB", "rgb(r, g, b)" or "hsl(h, s, l)"."""
    m = _FUNC_RE.match(value)
    if not m:
        return create_color_from_hex(value.strip())
    kind = m.group(1).lower()
    parts = [p.strip().rstrip("%") for p in m.group(2).split(",")]
    if len(parts) != 3:
        raise InvalidColorValue(f"Expected three components in {value!r}", value=value)
    try:
        nums = [float(p) for p in parts]
    except ValueError as e:
        raise InvalidColorValue(f"Non-numeric component in {value!r}", value=value) from e
    if kind == "rgb":
        return create_color_from_rgb(*nums)
    return create_color_from_hsl(*nums)


def _read_palette(source: str) -> Palette:
    if source == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(source).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidColorValue(f"Palette file is not JSON: {e}", value=source) from e
    return Palette.from_dict(data)


def _palette_payload(palette: Palette) -> dict[str, Any]:
    d = palette.to_dict()
    d["valid"] = validate_palette(palette)
    return d


def _cmd_fresh(args: argparse.Namespace, config: dict[str, Any]) -> Any:
    rng = rng_from_config(config, args.seed)
    palette = generate_fresh_palette(rng, generation_options(config).max_attempts)
    log_structured("info", event="palette_generated", colors=[c.hex for c in palette.colors])
    return _palette_payload(palette)


def _cmd_regenerate(args: argparse.Namespace, config: dict[str, Any]) -> Any:
    current = _read_palette(args.palette)
    rng = rng_from_config(config, args.seed)
    palette = generate_harmonious_palette(current.colors, generation_options(config), rng)
    log_structured(
        "info",
        event="palette_regenerated",
        kept=[c.hex for c in palette.locked],
        colors=[c.hex for c in palette.colors],
    )
    return _palette_payload(palette)


def _cmd_tones(args: argparse.Namespace, config: dict[str, Any]) -> Any:
    base = parse_color(args.color)
    tones = generate_all_tones(base) if args.all else generate_tones(base)
    return {"base": base.to_dict(), "tones": [t.to_dict() for t in tones]}


def _cmd_closest_tone(args: argparse.Namespace, config: dict[str, Any]) -> Any:
    tone = find_closest_tone(args.lightness)
    return {"label": tone.label, "lightness": tone.lightness}


def _cmd_convert(args: argparse.Namespace, config: dict[str, Any]) -> Any:
    color = parse_color(args.value)
    d = color.to_dict()
    d["contrast"] = get_contrast_color(color.hex)
    return d


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palettekit",
        description="Generate five-color palettes, tone ladders and color conversions (JSON output).",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config (default: config/default.yaml)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log at INFO level to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("fresh", help="Generate a new palette")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    p.set_defaults(func=_cmd_fresh)

    p = sub.add_parser("regenerate", help="Regenerate a palette JSON, keeping locked colors")
    p.add_argument("palette", help="Palette JSON file, or - for stdin")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    p.set_defaults(func=_cmd_regenerate)

    p = sub.add_parser("tones", help="Tone ladder for a color")
    p.add_argument("color", help='Base color: "#RRGGBB", "rgb(r,g,b)" or "hsl(h,s,l)"')
    p.add_argument("--all", action="store_true", help="All ten steps (50-900) instead of 100-700")
    p.set_defaults(func=_cmd_tones)

    p = sub.add_parser("closest-tone", help="Standard tone step nearest to a lightness")
    p.add_argument("lightness", type=float)
    p.set_defaults(func=_cmd_closest_tone)

    p = sub.add_parser("convert", help="Show a color as HEX, RGB and HSL")
    p.add_argument("value", help='"#RRGGBB", "rgb(r,g,b)" or "hsl(h,s,l)"')
    p.set_defaults(func=_cmd_convert)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    setup_logging("INFO" if args.verbose else config.get("logging", {}).get("level", "WARNING"))

    try:
        result = args.func(args, config)
    except ColorError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
