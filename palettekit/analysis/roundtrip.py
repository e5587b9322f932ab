"""
Round-trip sweeps for the color converter.
HEX -> RGB -> HEX must be exact; RGB -> HSL -> RGB and HSL -> HEX -> HSL only come
back within a few units because HSL is stored as integers.
"""
from typing import Any

import numpy as np

from ..color.converter import hex_to_hsl, hex_to_rgb, hsl_to_hex, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from ..color.palette import LIGHTNESS_MAX, LIGHTNESS_MIN, SATURATION_MAX, SATURATION_MIN
from ..random_utils import random_in_range

# RGB -> HSL -> RGB is only measured away from the edges and away from gray
CHECK_MIN = 20
CHECK_MAX = 235
MIN_SPREAD = 20


def rgb_grid(steps: int = 6) -> np.ndarray:
    """
    (N, 3) integer grid over [0, 255] with `steps` values per channel
    (e.g. 6 -> 0, 51, 102, 153, 204, 255 -> 216 cells).
    """
    steps = max(2, min(256, int(steps)))
    values = np.unique(np.round(np.linspace(0, 255, steps)).astype(np.int64))
    r, g, b = np.meshgrid(values, values, values, indexing="ij")
    return np.stack([r.ravel(), g.ravel(), b.ravel()], axis=1)


def _checkable(grid: np.ndarray) -> np.ndarray:
    lo = grid.min(axis=1)
    hi = grid.max(axis=1)
    return (lo >= CHECK_MIN) & (hi <= CHECK_MAX) & (hi - lo >= MIN_SPREAD)


def sweep_rgb(grid: Any) -> dict[str, Any]:
    """
    Run every cell through HEX and HSL round-trips.
    Returns cells, hex_mismatches, checked_cells, max_rgb_error and
    error_histogram (count of checked cells per max channel error).
    """
    grid = np.asarray(grid, dtype=np.int64).reshape(-1, 3)

    hex_mismatches = 0
    for r, g, b in grid.tolist():
        hex_code = rgb_to_hex(r, g, b)
        if rgb_to_hex(*hex_to_rgb(hex_code)) != hex_code:
            hex_mismatches += 1

    checked = grid[_checkable(grid)]
    if len(checked):
        back = np.array([hsl_to_rgb(*rgb_to_hsl(*row)) for row in checked.tolist()], dtype=np.int64)
        per_cell = np.abs(back - checked).max(axis=1)
        max_error = int(per_cell.max())
        histogram = np.bincount(per_cell).tolist()
    else:
        max_error = 0
        histogram = []

    return {
        "cells": int(len(grid)),
        "hex_mismatches": hex_mismatches,
        "checked_cells": int(len(checked)),
        "max_rgb_error": max_error,
        "error_histogram": histogram,
    }


def sweep_hsl(rng: Any, samples: int = 500) -> dict[str, Any]:
    """
    Sample HSL inside the generator bounds and measure HSL -> HEX -> HSL drift.
    Hue drift is circular.
    """
    source = np.array(
        [
            (
                random_in_range(rng, 0, 360),
                random_in_range(rng, SATURATION_MIN, SATURATION_MAX),
                random_in_range(rng, LIGHTNESS_MIN, LIGHTNESS_MAX),
            )
            for _ in range(max(0, samples))
        ],
        dtype=np.int64,
    ).reshape(-1, 3)
    if not len(source):
        return {"samples": 0, "max_h_error": 0, "max_s_error": 0, "max_l_error": 0}

    back = np.array([hex_to_hsl(hsl_to_hex(*row)) for row in source.tolist()], dtype=np.int64)
    hue_diff = np.abs(back[:, 0] - source[:, 0]) % 360
    hue_err = np.minimum(hue_diff, 360 - hue_diff)
    return {
        "samples": int(len(source)),
        "max_h_error": int(hue_err.max()),
        "max_s_error": int(np.abs(back[:, 1] - source[:, 1]).max()),
        "max_l_error": int(np.abs(back[:, 2] - source[:, 2]).max()),
    }
