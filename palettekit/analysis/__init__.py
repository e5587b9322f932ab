# Conversion diagnostics: round-trip sweeps over RGB grids and sampled HSL values

from .roundtrip import rgb_grid, sweep_hsl, sweep_rgb

__all__ = ["rgb_grid", "sweep_hsl", "sweep_rgb"]
