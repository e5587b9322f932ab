"""
Load and expose app config (YAML). Used by the CLI and sessions for generation options,
the random seed and the log level.
"""
from pathlib import Path
from typing import Any

import yaml

from .color.schema import GenerationOptions
from .random_utils import make_rng


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return _merge(_defaults(), data)


def _defaults() -> dict[str, Any]:
    return {
        "palette": {"preserve_locked": True, "max_attempts": 50},
        "random": {"seed": None},
        "logging": {"level": "WARNING"},
    }


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """One level deep: sections in override replace individual keys of base sections."""
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = {**out[key], **value}
        else:
            out[key] = value
    return out


def generation_options(config: dict[str, Any]) -> GenerationOptions:
    """GenerationOptions from the palette section; max_attempts is at least 1."""
    section = config.get("palette", {}) or {}
    return GenerationOptions(
        preserve_locked=bool(section.get("preserve_locked", True)),
        max_attempts=max(1, int(section.get("max_attempts", 50))),
    )


def rng_from_config(config: dict[str, Any], seed: int | None = None):
    """Random source: explicit seed wins, then random.seed from config, else SystemRandom."""
    if seed is None:
        seed = (config.get("random", {}) or {}).get("seed")
    return make_rng(None if seed is None else int(seed))
