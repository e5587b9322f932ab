"""
Schema for colors, tones and palettes.
All values are immutable; "changing" a color means building a replacement.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from numbers import Real
from typing import Any

from .errors import InvalidColorValue

RGB = tuple[int, int, int]
HSL = tuple[int, int, int]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_whole(x) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool) and float(x).is_integer()


@dataclass(frozen=True)
class Color:
    """
    One color in three synchronized representations.
    Build with the create_color_from_* factories so hex/rgb/hsl always agree.
    """

    id: str
    hex: str  # "#RRGGBB", upper-case
    rgb: RGB
    hsl: HSL  # hue [0, 360), saturation and lightness [0, 100]
    is_locked: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize as a plain JSON-shaped object."""
        r, g, b = self.rgb
        h, s, l = self.hsl
        return {
            "id": self.id,
            "hex": self.hex,
            "rgb": {"r": r, "g": g, "b": b},
            "hsl": {"h": h, "s": s, "l": l},
            "isLocked": self.is_locked,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Color":
        """
        Rebuild a color from to_dict() output. Channels must be whole numbers in
        range and the three representations must agree; the stored values are then
        kept exactly as given so a color survives a JSON round-trip unchanged.
        """
        from .converter import (
            hex_to_rgb, hsl_to_rgb, is_valid_hex, is_valid_hsl, is_valid_rgb, rgb_to_hsl,
        )
        from .palette import hue_distance

        try:
            raw_rgb = (data["rgb"]["r"], data["rgb"]["g"], data["rgb"]["b"])
            raw_hsl = (data["hsl"]["h"], data["hsl"]["s"], data["hsl"]["l"])
            hex_code = data["hex"]
            color_id = str(data["id"])
        except (KeyError, TypeError) as e:
            raise InvalidColorValue(f"Malformed color object: {e}", value=data) from e
        if not all(_is_whole(v) for v in raw_rgb + raw_hsl):
            raise InvalidColorValue(f"Color channels must be whole numbers: {data!r}", value=data)
        if not is_valid_hex(hex_code) or not is_valid_rgb(*raw_rgb) or not is_valid_hsl(*raw_hsl):
            raise InvalidColorValue(f"Color values out of range: {data!r}", value=data)

        rgb = tuple(int(v) for v in raw_rgb)
        h, s, l = (int(v) for v in raw_hsl)
        hsl = (h % 360, s, l)
        if hex_to_rgb(hex_code) != rgb:
            raise InvalidColorValue(f"HEX {hex_code} does not match RGB {rgb}", value=data)
        dh, ds, dl = rgb_to_hsl(*rgb)
        # Gray and near-white/black colors lose hue and saturation in RGB
        close = hue_distance(dh, hsl[0]) <= 2 and abs(ds - s) <= 2 and abs(dl - l) <= 2
        if not close and hsl_to_rgb(*hsl) != rgb:
            raise InvalidColorValue(f"HSL {hsl} does not match RGB {rgb}", value=data)

        hex_code = hex_code.upper()
        if not hex_code.startswith("#"):
            hex_code = "#" + hex_code
        return cls(
            id=color_id,
            hex=hex_code,
            rgb=rgb,
            hsl=hsl,
            is_locked=bool(data.get("isLocked", False)),
        )


@dataclass(frozen=True)
class ColorTone:
    """One rung of a tone ladder: same hue/saturation as its base, own lightness."""

    label: str
    lightness: int
    hex: str

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "lightness": self.lightness, "hex": self.hex}


@dataclass(frozen=True)
class Palette:
    """Ordered colors plus the moment they were generated."""

    colors: tuple[Color, ...]
    created_at: datetime = field(default_factory=_utcnow)
    name: str | None = None

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)

    @property
    def locked(self) -> tuple[Color, ...]:
        return tuple(c for c in self.colors if c.is_locked)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "colors": [c.to_dict() for c in self.colors],
            "createdAt": self.created_at.isoformat(),
        }
        if self.name is not None:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Palette":
        raw_colors = data.get("colors")
        if not isinstance(raw_colors, list):
            raise InvalidColorValue("Palette object needs a 'colors' list", value=data)
        colors = tuple(Color.from_dict(c) for c in raw_colors)
        raw_created = data.get("createdAt")
        created_at = _utcnow()
        if raw_created:
            try:
                created_at = datetime.fromisoformat(str(raw_created).replace("Z", "+00:00"))
            except ValueError as e:
                raise InvalidColorValue(f"Invalid createdAt: {raw_created!r}", value=raw_created) from e
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(colors=colors, created_at=created_at, name=data.get("name"))


@dataclass(frozen=True)
class GenerationOptions:
    """Options for harmonious palette generation."""

    preserve_locked: bool = True
    max_attempts: int = 50  # hue draws before falling back to an unconstrained color
