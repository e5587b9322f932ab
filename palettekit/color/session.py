"""
PaletteSession: the "current palette" a UI keeps between user actions.
The only stateful piece; everything it does is delegated to the pure functions.
Not thread-safe; use one session per calling context.
"""
import logging
from collections import deque
from typing import Any

from . import palette as palette_ops
from .errors import ColorError
from .schema import Color, ColorTone, GenerationOptions, Palette
from .tones import generate_all_tones, generate_tones

logger = logging.getLogger(__name__)

DEFAULT_HISTORY = 20


class PaletteSession:
    def __init__(
        self,
        options: GenerationOptions | None = None,
        rng: Any = None,
        history_size: int = DEFAULT_HISTORY,
    ):
        self.options = options or GenerationOptions()
        self.rng = rng
        self.history: deque[Palette] = deque(maxlen=max(0, history_size))
        self.palette = palette_ops.generate_fresh_palette(self.rng, self.options.max_attempts)

    def _set(self, new_palette: Palette) -> Palette:
        if new_palette is not self.palette:
            self.history.append(self.palette)
            self.palette = new_palette
        return self.palette

    def generate(self) -> Palette:
        """Next palette: locked colors kept when preserve_locked is set."""
        try:
            new_palette = palette_ops.generate_harmonious_palette(
                self.palette.colors, self.options, self.rng
            )
        except ColorError as e:
            logger.error("Palette regeneration failed: %s; starting a fresh palette", e)
            new_palette = palette_ops.generate_fresh_palette(self.rng, self.options.max_attempts)
        logger.debug("Generated palette %s", [c.hex for c in new_palette.colors])
        return self._set(new_palette)

    def toggle_lock(self, color_id: str) -> Palette:
        return self._set(palette_ops.toggle_color_lock(self.palette, color_id))

    def update_color(self, color_id: str, color: Color) -> Palette:
        return self._set(palette_ops.update_color(self.palette, color_id, color))

    def apply_tone(self, color_id: str, tone: ColorTone) -> Palette:
        return self._set(palette_ops.apply_tone(self.palette, color_id, tone))

    def tones(self, color_id: str, all_steps: bool = False) -> list[ColorTone]:
        """Tone ladder for one palette entry. KeyError when the id is not in the palette."""
        color = palette_ops.find_color(self.palette, color_id)
        if color is None:
            raise KeyError(color_id)
        return generate_all_tones(color) if all_steps else generate_tones(color)

    def undo(self) -> Palette:
        """Back to the previous palette; no-op when there is no history."""
        if self.history:
            self.palette = self.history.pop()
        return self.palette
