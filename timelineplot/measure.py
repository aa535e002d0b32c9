"""Text measurement capability used by the layout engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from PIL import ImageFont

from .models import BoundingBox

if TYPE_CHECKING:
    from .models import FontSpec, TextBlock

logger = logging.getLogger(__name__)

FontType = ImageFont.FreeTypeFont | ImageFont.ImageFont

_REGULAR_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
]
_BOLD_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSansBold.ttf",
]

# Fraction of the font size above / below the baseline when no metrics exist.
ASCENT_RATIO = 0.8
DESCENT_RATIO = 0.2


@runtime_checkable
class TextMeasurer(Protocol):
    """Measures rendered text. Injected into the composer."""

    def text_width(self, text: str, font: FontSpec) -> float: ...

    def font_extents(self, font: FontSpec) -> tuple[float, float]: ...


def text_box(measurer: TextMeasurer, block: TextBlock) -> BoundingBox:
    """Bounding box of a placed text block (alphabetic baseline)."""
    width = measurer.text_width(block.text, block.font) if block.text else 0.0
    ascent, descent = measurer.font_extents(block.font)

    if block.anchor == "end":
        x = block.x - width
    elif block.anchor == "middle":
        x = block.x - width / 2
    else:
        x = block.x

    return BoundingBox(x, block.y - ascent, width, ascent + descent)


def union_box(measurer: TextMeasurer, blocks: list[TextBlock]) -> BoundingBox:
    """Union of the boxes of several text blocks."""
    box = text_box(measurer, blocks[0])
    for block in blocks[1:]:
        box = box.union(text_box(measurer, block))
    return box


class CharWidthMeasurer:
    """Estimate text width from character count.

    Deterministic and font-free; useful for tests and headless previews.
    """

    def __init__(self, char_width_ratio: float = 0.55, bold_factor: float = 1.1):
        self.char_width_ratio = char_width_ratio
        self.bold_factor = bold_factor

    def text_width(self, text: str, font: FontSpec) -> float:
        width = len(text) * font.size * self.char_width_ratio
        if font.is_bold:
            width *= self.bold_factor
        return width

    def font_extents(self, font: FontSpec) -> tuple[float, float]:
        return font.size * ASCENT_RATIO, font.size * DESCENT_RATIO


class PillowMeasurer:
    """Measure text with real TrueType fonts through Pillow."""

    def __init__(
        self,
        font_path: str | None = None,
        bold_font_path: str | None = None,
    ):
        self.font_path = font_path or _first_existing(_REGULAR_FONT_CANDIDATES)
        self.bold_font_path = (
            bold_font_path
            or font_path
            or _first_existing(_BOLD_FONT_CANDIDATES)
            or self.font_path
        )
        self._font_cache: dict[tuple[str | None, float], FontType] = {}

    def get_font(self, font: FontSpec) -> FontType:
        path = self.bold_font_path if font.is_bold else self.font_path
        cache_key = (path, font.size)
        if cache_key in self._font_cache:
            return self._font_cache[cache_key]

        loaded = self._load_font(path, font.size)
        self._font_cache[cache_key] = loaded
        return loaded

    @staticmethod
    def _load_font(path: str | None, size: float) -> FontType:
        if path is not None:
            try:
                return ImageFont.truetype(path, size)
            except OSError as exc:
                logger.warning("Could not load font %s: %s", path, exc)
        logger.warning("No TrueType font found; using Pillow's default font")
        return ImageFont.load_default(size)

    def text_width(self, text: str, font: FontSpec) -> float:
        return float(self.get_font(font).getlength(text))

    def font_extents(self, font: FontSpec) -> tuple[float, float]:
        loaded = self.get_font(font)
        if isinstance(loaded, ImageFont.FreeTypeFont):
            ascent, descent = loaded.getmetrics()
            return float(ascent), float(descent)
        return font.size * ASCENT_RATIO, font.size * DESCENT_RATIO


def _first_existing(candidates: list[str]) -> str | None:
    for candidate in candidates:
        if Path(candidate).exists():
            return candidate
    return None
