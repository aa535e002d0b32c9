"""SVG/PNG export of composed scenes using drawsvg."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import drawsvg as draw

if TYPE_CHECKING:
    from .models import LabelBlock, Placement, Scene, TextBlock

logger = logging.getLogger(__name__)


class Theme:
    """Color theme for timelines."""

    def __init__(
        self,
        background: str = "#ffffff",
        background_gradient: tuple[str, str] | None = None,
        track_stroke: str = "#dfe8f1",
        track_width: float = 12,
        track_opacity: float = 1.0,
        track_shadow: bool = False,
        stem_stroke: str = "#b8c9db",
        stem_width: float = 3,
        stem_opacity: float = 1.0,
        marker_outer: str = "#2c5a85",
        marker_inner: str = "#3f7fb5",
        marker_r_outer: float = 28,
        marker_r_inner: float = 21,
        marker_shadow: bool = False,
        number_color: str = "#ffffff",
        number_size: float = 16,
        title_color: str = "#16324a",
        subtitle_color: str = "#6b7a90",
        year_color: str = "#234b6d",
        label_color: str = "#1d3146",
        plate_fill: str = "#ffffff",
        plate_opacity: float = 0.92,
        plate_stroke: str = "none",
        plate_stroke_width: float = 0,
        plate_radius: float = 6,
    ):
        self.background = background
        self.background_gradient = background_gradient
        self.track_stroke = track_stroke
        self.track_width = track_width
        self.track_opacity = track_opacity
        self.track_shadow = track_shadow
        self.stem_stroke = stem_stroke
        self.stem_width = stem_width
        self.stem_opacity = stem_opacity
        self.marker_outer = marker_outer
        self.marker_inner = marker_inner
        self.marker_r_outer = marker_r_outer
        self.marker_r_inner = marker_r_inner
        self.marker_shadow = marker_shadow
        self.number_color = number_color
        self.number_size = number_size
        self.title_color = title_color
        self.subtitle_color = subtitle_color
        self.year_color = year_color
        self.label_color = label_color
        self.plate_fill = plate_fill
        self.plate_opacity = plate_opacity
        self.plate_stroke = plate_stroke
        self.plate_stroke_width = plate_stroke_width
        self.plate_radius = plate_radius


DEFAULT_THEME = Theme()


class SceneRenderer:
    """Renders composed scenes to SVG."""

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or DEFAULT_THEME

    def render(self, scene: Scene) -> draw.Drawing:
        """Render a scene to an SVG Drawing object."""
        d = draw.Drawing(scene.width, scene.height)
        self._render_background(d, scene)

        self._render_text(d, scene.title, self.theme.title_color)
        self._render_text(d, scene.subtitle, self.theme.subtitle_color)

        self._render_track(d, scene)

        for placement in scene.placements:
            self._render_placement(d, placement)

        return d

    def _render_background(self, d: draw.Drawing, scene: Scene) -> None:
        fill: str | draw.LinearGradient = self.theme.background
        if self.theme.background_gradient:
            start, stop = self.theme.background_gradient
            gradient = draw.LinearGradient(0, 0, scene.width, scene.height)
            gradient.add_stop(0, start)
            gradient.add_stop(1, stop)
            fill = gradient

        d.append(draw.Rectangle(0, 0, scene.width, scene.height, fill=fill))

    def _render_track(self, d: draw.Drawing, scene: Scene) -> None:
        if not scene.track.path_d:
            return

        if self.theme.track_shadow:
            d.append(
                draw.Path(
                    d=scene.track.path_d,
                    fill="none",
                    stroke="#c5d1dd",
                    stroke_width=self.theme.track_width + 2,
                    stroke_linecap="round",
                    opacity=0.3,
                    transform="translate(2, 3)",
                )
            )

        d.append(
            draw.Path(
                d=scene.track.path_d,
                fill="none",
                stroke=self.theme.track_stroke,
                stroke_width=self.theme.track_width,
                stroke_linecap="round",
                opacity=self.theme.track_opacity,
            )
        )

    def _render_placement(self, d: draw.Drawing, placement: Placement) -> None:
        """Render stem, marker disk, ordinal, background plate and label."""
        theme = self.theme
        x, y = placement.marker.point

        d.append(
            draw.Path(
                d=placement.stem_d,
                fill="none",
                stroke=theme.stem_stroke,
                stroke_width=theme.stem_width,
                opacity=theme.stem_opacity,
            )
        )

        if theme.marker_shadow:
            d.append(
                draw.Circle(x + 2, y + 3, theme.marker_r_outer, fill="rgba(44, 90, 133, 0.2)")
            )
        d.append(draw.Circle(x, y, theme.marker_r_outer, fill=theme.marker_outer))
        d.append(draw.Circle(x, y, theme.marker_r_inner, fill=theme.marker_inner))
        d.append(
            draw.Text(
                str(placement.marker.ordinal),
                theme.number_size,
                x, y + theme.number_size * 0.375,
                fill=theme.number_color,
                font_weight="900",
                text_anchor="middle",
            )
        )

        if placement.plate is not None:
            plate = placement.plate
            d.append(
                draw.Rectangle(
                    plate.x, plate.y, plate.width, plate.height,
                    rx=theme.plate_radius, ry=theme.plate_radius,
                    fill=theme.plate_fill,
                    opacity=theme.plate_opacity,
                    stroke=theme.plate_stroke,
                    stroke_width=theme.plate_stroke_width,
                )
            )

        self._render_label(d, placement.label)

    def _render_label(self, d: draw.Drawing, label: LabelBlock) -> None:
        self._render_text(d, label.year, self.theme.year_color)
        for line in label.lines:
            self._render_text(d, line, self.theme.label_color)

    def _render_text(self, d: draw.Drawing, block: TextBlock, color: str) -> None:
        if not block.text:
            return
        d.append(
            draw.Text(
                block.text,
                block.font.size,
                block.x, block.y,
                fill=color,
                font_family=block.font.family,
                font_weight=str(block.font.weight),
                text_anchor=block.anchor,
                dominant_baseline="alphabetic",
            )
        )


def render_to_svg(
    scene: Scene,
    filename: str | None = None,
    theme: Theme | None = None,
) -> str:
    """Render a scene to SVG.

    Args:
        scene: The composed scene to render
        filename: Optional filename to save to (without extension)
        theme: Optional color theme

    Returns:
        SVG content as string
    """
    drawing = SceneRenderer(theme).render(scene)

    if filename:
        drawing.save_svg(f"{filename}.svg")
        logger.info("Saved %s.svg", filename)

    return drawing.as_svg()


def save_png(
    scene: Scene,
    path: str | Path,
    theme: Theme | None = None,
    scale: float = 2.0,
) -> Path:
    """Rasterize a scene to PNG (requires cairosvg)."""
    drawing = SceneRenderer(theme).render(scene)
    drawing.set_pixel_scale(scale)
    path = Path(path)
    drawing.save_png(str(path))
    logger.info("Saved %s", path)
    return path
