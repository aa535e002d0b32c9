"""Named timeline looks: track style, layout config and theme together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import ConfigurationError
from .layout import LayoutConfig
from .models import FontSpec, SCurve, ZigzagBaseline
from .renderer import Theme

if TYPE_CHECKING:
    from collections.abc import Callable

    from .models import TrackStyle


@dataclass
class Preset:
    """A complete visual variant."""

    name: str
    style: TrackStyle
    config: LayoutConfig
    theme: Theme


def curved() -> Preset:
    """S-curve with labels pushed outward along the curve normal."""
    return Preset(
        name="curved",
        style=SCurve("M100,600 C380,420 760,420 1180,260"),
        config=LayoutConfig(),
        theme=Theme(),
    )


def zigzag() -> Preset:
    """Straight baseline with callouts alternating above and below."""
    return Preset(
        name="zigzag",
        style=ZigzagBaseline(baseline_y=520, margin_x=90),
        config=LayoutConfig(
            inset_fraction=0.0,
            callout_offset=86,
            label_dx=20,
            year_dy=-20,
            title_dy=0,
            stem_gap=20,
            wrap_width=230,
            max_lines=2,
            line_height=20,
            bump_distance=18,
            max_attempts=8,
            collision_margin=4,
            plate_pad=10,
            side_policy="alternate",
            alternate_start=-1,
        ),
        theme=Theme(),
    )


def improved() -> Preset:
    """Gentler curve, crowding-aware sides, single-line titles, shadows."""
    return Preset(
        name="improved",
        style=SCurve("M80,680 C280,450 500,380 720,320 C900,270 1080,240 1200,200"),
        config=LayoutConfig(
            title_y=75,
            subtitle_y=105,
            title_font=FontSpec(size=36, weight=700),
            subtitle_font=FontSpec(size=16, weight=500),
            inset_fraction=0.05,
            tangent_eps=1.0,
            label_offset=95,
            year_dy=-50,
            title_dy=-28,
            stem_gap=15,
            stem_shape="curved",
            stem_start=25,
            year_font=FontSpec(size=20, weight=800),
            label_font=FontSpec(size=14, weight=600),
            wrap_width=200,
            max_lines=1,
            line_height=18,
            bump_distance=18,
            max_attempts=25,
            collision_margin=8,
            plate_pad=14,
            side_policy="crowding",
            alternate_start=1,
        ),
        theme=Theme(
            background_gradient=("#fafbfc", "#f0f4f8"),
            track_stroke="#d7e3ee",
            track_width=14,
            track_opacity=0.8,
            track_shadow=True,
            stem_width=2.5,
            stem_opacity=0.75,
            marker_inner="#4a90c2",
            marker_r_outer=35,
            marker_r_inner=26,
            marker_shadow=True,
            number_size=18,
            year_color="#2c5a85",
            plate_opacity=0.96,
            plate_stroke="#e8eff5",
            plate_stroke_width=1.5,
            plate_radius=10,
        ),
    )


PRESETS: dict[str, Callable[[], Preset]] = {
    "curved": curved,
    "zigzag": zigzag,
    "improved": improved,
}


def get_preset(name: str) -> Preset:
    """Look up a preset by name."""
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown preset '{name}', must be one of {', '.join(PRESETS)}"
        ) from None
    return factory()
