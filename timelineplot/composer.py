"""Timeline composer: turns a document into a laid-out scene."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import CapabilityError
from .geometry import build_track
from .layout import CollisionResolver, LayoutConfig, choose_side, plan_positions
from .measure import TextMeasurer, union_box
from .models import (
    LabelBlock,
    Placement,
    PlacementPoint,
    Scene,
    TextBlock,
    Track,
    ZigzagBaseline,
)
from .wrapping import truncate_text, wrap_text

if TYPE_CHECKING:
    from .geometry import TrackGeometry
    from .models import (
        BoundingBox,
        FontSpec,
        Item,
        Point,
        TimelineDocument,
        TrackStyle,
        Vector,
    )

logger = logging.getLogger(__name__)

HORIZONTAL: Vector = (1.0, 0.0)


class TimelineComposer:
    """Lays out markers and labels along a track.

    Items are processed strictly in input order; each label is resolved
    against the finalized boxes of every earlier label.
    """

    def __init__(self, measurer: TextMeasurer | None, config: LayoutConfig | None = None):
        if measurer is None:
            raise CapabilityError("A text measurer is required to lay out labels")
        if not isinstance(measurer, TextMeasurer):
            raise CapabilityError(
                f"{type(measurer).__name__} does not provide text_width/font_extents"
            )
        self.measurer = measurer
        self.config = config or LayoutConfig()

    def compose(self, document: TimelineDocument, style: TrackStyle) -> Scene:
        """Compose a scene for a document on the given track style."""
        config = self.config
        track = build_track(style, config.canvas_width)
        is_zigzag = isinstance(style, ZigzagBaseline)

        scene = Scene(
            width=config.canvas_width,
            height=config.canvas_height,
            title=self._title_block(document.title, config.title_y, config.title_font),
            subtitle=self._title_block(
                document.subtitle, config.subtitle_y, config.subtitle_font
            ),
            track=Track(style=style, path_d=track.path_d(), total_length=track.total_length),
        )

        positions = plan_positions(
            len(document.items), track.total_length, config.inset_fraction
        )
        resolver = CollisionResolver(
            step=config.bump_distance,
            max_attempts=config.max_attempts,
            margin=config.collision_margin,
        )

        for index, (item, s) in enumerate(zip(document.items, positions)):
            placement = self._place_item(index, item, s, track, resolver, is_zigzag)
            scene.placements.append(placement)

        logger.debug(
            "Composed %d placements on a track of length %.1f",
            len(scene.placements),
            track.total_length,
        )
        return scene

    def _title_block(self, text: str, y: float, font: FontSpec) -> TextBlock:
        if text:
            max_width = self.config.canvas_width - 2 * self.config.title_x
            text = truncate_text(
                text, max_width, lambda s: self.measurer.text_width(s, font)
            )
        return TextBlock(text, self.config.title_x, y, font)

    def _place_item(
        self,
        index: int,
        item: Item,
        s: float,
        track: TrackGeometry,
        resolver: CollisionResolver,
        is_zigzag: bool,
    ) -> Placement:
        config = self.config
        point = track.point_at(s)
        tangent = track.tangent_at(s, config.tangent_eps)
        normal = track.normal_at(s, config.tangent_eps)

        side = choose_side(index, point, normal, resolver.placed, config)
        if is_zigzag:
            anchor = (
                point[0] + side * config.label_dx,
                point[1] + side * config.callout_offset,
            )
            stem_d = _elbow_stem(
                point, side, config.callout_offset - config.stem_gap, config.stem_elbow
            )
            push = HORIZONTAL
        else:
            anchor = (
                point[0] + normal[0] * config.label_offset * side,
                point[1] + normal[1] * config.label_offset * side,
            )
            stem_d = _normal_stem(point, normal, side, config)
            push = normal

        marker = PlacementPoint(
            point=point,
            tangent=tangent,
            normal=normal,
            side=side,
            ordinal=index + 1,
            arc_length=s,
        )

        label = self._build_label(item, anchor, point)
        if label.truncated:
            logger.debug("Title of item %d truncated to %d lines", index + 1, len(label.lines))

        resolution, placed_box = resolver.place(label, push, side, self._label_box)
        if not resolution.succeeded:
            logger.warning(
                "Label %d still overlaps after %d attempts; keeping last position",
                index + 1,
                resolution.attempts,
            )

        plate = resolution.box.inflate(config.plate_pad) if config.show_plate else None
        return Placement(
            marker=marker,
            label=label,
            stem_d=stem_d,
            resolution=resolution,
            placed_box=placed_box,
            plate=plate,
        )

    def _build_label(self, item: Item, anchor: Point, point: Point) -> LabelBlock:
        config = self.config
        lx, ly = anchor
        text_anchor = "start" if lx >= point[0] else "end"

        year = TextBlock(item.year, lx, ly + config.year_dy, config.year_font, text_anchor)
        wrapped = wrap_text(
            item.title,
            config.wrap_width,
            config.max_lines,
            lambda s: self.measurer.text_width(s, config.label_font),
        )
        lines = [
            TextBlock(
                line,
                lx,
                ly + config.title_dy + i * config.line_height,
                config.label_font,
                text_anchor,
            )
            for i, line in enumerate(wrapped.lines)
        ]
        return LabelBlock(year=year, lines=lines, truncated=wrapped.truncated)

    def _label_box(self, label: LabelBlock) -> BoundingBox:
        return union_box(self.measurer, label.blocks())


def _straight_stem(start: Point, end: Point) -> str:
    return f"M{start[0]:.2f},{start[1]:.2f} L{end[0]:.2f},{end[1]:.2f}"


def _normal_stem(point: Point, normal: Vector, side: int, config: LayoutConfig) -> str:
    """Connector from the marker towards the label along the normal."""

    def along(distance: float) -> Point:
        return (
            point[0] + normal[0] * distance * side,
            point[1] + normal[1] * distance * side,
        )

    start = along(config.stem_start)
    end = along(config.label_offset - config.stem_gap)
    if config.stem_shape == "straight":
        return _straight_stem(start, end)
    ctrl = along(config.label_offset * config.stem_bend)
    return (
        f"M{start[0]:.2f},{start[1]:.2f} "
        f"Q{ctrl[0]:.2f},{ctrl[1]:.2f} {end[0]:.2f},{end[1]:.2f}"
    )


def _elbow_stem(start: Point, side: int, rise: float, run: float) -> str:
    """Vertical then short horizontal connector."""
    return f"M{start[0]:.2f},{start[1]:.2f} v{side * rise:.2f} h{side * run:.2f}"


def render(
    document: TimelineDocument,
    style: TrackStyle,
    measurer: TextMeasurer | None,
    config: LayoutConfig | None = None,
) -> Scene:
    """Lay out a document on a track and return the finished scene."""
    return TimelineComposer(measurer, config).compose(document, style)

