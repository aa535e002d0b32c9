"""Data models for timelineplot scenes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, Union

Point = tuple[float, float]
Vector = tuple[float, float]
TextAnchor = Literal["start", "middle", "end"]


def _as_text(value: Any) -> str:
    """Coerce a free-text document field, treating absence as empty."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Item:
    """A single milestone on the timeline."""

    year: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Item:
        if not isinstance(data, Mapping):
            return cls()
        return cls(year=_as_text(data.get("year")), title=_as_text(data.get("title")))


@dataclass(frozen=True)
class TimelineDocument:
    """The input document: optional title/subtitle and ordered items."""

    title: str = ""
    subtitle: str = ""
    items: tuple[Item, ...] = ()

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any] | None) -> TimelineDocument:
        """Build a document from parsed JSON, degrading missing fields to ''."""
        if not payload:
            return cls()
        items = payload.get("items") or ()
        if not isinstance(items, (list, tuple)):
            items = ()
        return cls(
            title=_as_text(payload.get("title")),
            subtitle=_as_text(payload.get("subtitle")),
            items=tuple(Item.from_dict(it) for it in items),
        )


@dataclass(frozen=True)
class SCurve:
    """Track drawn along an SVG path description."""

    path_d: str


@dataclass(frozen=True)
class ZigzagBaseline:
    """Straight horizontal track with labels alternating above and below."""

    baseline_y: float = 520
    margin_x: float = 90


TrackStyle = Union[SCurve, ZigzagBaseline]


@dataclass(frozen=True)
class FontSpec:
    """Font used to draw (and measure) a piece of text."""

    size: float = 16
    weight: int = 600
    family: str = "Inter, -apple-system, BlinkMacSystemFont, sans-serif"

    @property
    def is_bold(self) -> bool:
        return self.weight >= 600


@dataclass
class BoundingBox:
    """Axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def union(self, other: BoundingBox) -> BoundingBox:
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.right, other.right)
        y2 = max(self.bottom, other.bottom)
        return BoundingBox(x1, y1, x2 - x1, y2 - y1)

    def inflate(self, pad: float) -> BoundingBox:
        return BoundingBox(
            self.x - pad, self.y - pad, self.width + 2 * pad, self.height + 2 * pad
        )

    def translate(self, dx: float, dy: float) -> BoundingBox:
        return BoundingBox(self.x + dx, self.y + dy, self.width, self.height)

    def intersects(self, other: BoundingBox) -> bool:
        """True unless the two boxes are separated on some axis."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


@dataclass
class TextBlock:
    """A single line of text positioned on its alphabetic baseline."""

    text: str
    x: float
    y: float
    font: FontSpec
    anchor: TextAnchor = "start"

    def translate(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy


@dataclass
class LabelBlock:
    """Year plus wrapped title for one milestone.

    Mutated in place while collisions are resolved.
    """

    year: TextBlock
    lines: list[TextBlock] = field(default_factory=list)
    truncated: bool = False

    @property
    def anchor(self) -> Point:
        return self.year.x, self.year.y

    @property
    def text_anchor(self) -> TextAnchor:
        return self.year.anchor

    def blocks(self) -> list[TextBlock]:
        return [self.year, *self.lines]

    def translate(self, dx: float, dy: float) -> None:
        for block in self.blocks():
            block.translate(dx, dy)


@dataclass(frozen=True)
class PlacementPoint:
    """Where a marker sits on the track and which way its label goes."""

    point: Point
    tangent: Vector
    normal: Vector
    side: int
    ordinal: int
    arc_length: float


@dataclass(frozen=True)
class Resolution:
    """Outcome of the anti-collision pass for one label."""

    box: BoundingBox
    offset: Vector
    attempts: int
    succeeded: bool


@dataclass
class Placement:
    """A marker together with its finalized label."""

    marker: PlacementPoint
    label: LabelBlock
    stem_d: str
    resolution: Resolution
    placed_box: BoundingBox
    plate: BoundingBox | None = None


@dataclass
class Track:
    """Track geometry as it ends up in the scene."""

    style: TrackStyle
    path_d: str
    total_length: float


@dataclass
class Scene:
    """The finished layout, handed to the export adapter."""

    width: float
    height: float
    title: TextBlock
    subtitle: TextBlock
    track: Track
    placements: list[Placement] = field(default_factory=list)

    @property
    def markers(self) -> list[PlacementPoint]:
        return [p.marker for p in self.placements]

    @property
    def labels(self) -> list[LabelBlock]:
        return [p.label for p in self.placements]
