"""Layout algorithms: marker placement, side choice and label anti-collision."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from .exceptions import ConfigurationError
from .models import BoundingBox, FontSpec, Resolution

if TYPE_CHECKING:
    from collections.abc import Callable

    from .models import LabelBlock, Point, Vector

SidePolicy = Literal["normal", "alternate", "crowding"]
SIDE_POLICIES = ("normal", "alternate", "crowding")
StemShape = Literal["straight", "curved"]
STEM_SHAPES = ("straight", "curved")


@dataclass
class LayoutConfig:
    """Configuration for layout calculations."""

    canvas_width: float = 1280
    canvas_height: float = 840

    # Title block
    title_x: float = 60
    title_y: float = 84
    subtitle_y: float = 112
    title_font: FontSpec = field(default_factory=lambda: FontSpec(size=42, weight=900))
    subtitle_font: FontSpec = field(default_factory=lambda: FontSpec(size=18, weight=600))

    # Markers along the track
    inset_fraction: float = 0.03  # Kept free at each end of the track
    tangent_eps: float = 0.5

    # Labels
    label_offset: float = 70  # Distance from curve to label anchor
    callout_offset: float = 86  # Distance from baseline to label (zigzag)
    label_dx: float = 20  # Horizontal shift of zigzag labels off the stem
    year_dy: float = -18  # Year baseline relative to the label anchor
    title_dy: float = 4  # First title line relative to the label anchor
    stem_gap: float = 18  # Stem stops this short of the label anchor
    stem_elbow: float = 12  # Horizontal run of zigzag elbow stems
    stem_shape: StemShape = "straight"  # Curve stems only
    stem_start: float = 0  # Stem starts this far from the marker centre
    stem_bend: float = 0.6  # Control point of curved stems, as a fraction of label_offset
    year_font: FontSpec = field(default_factory=lambda: FontSpec(size=22, weight=900))
    label_font: FontSpec = field(default_factory=lambda: FontSpec(size=16, weight=800))
    wrap_width: float = 260
    max_lines: int = 2
    line_height: float = 20

    # Anti-collision
    bump_distance: float = 16
    max_attempts: int = 10
    collision_margin: float = 6  # Safety margin around finalized label boxes
    plate_pad: float = 8
    show_plate: bool = True

    # Side selection
    side_policy: SidePolicy = "normal"
    alternate_start: int = 1  # Side of even-indexed items
    crowding_dx: float = 80
    crowding_dy: float = 60
    crowding_threshold: int = 1  # Flip side when more nearby boxes than this

    def __post_init__(self) -> None:
        if self.max_lines < 1:
            raise ConfigurationError(f"max_lines must be >= 1, got {self.max_lines}")
        if self.max_attempts < 0:
            raise ConfigurationError(
                f"max_attempts must be >= 0, got {self.max_attempts}"
            )
        if not 0 <= self.inset_fraction < 0.5:
            raise ConfigurationError(
                f"inset_fraction must be in [0, 0.5), got {self.inset_fraction}"
            )
        for name in ("bump_distance", "collision_margin", "plate_pad", "wrap_width"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be >= 0")
        if self.side_policy not in SIDE_POLICIES:
            raise ConfigurationError(
                f"Invalid side policy '{self.side_policy}', "
                f"must be one of {', '.join(SIDE_POLICIES)}"
            )
        if self.alternate_start not in (1, -1):
            raise ConfigurationError("alternate_start must be 1 or -1")
        if self.stem_shape not in STEM_SHAPES:
            raise ConfigurationError(
                f"Invalid stem shape '{self.stem_shape}', "
                f"must be one of {', '.join(STEM_SHAPES)}"
            )


def plan_positions(n: int, total_length: float, inset_fraction: float = 0.03) -> list[float]:
    """Evenly spaced arc lengths for n markers, inset at both ends.

    Returns:
        n arc lengths in [inset, total_length - inset]; a single item sits at
        the inset.
    """
    if n <= 0:
        return []
    inset = total_length * inset_fraction
    step = (total_length - inset * 2) / max(1, n - 1)
    return [inset + i * step for i in range(n)]


def alternate_side(index: int, start: int = 1) -> int:
    return start if index % 2 == 0 else -start


def count_nearby(
    placed: list[BoundingBox], x: float, y: float, dx: float, dy: float
) -> int:
    """Number of placed boxes whose origin lies within (dx, dy) of (x, y)."""
    return sum(1 for r in placed if abs(r.x - x) < dx and abs(r.y - y) < dy)


def choose_side(
    index: int,
    point: Point,
    normal: Vector,
    placed: list[BoundingBox],
    config: LayoutConfig,
    offset: float | None = None,
) -> int:
    """Pick which side of the track the label goes to (+1 or -1)."""
    if config.side_policy == "normal":
        return 1 if normal[1] < 0 else -1

    side = alternate_side(index, config.alternate_start)
    if config.side_policy == "alternate":
        return side

    # Crowding: flip when the tentative anchor is already surrounded
    offset = config.label_offset if offset is None else offset
    test_x = point[0] + normal[0] * offset * side
    test_y = point[1] + normal[1] * offset * side
    nearby = count_nearby(placed, test_x, test_y, config.crowding_dx, config.crowding_dy)
    if nearby > config.crowding_threshold:
        side = -side
    return side


class CollisionResolver:
    """Greedy, order-dependent label anti-collision.

    Finalized boxes are kept inflated by ``margin`` and are never moved or
    removed, so earlier labels always win contention for free space.
    """

    def __init__(self, step: float, max_attempts: int, margin: float = 0.0):
        self.step = step
        self.max_attempts = max_attempts
        self.margin = margin
        self.placed: list[BoundingBox] = []

    def collides(self, box: BoundingBox) -> bool:
        candidate = box.inflate(self.margin)
        return any(candidate.intersects(other) for other in self.placed)

    def resolve(
        self,
        label: LabelBlock,
        push: Vector,
        side: int,
        box_of: Callable[[LabelBlock], BoundingBox],
    ) -> Resolution:
        """Nudge label along push * side until it is clear or out of attempts.

        The label is translated in place. Running out of attempts is not an
        error: the label keeps its last position and ``succeeded`` is False.
        """
        dx = push[0] * self.step * side
        dy = push[1] * self.step * side
        box = box_of(label)
        attempts = 0

        while self.collides(box) and attempts < self.max_attempts:
            label.translate(dx, dy)
            box = box_of(label)
            attempts += 1

        return Resolution(
            box=box,
            offset=(dx * attempts, dy * attempts),
            attempts=attempts,
            succeeded=not self.collides(box),
        )

    def commit(self, box: BoundingBox) -> BoundingBox:
        inflated = box.inflate(self.margin)
        self.placed.append(inflated)
        return inflated

    def place(
        self,
        label: LabelBlock,
        push: Vector,
        side: int,
        box_of: Callable[[LabelBlock], BoundingBox],
    ) -> tuple[Resolution, BoundingBox]:
        """Resolve collisions for label and commit its final box."""
        resolution = self.resolve(label, push, side, box_of)
        return resolution, self.commit(resolution.box)
