"""Arc-length geometry for timeline tracks."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from svgpathtools import parse_path  # type: ignore[reportMissingTypeStubs]

from .exceptions import ConfigurationError
from .models import SCurve, ZigzagBaseline

if TYPE_CHECKING:
    from .models import Point, TrackStyle, Vector

DEFAULT_TANGENT: Vector = (1.0, 0.0)


def normal_from(tangent: Vector) -> Vector:
    """Rotate a tangent by 90 degrees: (tx, ty) -> (-ty, tx)."""
    tx, ty = tangent
    return -ty, tx


def _unit(dx: float, dy: float) -> Vector:
    length = math.hypot(dx, dy)
    if length <= 1e-12:
        return DEFAULT_TANGENT
    return dx / length, dy / length


class _ArcLengthTrack:
    """Shared arc-length helpers; subclasses provide point_at and total_length."""

    total_length: float

    def point_at(self, s: float) -> Point:
        raise NotImplementedError

    def path_d(self) -> str:
        raise NotImplementedError

    def clamp(self, s: float) -> float:
        return min(max(s, 0.0), self.total_length)

    def tangent_at(self, s: float, eps: float = 0.5) -> Vector:
        """Unit tangent by central difference around arc length s."""
        ax, ay = self.point_at(self.clamp(s - eps))
        bx, by = self.point_at(self.clamp(s + eps))
        return _unit(bx - ax, by - ay)

    def normal_at(self, s: float, eps: float = 0.5) -> Vector:
        return normal_from(self.tangent_at(s, eps))


class CurveTrack(_ArcLengthTrack):
    """Track following an SVG path description (parsed by svgpathtools)."""

    def __init__(self, d: str):
        self.d = d
        self._path = parse_path(d)
        if len(self._path) == 0:
            raise ConfigurationError(f"Track path has no drawable segments: {d!r}")
        self.total_length = float(self._path.length())

    def path_d(self) -> str:
        return self.d

    def point_at(self, s: float) -> Point:
        s = self.clamp(s)
        if s <= 0.0 or self.total_length <= 0.0:
            t = 0.0
        elif s >= self.total_length:
            t = 1.0
        else:
            t = self._path.ilength(s)
        z = self._path.point(t)
        return float(z.real), float(z.imag)


class BaselineTrack(_ArcLengthTrack):
    """Straight horizontal track from (x0, y) to (x1, y)."""

    def __init__(self, x0: float, x1: float, y: float):
        self.x0 = x0
        self.x1 = x1
        self.y = y
        self.total_length = abs(x1 - x0)

    def path_d(self) -> str:
        return f"M{self.x0:g},{self.y:g} L{self.x1:g},{self.y:g}"

    def point_at(self, s: float) -> Point:
        s = self.clamp(s)
        if self.total_length <= 0.0:
            return self.x0, self.y
        direction = 1.0 if self.x1 >= self.x0 else -1.0
        return self.x0 + direction * s, self.y


TrackGeometry = CurveTrack | BaselineTrack


def build_track(style: TrackStyle, canvas_width: float) -> TrackGeometry:
    """Create the geometry provider for a track style."""
    if isinstance(style, SCurve):
        return CurveTrack(style.path_d)
    if isinstance(style, ZigzagBaseline):
        return BaselineTrack(
            style.margin_x, canvas_width - style.margin_x, style.baseline_y
        )
    raise ConfigurationError(f"Unknown track style: {style!r}")
