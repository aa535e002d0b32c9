"""Python DSL for building timelines."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .composer import render
from .exceptions import TimelineError
from .measure import PillowMeasurer
from .models import Item, TimelineDocument
from .presets import get_preset
from .renderer import render_to_svg, save_png

if TYPE_CHECKING:
    from collections.abc import Generator

    from .measure import TextMeasurer
    from .models import Scene

# Context stack for nested timeline() blocks
_timeline_stack: list[TimelineBuilder] = []


@dataclass
class TimelineBuilder:
    """Collects milestones inside a ``timeline()`` block."""

    title: str = ""
    subtitle: str = ""
    items: list[Item] = field(default_factory=list)
    scene: Scene | None = None

    def to_document(self) -> TimelineDocument:
        return TimelineDocument(
            title=self.title, subtitle=self.subtitle, items=tuple(self.items)
        )


def _current_timeline() -> TimelineBuilder | None:
    """Get the current timeline context."""
    return _timeline_stack[-1] if _timeline_stack else None


@contextmanager
def timeline(
        filename: str | None = "timeline",
        title: str = "",
        subtitle: str = "",
        preset: str = "curved",
        png: bool = False,
        measurer: TextMeasurer | None = None,
) -> Generator[TimelineBuilder]:
    """Create a timeline context.

    Usage:
        with timeline(filename="out/history", title="Key Milestones"):
            milestone("2015", "Company founded")
            milestone("2018", "First product launch")

        # Zig-zag layout, also exported as PNG:
        with timeline(filename="out/zigzag", preset="zigzag", png=True):
            ...

    Args:
        filename: Output filename without extension, or None to skip saving
        title: Timeline title
        subtitle: Timeline subtitle
        preset: Named look ("curved", "zigzag" or "improved")
        png: Also rasterize to <filename>.png
        measurer: Text measurer; defaults to Pillow with system fonts

    Yields:
        The TimelineBuilder; its ``scene`` is set once the block exits
    """
    chosen = get_preset(preset)
    builder = TimelineBuilder(title=title, subtitle=subtitle)
    _timeline_stack.append(builder)

    try:
        yield builder
    finally:
        _timeline_stack.pop()

    # Render on exit
    scene = render(
        builder.to_document(),
        chosen.style,
        measurer or PillowMeasurer(),
        chosen.config,
    )
    builder.scene = scene

    if filename:
        Path(filename).parent.mkdir(parents=True, exist_ok=True)
        render_to_svg(scene, filename, theme=chosen.theme)
        if png:
            save_png(scene, f"{filename}.png", theme=chosen.theme)


def milestone(year: str = "", title: str = "") -> Item:
    """Add a milestone to the current timeline.

    Usage:
        milestone("2020", "Series A")

    Returns:
        The Item that was added
    """
    current = _current_timeline()
    if current is None:
        raise TimelineError("milestone() must be called inside a timeline() block")

    item = Item(year=str(year), title=title)
    current.items.append(item)
    return item
