"""timelineplot - Milestone timelines along S-curves and zig-zag baselines.

Example usage:
    from timelineplot import timeline, milestone

    with timeline(filename="out/history", title="Key Milestones", preset="curved"):
        milestone("2015", "Company founded")
        milestone("2018", "First product launch in three markets")
        milestone("2021", "Series B")

Or without the DSL:
    from timelineplot import TimelineDocument, SCurve, PillowMeasurer, render

    doc = TimelineDocument.from_dict({"title": "X", "items": [...]})
    scene = render(doc, SCurve("M100,600 C380,420 760,420 1180,260"), PillowMeasurer())
"""

from .composer import (
    TimelineComposer,
    render,
)
from .dsl import (
    milestone,
    timeline,
)
from .exceptions import (
    CapabilityError,
    ConfigurationError,
    TimelineError,
)
from .layout import (
    CollisionResolver,
    LayoutConfig,
    choose_side,
    plan_positions,
)
from .measure import (
    CharWidthMeasurer,
    PillowMeasurer,
    TextMeasurer,
)
from .models import (
    BoundingBox,
    FontSpec,
    Item,
    LabelBlock,
    Scene,
    SCurve,
    TimelineDocument,
    ZigzagBaseline,
)
from .presets import (
    PRESETS,
    Preset,
    get_preset,
)
from .renderer import (
    DEFAULT_THEME,
    SceneRenderer,
    Theme,
    render_to_svg,
    save_png,
)
from .wrapping import (
    wrap_text,
)

__version__ = "0.1.0"

__all__ = [
    # DSL functions
    "timeline",
    "milestone",
    # Models
    "TimelineDocument",
    "Item",
    "SCurve",
    "ZigzagBaseline",
    "FontSpec",
    "BoundingBox",
    "LabelBlock",
    "Scene",
    # Layout
    "render",
    "TimelineComposer",
    "LayoutConfig",
    "CollisionResolver",
    "choose_side",
    "plan_positions",
    "wrap_text",
    # Measurement
    "TextMeasurer",
    "PillowMeasurer",
    "CharWidthMeasurer",
    # Presets
    "Preset",
    "PRESETS",
    "get_preset",
    # Rendering
    "render_to_svg",
    "save_png",
    "SceneRenderer",
    "Theme",
    "DEFAULT_THEME",
    # Errors
    "TimelineError",
    "ConfigurationError",
    "CapabilityError",
    # Version
    "__version__",
]
