"""Example usage of timelineplot without the DSL."""

import os

from timelineplot import PillowMeasurer, TimelineDocument, get_preset, render, render_to_svg

DATA = {
    "title": "Key Milestones",
    "subtitle": "2015 - 2024",
    "items": [
        {"year": "2015", "title": "Company founded"},
        {"year": "2017", "title": "First paying customer after a long private beta"},
        {"year": "2019", "title": "Series A"},
        {"year": "2020", "title": "Team doubles while going fully remote"},
        {"year": "2022", "title": "International launch"},
        {"year": "2024", "title": "Profitability"},
    ],
}


def main():
    """Render the same document with every preset."""
    doc = TimelineDocument.from_dict(DATA)
    measurer = PillowMeasurer()
    os.makedirs("output", exist_ok=True)

    for name in ("curved", "zigzag", "improved"):
        preset = get_preset(name)
        scene = render(doc, preset.style, measurer, preset.config)
        render_to_svg(scene, f"output/timeline_{name}", theme=preset.theme)
        print(f"Timeline saved to output/timeline_{name}.svg")


if __name__ == "__main__":
    main()
