from timelineplot.composer import render
from timelineplot.models import TimelineDocument
from timelineplot.presets import get_preset
from timelineplot.renderer import SceneRenderer, Theme, render_to_svg

DOC = TimelineDocument.from_dict(
    {
        "title": "Key Milestones",
        "subtitle": "2015 - 2024",
        "items": [
            {"year": "2015", "title": "Founded"},
            {"year": "2018", "title": "First launch"},
            {"year": "2021", "title": "Series B"},
        ],
    }
)


def test_svg_contains_markers_and_text(measurer) -> None:
    preset = get_preset("curved")
    scene = render(DOC, preset.style, measurer, preset.config)
    svg = render_to_svg(scene, theme=preset.theme)

    assert svg.startswith("<?xml") or svg.startswith("<svg")
    # Outer and inner disk per marker
    assert svg.count("<circle") == 2 * len(DOC.items)
    assert "Key Milestones" in svg
    assert "First launch" in svg
    assert preset.style.path_d in svg


def test_empty_text_is_not_drawn(measurer) -> None:
    preset = get_preset("zigzag")
    scene = render(TimelineDocument(), preset.style, measurer, preset.config)
    svg = render_to_svg(scene, theme=preset.theme)
    assert "<text" not in svg
    assert "<circle" not in svg


def test_improved_theme_adds_gradient_and_shadows(measurer) -> None:
    preset = get_preset("improved")
    scene = render(DOC, preset.style, measurer, preset.config)
    svg = render_to_svg(scene, theme=preset.theme)
    assert "linearGradient" in svg
    # Shadow disk in addition to outer and inner disks
    assert svg.count("<circle") == 3 * len(DOC.items)


def test_render_to_svg_saves_file(measurer, tmp_path) -> None:
    preset = get_preset("curved")
    scene = render(DOC, preset.style, measurer, preset.config)
    target = tmp_path / "timeline"
    svg = render_to_svg(scene, str(target))
    saved = (tmp_path / "timeline.svg").read_text()
    assert "Founded" in saved
    assert "Founded" in svg


def test_renderer_uses_theme_colors(measurer) -> None:
    preset = get_preset("curved")
    scene = render(DOC, preset.style, measurer, preset.config)
    drawing = SceneRenderer(Theme(marker_outer="#abcdef")).render(scene)
    assert "#abcdef" in drawing.as_svg()
