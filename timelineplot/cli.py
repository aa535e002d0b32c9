"""Command line entry point: render a JSON milestone document."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .composer import render
from .exceptions import TimelineError
from .measure import CharWidthMeasurer, PillowMeasurer
from .models import TimelineDocument
from .presets import PRESETS, get_preset
from .renderer import render_to_svg, save_png

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="timelineplot",
        description="Render a milestone timeline to SVG and PNG.",
    )
    ap.add_argument("data", type=Path, help="JSON document with title, subtitle, items")
    ap.add_argument("-o", "--out", type=Path, default=Path("out"), help="Output directory")
    ap.add_argument("--name", default="timeline", help="Output file stem")
    ap.add_argument("--preset", choices=sorted(PRESETS), default="curved")
    ap.add_argument(
        "--measure",
        choices=("pillow", "estimate"),
        default="pillow",
        help="Text measurement: real fonts (pillow) or character-count estimate",
    )
    ap.add_argument("--font", default=None, help="TrueType font used for measuring")
    ap.add_argument("--scale", type=float, default=2.0, help="PNG pixel scale")
    ap.add_argument("--no-png", action="store_true", help="Only write the SVG")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logs")
    return ap


def load_document(path: Path) -> TimelineDocument:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise TimelineError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise TimelineError(f"{path} is not valid JSON: {exc}") from exc
    if payload is not None and not isinstance(payload, dict):
        raise TimelineError(f"{path} must contain a JSON object")
    return TimelineDocument.from_dict(payload)


def run(args: argparse.Namespace) -> list[Path]:
    preset = get_preset(args.preset)
    document = load_document(args.data)
    if args.measure == "estimate":
        measurer = CharWidthMeasurer()
    else:
        measurer = PillowMeasurer(font_path=args.font)

    scene = render(document, preset.style, measurer, preset.config)

    args.out.mkdir(parents=True, exist_ok=True)
    stem = str(args.out / args.name)
    render_to_svg(scene, stem, theme=preset.theme)
    written = [Path(f"{stem}.svg")]
    if not args.no_png:
        written.append(save_png(scene, f"{stem}.png", preset.theme, args.scale))
    return written


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        written = run(args)
    except TimelineError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Exported: %s", ", ".join(str(p) for p in written))
    return 0


if __name__ == "__main__":
    sys.exit(main())
