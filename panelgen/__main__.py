"""
panelgen — entry point.

Usage:
    python -m panelgen summary panel.json          # generate and describe a panel
    python -m panelgen summary panel.json --verbose
    python -m panelgen presets                     # list the preset tables
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from panelgen.catalog import FeatureType, get_catalog
from panelgen.errors import PanelError
from panelgen.panel import generate, load_model

USAGE = "Usage: python -m panelgen summary <panel.json> [--verbose] | presets"


def summary(path: Path) -> None:
    model = load_model(path.read_text(encoding="utf-8"))
    result = generate(model)

    outline = result.outline
    print(f"Panel: {outline.width:.2f} x {outline.height:.2f} mm, "
          f"{result.solid.thickness:g} mm thick")
    for hole in outline.screw_holes:
        x, y = hole.centre
        print(f"  screw {hole.position.value}: ({x:.2f}, {y:.2f})")
    for label, group in (("cut", result.subtractive), ("preview", result.out_of_bounds)):
        for cf in group:
            x, y = cf.position
            name = FeatureType.parse(cf.feature.type).value
            print(f"  {label:<7} {name:<13} {cf.feature.size:g} mm at ({x:.2f}, {y:.2f})")
    print(f"Cut features: {len(result.subtractive)}, "
          f"preview-only: {len(result.out_of_bounds)}")


def presets() -> None:
    cat = get_catalog()
    print("Vertical pitch:")
    for i, vp in enumerate(cat.vertical_pitches):
        print(f"  [{i}] {vp.display} ({vp.panel_height_mm:g} mm, screws {vp.screw_span_mm:g} mm apart)")
    print("Horizontal pitch:")
    for i, hp in enumerate(cat.horizontal_pitches):
        print(f"  [{i}] {hp.display}: {hp.actual_width_mm:.2f} mm, {hp.screw_hole_count} holes")
    print("Hole layouts:")
    for i, layout in enumerate(cat.hole_layouts):
        print(f"  [{i}] {layout.display} ({', '.join(layout.keys)})")
    print("Feature sizes:")
    for kind in cat.feature_kinds.values():
        sizes = ", ".join(f"{s.size_mm:g}" for s in kind.sizes)
        print(f"  {kind.type.value}: {sizes}")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    verbose = "--verbose" in args
    args = [a for a in args if a != "--verbose"]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cmd = args[0] if args else ""
    try:
        if cmd == "summary" and len(args) == 2:
            summary(Path(args[1]))
        elif cmd == "presets":
            presets()
        else:
            print(USAGE)
            return 1
    except PanelError as exc:
        print(f"Error: {exc}")
        return 1
    except OSError as exc:
        print(f"Error: cannot read {exc.filename}: {exc.strerror}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
