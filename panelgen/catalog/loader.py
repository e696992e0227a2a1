"""Catalog loader — reads catalog/data/*.json tables, parses and validates them."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from panelgen.errors import CatalogError, PanelError
from .models import (
    FeatureKind, FeatureType, FrameInfo, FrameName, HoleLayout, HorizontalPitch,
    ScrewPosition, SizeOption, VerticalPitch,
    CatalogResult, PresetCatalog, ValidationError,
)

log = logging.getLogger(__name__)

CATALOG_DIR = Path(__file__).resolve().parent / "data"

TABLE_FILES = {
    "vertical_pitch": "vertical_pitch.json",
    "horizontal_pitch": "horizontal_pitch.json",
    "hole_layouts": "hole_layouts.json",
    "feature_types": "feature_types.json",
    "frames": "frames.json",
}


# ── Validation ─────────────────────────────────────────────────────

def _validate_catalog(cat: PresetCatalog) -> list[ValidationError]:
    """Run all invariant checks on a parsed catalog."""
    errs: list[ValidationError] = []

    if not cat.vertical_pitches:
        errs.append(ValidationError("vertical_pitch", "rows", "Table is empty"))
    for i, vp in enumerate(cat.vertical_pitches):
        if vp.panel_height_mm <= 0:
            errs.append(ValidationError("vertical_pitch", f"[{i}].panel_height_mm", "Must be > 0"))
        if not 0 < vp.screw_span_mm < vp.panel_height_mm:
            errs.append(ValidationError(
                "vertical_pitch", f"[{i}].screw_span_mm",
                f"Must be > 0 and < panel height ({vp.panel_height_mm})"))

    if not cat.horizontal_pitches:
        errs.append(ValidationError("horizontal_pitch", "rows", "Table is empty"))
    prev: HorizontalPitch | None = None
    for i, hp in enumerate(cat.horizontal_pitches):
        if hp.screw_hole_count not in (2, 4):
            errs.append(ValidationError(
                "horizontal_pitch", f"[{i}].screw_hole_count",
                f"Expected 2 or 4, got {hp.screw_hole_count}"))
        if hp.actual_width_mm <= 0:
            errs.append(ValidationError("horizontal_pitch", f"[{i}].actual_width_mm", "Must be > 0"))
        if prev is not None and not (hp.hp > prev.hp and hp.actual_width_mm > prev.actual_width_mm):
            errs.append(ValidationError(
                "horizontal_pitch", f"[{i}]",
                f"hp/actual width must strictly increase ({prev.hp}HP → {hp.hp}HP)"))
        prev = hp

    if not cat.hole_layouts:
        errs.append(ValidationError("hole_layouts", "rows", "Table is empty"))
    for i, layout in enumerate(cat.hole_layouts):
        if len(layout.positions) not in (2, 4):
            errs.append(ValidationError(
                "hole_layouts", f"[{i}].positions",
                f"Expected 2 or 4 positions, got {len(layout.positions)}"))
        if len(set(layout.positions)) != len(layout.positions):
            errs.append(ValidationError("hole_layouts", f"[{i}].positions", "Duplicate position"))

    # Every feature type needs a size table, otherwise default_size_for can't answer.
    for ft in FeatureType:
        kind = cat.feature_kinds.get(ft)
        if kind is None:
            errs.append(ValidationError("feature_types", ft.value, "Missing size table"))
            continue
        if not kind.sizes:
            errs.append(ValidationError("feature_types", ft.value, "No size options"))
        for opt in kind.sizes:
            if opt.size_mm <= 0:
                errs.append(ValidationError(
                    "feature_types", f"{ft.value}.sizes", f"Size {opt.size_mm} must be > 0"))

    for frame in FrameName:
        info = cat.frames.get(frame)
        if info is None:
            errs.append(ValidationError("frames", frame.value, "Missing frame"))
        elif info.sx not in (-1, 0, 1) or info.sy not in (-1, 0, 1):
            errs.append(ValidationError("frames", frame.value, "Signs must be -1, 0 or 1"))

    return errs


# ── Parsing ────────────────────────────────────────────────────────

def _parse_vertical(data: dict) -> VerticalPitch:
    return VerticalPitch(
        nominal_units=int(data["nominal_units"]),
        panel_height_mm=float(data["panel_height_mm"]),
        screw_span_mm=float(data["screw_span_mm"]),
        display=data.get("display", ""),
    )


def _parse_horizontal(data: dict) -> HorizontalPitch:
    hp = float(data["hp"])
    return HorizontalPitch(
        hp=hp,
        screw_hole_count=int(data["screw_hole_count"]),
        actual_width_mm=float(data["actual_width_mm"]),
        display=data.get("display") or f"{hp:g}HP",
    )


def _parse_layout(data: dict) -> HoleLayout:
    return HoleLayout(
        positions=tuple(ScrewPosition.parse(p) for p in data["positions"]),
        display=data.get("display", ""),
    )


def _parse_kind(data: dict) -> FeatureKind:
    return FeatureKind(
        type=FeatureType.parse(data["type"]),
        display=data.get("display", data["type"]),
        sizes=tuple(
            SizeOption(size_mm=float(s["size_mm"]), display=s.get("display", ""))
            for s in data["sizes"]
        ),
    )


def _parse_frame(data: dict) -> FrameInfo:
    return FrameInfo(
        name=FrameName.parse(data["name"]),
        display=data.get("display", data["name"]),
        sx=int(data["sx"]),
        sy=int(data["sy"]),
    )


def _read_table(path: Path, errors: list[ValidationError], table: str) -> list | None:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        errors.append(ValidationError(table, "json", f"Parse error: {exc}"))
        return None
    except OSError as exc:
        errors.append(ValidationError(table, "file", f"Read error: {exc}"))
        return None
    if not isinstance(raw, list):
        errors.append(ValidationError(table, "json", "Top level must be a list"))
        return None
    return raw


# ── Public API ─────────────────────────────────────────────────────

def load_catalog(catalog_dir: Path | None = None) -> CatalogResult:
    """Load all preset tables, parse and validate.

    Returns a CatalogResult.  If any table cannot be read or parsed the
    catalog is None; otherwise it is returned along with any invariant
    violations found by validation.
    """
    d = catalog_dir or CATALOG_DIR
    errors: list[ValidationError] = []
    tables: dict[str, list] = {}

    parsers = {
        "vertical_pitch": _parse_vertical,
        "horizontal_pitch": _parse_horizontal,
        "hole_layouts": _parse_layout,
        "feature_types": _parse_kind,
        "frames": _parse_frame,
    }

    for table, filename in TABLE_FILES.items():
        raw = _read_table(d / filename, errors, table)
        if raw is None:
            continue
        rows = []
        for i, row in enumerate(raw):
            try:
                rows.append(parsers[table](row))
            except (KeyError, TypeError, ValueError, PanelError) as exc:
                errors.append(ValidationError(table, f"[{i}]", f"Missing/invalid field: {exc}"))
        tables[table] = rows

    if len(tables) != len(TABLE_FILES):
        return CatalogResult(catalog=None, errors=errors)

    catalog = PresetCatalog(
        vertical_pitches=tuple(tables["vertical_pitch"]),
        horizontal_pitches=tuple(tables["horizontal_pitch"]),
        hole_layouts=tuple(tables["hole_layouts"]),
        feature_kinds=MappingProxyType({k.type: k for k in tables["feature_types"]}),
        frames=MappingProxyType({f.name: f for f in tables["frames"]}),
    )
    errors.extend(_validate_catalog(catalog))

    log.debug(
        "Loaded catalog from %s: %d vertical, %d horizontal, %d hole layouts, %d error(s)",
        d, len(catalog.vertical_pitches), len(catalog.horizontal_pitches),
        len(catalog.hole_layouts), len(errors),
    )
    return CatalogResult(catalog=catalog, errors=errors)


@lru_cache(maxsize=1)
def get_catalog() -> PresetCatalog:
    """The bundled preset catalog, loaded once.

    Raises CatalogError if the bundled data fails to load or validate.
    """
    result = load_catalog()
    if not result.ok:
        raise CatalogError(result.errors)
    return result.catalog
