"""Indexed and keyed lookups into the preset catalog.

Every lookup accepts an optional ``catalog``; when omitted the bundled
catalog from :func:`get_catalog` is used.
"""

from __future__ import annotations

from typing import Sequence

from panelgen.errors import IndexOutOfRange
from .loader import get_catalog
from .models import (
    FeatureType, FrameName, HoleLayout, HorizontalPitch, PresetCatalog,
    ScrewPosition, SizeOption, VerticalPitch,
)


def _at(table: Sequence, index: int, field: str):
    # bool is an int subclass; True must not silently mean row 1
    if not isinstance(index, int) or isinstance(index, bool):
        raise IndexOutOfRange(field, index, len(table))
    if not 0 <= index < len(table):
        raise IndexOutOfRange(field, index, len(table))
    return table[index]


def vertical_pitch_at(index: int, catalog: PresetCatalog | None = None) -> VerticalPitch:
    cat = catalog or get_catalog()
    return _at(cat.vertical_pitches, index, "vp_index")


def horizontal_pitch_at(index: int, catalog: PresetCatalog | None = None) -> HorizontalPitch:
    cat = catalog or get_catalog()
    return _at(cat.horizontal_pitches, index, "hp_index")


def hole_layout_at(index: int, catalog: PresetCatalog | None = None) -> HoleLayout:
    cat = catalog or get_catalog()
    return _at(cat.hole_layouts, index, "holes_index")


def size_options_for(
    feature_type: FeatureType | str, catalog: PresetCatalog | None = None,
) -> tuple[SizeOption, ...]:
    cat = catalog or get_catalog()
    return cat.feature_kinds[FeatureType.parse(feature_type)].sizes


def default_size_for(
    feature_type: FeatureType | str, catalog: PresetCatalog | None = None,
) -> float:
    """The first preset size for a feature type."""
    return size_options_for(feature_type, catalog)[0].size_mm


def frame_anchor(
    frame: FrameName | str, width: float, height: float,
    catalog: PresetCatalog | None = None,
) -> tuple[float, float]:
    from panelgen.panel.frames import resolve_anchor
    return resolve_anchor(frame, width, height, catalog=catalog)


# ── Reverse lookups (document import) ──────────────────────────────


def find_vertical_pitch(nominal_units, catalog: PresetCatalog | None = None) -> int | None:
    """Index of the first vertical pitch with this nominal U count."""
    cat = catalog or get_catalog()
    for i, vp in enumerate(cat.vertical_pitches):
        if vp.nominal_units == nominal_units:
            return i
    return None


def find_horizontal_pitch(hp, catalog: PresetCatalog | None = None) -> int | None:
    cat = catalog or get_catalog()
    for i, h in enumerate(cat.horizontal_pitches):
        if h.hp == hp:
            return i
    return None


def find_hole_layout(positions, catalog: PresetCatalog | None = None) -> int | None:
    """Index of the layout naming exactly these positions (any order)."""
    cat = catalog or get_catalog()
    if not isinstance(positions, (list, tuple)):
        return None
    keys = [p.value if isinstance(p, ScrewPosition) else p for p in positions]
    if not all(isinstance(k, str) for k in keys):
        return None
    for i, layout in enumerate(cat.hole_layouts):
        if len(keys) == len(layout.keys) and set(keys) == set(layout.keys):
            return i
    return None
