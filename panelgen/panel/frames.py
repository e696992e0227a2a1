"""Frame-of-reference resolution.

Origin at the panel centre, +x right, +y up.  Each named frame is a pair
of unit signs applied to the panel half-extents, so ``topright`` on a
100×50 panel anchors at (50, 25).
"""

from __future__ import annotations

from panelgen.catalog.loader import get_catalog
from panelgen.catalog.models import FrameName, PresetCatalog
from .models import Feature


def resolve_anchor(
    frame: FrameName | str,
    width: float,
    height: float,
    *,
    catalog: PresetCatalog | None = None,
) -> tuple[float, float]:
    """Absolute anchor point of a named frame on a width×height panel."""
    info = (catalog or get_catalog()).frames[FrameName.parse(frame)]
    # 0 * w/2 must stay 0.0, never -0.0, so snapshot output is stable
    x = info.sx * width / 2 if info.sx else 0.0
    y = info.sy * height / 2 if info.sy else 0.0
    return (x, y)


def resolve_absolute_position(
    feature: Feature,
    width: float,
    height: float,
    *,
    catalog: PresetCatalog | None = None,
) -> tuple[float, float]:
    """Anchor of the feature's frame plus its local offset."""
    pos = feature.position
    ax, ay = resolve_anchor(pos.relative_to, width, height, catalog=catalog)
    return (ax + pos.x, ay + pos.y)
