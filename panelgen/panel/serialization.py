"""Panel document serialization — convert PanelModel to/from JSON-safe dicts.

Documents store catalog *values* rather than indices::

    {"vp": 3, "hp": 8, "holes": ["tl", "br"],
     "features": [{"type": "led", "size": 4,
                   "position": {"x": 0, "y": 0, "relative_to": "center"}}]}

On import each value is matched back to the first catalog row that
carries it.  An absent or unmatched value keeps the current model's
index; it is not an error.
"""

from __future__ import annotations

import json
import logging
import math

from panelgen.catalog.lookup import (
    default_size_for, find_hole_layout, find_horizontal_pitch, find_vertical_pitch,
    hole_layout_at, horizontal_pitch_at, vertical_pitch_at,
)
from panelgen.catalog.models import FeatureType, FrameName, PresetCatalog
from panelgen.errors import MalformedImportDocument
from .models import Feature, PanelModel, Position

log = logging.getLogger(__name__)


def model_to_dict(model: PanelModel, catalog: PresetCatalog | None = None) -> dict:
    """Convert a PanelModel to a JSON-serializable dict."""
    return {
        "vp": vertical_pitch_at(model.vp_index, catalog).nominal_units,
        "hp": _plain_number(horizontal_pitch_at(model.hp_index, catalog).hp),
        "holes": hole_layout_at(model.holes_index, catalog).keys,
        "features": [
            {
                "type": FeatureType.parse(f.type).value,
                "size": f.size,
                "position": {
                    "x": f.position.x,
                    "y": f.position.y,
                    "relative_to": FrameName.parse(f.position.relative_to).value,
                },
            }
            for f in model.features
        ],
    }


def parse_model(
    data: dict,
    current: PanelModel | None = None,
    catalog: PresetCatalog | None = None,
) -> PanelModel:
    """Parse a panel document into a PanelModel.

    *current* supplies the fallback indices for unmatched ``vp``/``hp``/
    ``holes`` values (defaults to a fresh ``PanelModel()``).
    """
    if not isinstance(data, dict):
        raise MalformedImportDocument("document must be a JSON object")
    if "features" not in data:
        raise MalformedImportDocument("missing 'features' list")
    if not isinstance(data["features"], list):
        raise MalformedImportDocument("'features' must be a list")

    base = current or PanelModel()

    vp_index = find_vertical_pitch(data.get("vp"), catalog)
    hp_index = find_horizontal_pitch(data.get("hp"), catalog)
    holes_index = find_hole_layout(data.get("holes"), catalog)

    features = []
    for i, raw in enumerate(data["features"]):
        if not isinstance(raw, dict):
            raise MalformedImportDocument(f"features[{i}] must be an object")
        if not raw.get("type"):
            log.info("Dropping features[%d]: no type", i)
            continue
        features.append(_parse_feature(raw, i, catalog))

    return PanelModel(
        vp_index=base.vp_index if vp_index is None else vp_index,
        hp_index=base.hp_index if hp_index is None else hp_index,
        holes_index=base.holes_index if holes_index is None else holes_index,
        features=tuple(features),
    )


def _parse_feature(raw: dict, i: int, catalog: PresetCatalog | None) -> Feature:
    ft = FeatureType.parse(raw["type"])
    pos = raw.get("position") or {}
    if not isinstance(pos, dict):
        raise MalformedImportDocument(f"features[{i}].position must be an object")

    size = _number(raw.get("size"), f"features[{i}].size")
    if size is not None and size < 0:
        raise MalformedImportDocument(f"features[{i}].size: must not be negative, got {size:g}")
    frame = pos.get("relative_to") or pos.get("relativeTo") or FrameName.CENTER
    return Feature(
        type=ft,
        size=size if size else default_size_for(ft, catalog),
        position=Position(
            x=_number(pos.get("x"), f"features[{i}].position.x") or 0.0,
            y=_number(pos.get("y"), f"features[{i}].position.y") or 0.0,
            relative_to=FrameName.parse(frame),
        ),
    )


def _number(value, field: str) -> float | None:
    """Coerce an optional numeric field; None/empty means "use the default"."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise MalformedImportDocument(f"{field}: expected a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise MalformedImportDocument(f"{field}: expected a number, got {value!r}") from None
    if not math.isfinite(number):
        raise MalformedImportDocument(f"{field}: expected a finite number, got {value!r}")
    return number


def _plain_number(value: float) -> int | float:
    """8.0 → 8, 1.5 → 1.5, so documents read the way people write HP."""
    return int(value) if float(value).is_integer() else value


# ── JSON text ──────────────────────────────────────────────────────


def dump_model(model: PanelModel, catalog: PresetCatalog | None = None) -> str:
    return json.dumps(model_to_dict(model, catalog), indent=2)


def load_model(
    text: str,
    current: PanelModel | None = None,
    catalog: PresetCatalog | None = None,
) -> PanelModel:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedImportDocument(f"invalid JSON: {exc}") from None
    return parse_model(data, current, catalog)
