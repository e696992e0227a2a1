"""
Panel geometry assembly — the main generation pass.

``generate`` maps a ``PanelModel`` to a finished panel:

  1. look up vertical pitch, horizontal pitch and hole layout
  2. build the outline rectangle and the selected screw holes
  3. resolve and classify every feature (subtractive / out of bounds)
  4. render each subtractive feature to its cutout shape
  5. subtract screw holes + cutouts from the outline in one pass
  6. extrude the profile to the panel thickness
  7. render out-of-bounds features as flat preview shapes

Nothing is cached between calls; every edit regenerates from scratch.
Any lookup or enum failure aborts the pass before geometry is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shapely.geometry.base import BaseGeometry

from panelgen.catalog.loader import get_catalog
from panelgen.catalog.lookup import hole_layout_at, horizontal_pitch_at, vertical_pitch_at
from panelgen.catalog.models import FeatureType, FrameName, PresetCatalog
from panelgen.config import PANEL_RULES, PanelRules
from .classify import ClassifiedFeature, partition_features
from .models import PanelModel
from .outline import PanelOutline, build_outline
from .shapes import ExtrudedSolid, GeometryBackend, ShapelyBackend, feature_shape

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelGeometry:
    """Result of one generation pass.

    ``solid`` and ``preview_shapes`` are what a renderer draws; the other
    fields expose the intermediate geometry for inspection and tests.
    """

    solid: ExtrudedSolid
    preview_shapes: tuple[BaseGeometry, ...]
    outline: PanelOutline
    profile: BaseGeometry
    subtractive: tuple[ClassifiedFeature, ...]
    out_of_bounds: tuple[ClassifiedFeature, ...]


def _check_features(model: PanelModel) -> None:
    """Reject unknown feature types and frames before any geometry is built."""
    for feature in model.features:
        FeatureType.parse(feature.type)
        FrameName.parse(feature.position.relative_to)


def generate(
    model: PanelModel,
    *,
    catalog: PresetCatalog | None = None,
    backend: GeometryBackend | None = None,
    rules: PanelRules = PANEL_RULES,
) -> PanelGeometry:
    """Generate the cut, extruded panel for *model*.

    Raises IndexOutOfRange, UnknownFeatureType or UnknownFrameName; no
    partial result is returned.
    """
    cat = catalog or get_catalog()
    backend = backend or ShapelyBackend(circle_segments=rules.circle_segments)

    h_pitch = horizontal_pitch_at(model.hp_index, cat)
    v_pitch = vertical_pitch_at(model.vp_index, cat)
    layout = hole_layout_at(model.holes_index, cat)
    _check_features(model)

    outline = build_outline(h_pitch, v_pitch, layout, backend=backend, rules=rules)

    subtractive, out_of_bounds = partition_features(
        model.features, outline.width, outline.height, catalog=cat,
    )

    cutouts = [hole.shape for hole in outline.screw_holes]
    cutouts.extend(
        feature_shape(cf.feature, cf.position, backend=backend, rules=rules)
        for cf in subtractive
    )
    profile = backend.subtract(outline.outline, cutouts)
    solid = backend.extrude(profile, rules.panel_thickness_mm)

    preview = tuple(
        feature_shape(cf.feature, cf.position, backend=backend, rules=rules)
        for cf in out_of_bounds
    )

    log.debug(
        "Generated %gHP × %dU panel (%.2f × %.2f mm): %d screw hole(s), "
        "%d cut feature(s), %d preview feature(s)",
        h_pitch.hp, v_pitch.nominal_units, outline.width, outline.height,
        len(outline.screw_holes), len(subtractive), len(out_of_bounds),
    )

    return PanelGeometry(
        solid=solid,
        preview_shapes=preview,
        outline=outline,
        profile=profile,
        subtractive=tuple(subtractive),
        out_of_bounds=tuple(out_of_bounds),
    )
