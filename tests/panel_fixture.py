"""Panel test fixtures — hardcoded PanelModels for generation tests.

The reference panel is a 3U, 8HP blank with screws top-left and
bottom-right:

  - outline 40.30 × 128.50 mm, centred on the origin
  - screw columns 25.4 mm apart ((8 - 3) × 5.08), rows 122.5 mm apart
  - tl screw at (-12.7, 61.25), br screw at (12.7, -61.25)
"""

from __future__ import annotations

from panelgen.catalog.models import FeatureType, FrameName
from panelgen.panel.models import Feature, PanelModel, Position

VP_3U = 2
HP_8 = 5
HOLES_TL_BR = 0
HOLES_ALL = 4

PANEL_WIDTH = 40.30
PANEL_HEIGHT = 128.50


def make_panel(*features: Feature, holes_index: int = HOLES_TL_BR) -> PanelModel:
    return PanelModel(
        vp_index=VP_3U,
        hp_index=HP_8,
        holes_index=holes_index,
        features=features,
    )


def led_at(x: float, y: float, frame: FrameName = FrameName.CENTER, size: float = 4.0) -> Feature:
    return Feature(type=FeatureType.LED, size=size, position=Position(x, y, frame))


def make_led_panel() -> PanelModel:
    """The reference panel with a single 4 mm LED at the centre."""
    return make_panel(led_at(0, 0))


def make_mixed_panel() -> PanelModel:
    """Five features, two of them off the panel."""
    return make_panel(
        Feature(FeatureType.PATCH_POINT, 6.35, Position(0, -40, FrameName.CENTER)),
        Feature(FeatureType.ROTARY_POT, 6.0, Position(0, -20, FrameName.TOP_CENTER)),
        Feature(FeatureType.SLIDE_POT, 30.0, Position(5, 0, FrameName.LEFT_CENTER)),
        Feature(FeatureType.TOGGLE_SWITCH, 8.0, Position(30, 0, FrameName.RIGHT_CENTER)),
        Feature(FeatureType.LED, 2.0, Position(0, -5, FrameName.BOTTOM_CENTER)),
    )
