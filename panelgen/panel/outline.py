"""Panel outline and mounting-screw holes."""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry.base import BaseGeometry

from panelgen.catalog.models import HoleLayout, HorizontalPitch, ScrewPosition, VerticalPitch
from panelgen.config import PANEL_RULES, PanelRules
from .shapes import DEFAULT_BACKEND, GeometryBackend


@dataclass(frozen=True)
class ScrewHole:
    position: ScrewPosition
    centre: tuple[float, float]
    shape: BaseGeometry


@dataclass(frozen=True)
class PanelOutline:
    """The uncut panel rectangle plus its selected screw holes."""

    width: float
    height: float
    outline: BaseGeometry
    screw_holes: tuple[ScrewHole, ...]

    @property
    def hole_centres(self) -> dict[ScrewPosition, tuple[float, float]]:
        return {h.position: h.centre for h in self.screw_holes}


def hole_spacing_x(hp: float, rules: PanelRules = PANEL_RULES) -> float:
    """Centre-to-centre distance between the left and right screw columns.

    Below ``reserved_hp`` there is no room for two columns, so both
    collapse onto the vertical centreline.
    """
    return max(0, hp - rules.reserved_hp) * rules.horizontal_pitch_mm


def screw_hole_centres(
    h_pitch: HorizontalPitch,
    v_pitch: VerticalPitch,
    rules: PanelRules = PANEL_RULES,
) -> dict[ScrewPosition, tuple[float, float]]:
    """All four candidate screw positions, whether or not the layout uses them."""
    dx = hole_spacing_x(h_pitch.hp, rules) / 2
    dy = v_pitch.screw_span_mm / 2
    return {
        ScrewPosition.TL: (-dx, +dy),
        ScrewPosition.TR: (+dx, +dy),
        ScrewPosition.BL: (-dx, -dy),
        ScrewPosition.BR: (+dx, -dy),
    }


def build_outline(
    h_pitch: HorizontalPitch,
    v_pitch: VerticalPitch,
    layout: HoleLayout,
    *,
    backend: GeometryBackend = DEFAULT_BACKEND,
    rules: PanelRules = PANEL_RULES,
) -> PanelOutline:
    width = h_pitch.actual_width_mm
    height = v_pitch.panel_height_mm
    centres = screw_hole_centres(h_pitch, v_pitch, rules)

    holes = tuple(
        ScrewHole(
            position=pos,
            centre=centres[pos],
            shape=backend.circle(*centres[pos], rules.screw_hole_radius_mm),
        )
        for pos in layout.positions
    )
    return PanelOutline(
        width=width,
        height=height,
        outline=backend.rectangle(width, height),
        screw_holes=holes,
    )
