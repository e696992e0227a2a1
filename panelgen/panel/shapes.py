"""
2-D shape construction, boolean subtraction and linear extrusion.

The generator only orchestrates these operations; the actual polygon
work is delegated to a ``GeometryBackend``.  ``ShapelyBackend`` is the
default and builds everything from Shapely polygons:

  rectangle          ``box`` centred on the origin
  circle             buffered point, ``circle_segments`` sides
  rounded rectangle  shrunken box buffered back out by the corner radius
  subtract           successive ``difference`` calls, cutouts in order
  extrude            an ``ExtrudedSolid`` value (profile + height)

Extrusion is kept as a value rather than a mesh: consumers that need
triangles tessellate the profile themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from shapely.affinity import translate
from shapely.geometry import LineString, Point, box
from shapely.geometry.base import BaseGeometry

from panelgen.catalog.models import FeatureType
from panelgen.config import PANEL_RULES, PanelRules
from .models import Feature


# ── Solid value type ───────────────────────────────────────────────


@dataclass(frozen=True)
class ExtrudedSolid:
    """A 2-D profile linearly extruded from z=0 to z=height.

    Attributes
    ----------
    profile : Shapely (Multi)Polygon in the XY plane, holes included.
    height  : extrusion height in mm.
    """

    profile: BaseGeometry
    height: float

    @property
    def thickness(self) -> float:
        return self.height

    @property
    def bounds(self) -> tuple[float, float, float, float, float, float]:
        """(min_x, min_y, min_z, max_x, max_y, max_z)."""
        min_x, min_y, max_x, max_y = self.profile.bounds
        return (min_x, min_y, 0.0, max_x, max_y, self.height)

    @property
    def volume(self) -> float:
        return self.profile.area * self.height


# ── Backend ────────────────────────────────────────────────────────


class GeometryBackend(Protocol):
    def rectangle(self, width: float, height: float) -> BaseGeometry:
        ...

    def circle(self, cx: float, cy: float, radius: float) -> BaseGeometry:
        ...

    def rounded_rectangle(
        self, cx: float, cy: float, width: float, height: float, radius: float,
    ) -> BaseGeometry:
        ...

    def subtract(self, base: BaseGeometry, cutouts: Sequence[BaseGeometry]) -> BaseGeometry:
        ...

    def extrude(self, shape: BaseGeometry, height: float) -> ExtrudedSolid:
        ...


@dataclass(frozen=True)
class ShapelyBackend:
    circle_segments: int = PANEL_RULES.circle_segments

    def rectangle(self, width: float, height: float) -> BaseGeometry:
        """Rectangle centred on the origin."""
        return box(-width / 2, -height / 2, width / 2, height / 2)

    def circle(self, cx: float, cy: float, radius: float) -> BaseGeometry:
        # Shapely counts segments per quarter circle
        quad_segs = max(1, self.circle_segments // 4)
        return Point(cx, cy).buffer(radius, quad_segs=quad_segs)

    def rounded_rectangle(
        self, cx: float, cy: float, width: float, height: float, radius: float,
    ) -> BaseGeometry:
        radius = max(0.0, min(radius, width / 2, height / 2))
        if radius == 0:
            return translate(self.rectangle(width, height), cx, cy)
        core_hw = width / 2 - radius
        core_hh = height / 2 - radius
        # The core collapses to a segment or point when a side is fully rounded
        if core_hw > 0 and core_hh > 0:
            core = box(-core_hw, -core_hh, core_hw, core_hh)
        elif core_hw > 0:
            core = LineString([(-core_hw, 0), (core_hw, 0)])
        elif core_hh > 0:
            core = LineString([(0, -core_hh), (0, core_hh)])
        else:
            core = Point(0, 0)
        quad_segs = max(1, self.circle_segments // 4)
        return translate(core.buffer(radius, quad_segs=quad_segs), cx, cy)

    def subtract(self, base: BaseGeometry, cutouts: Sequence[BaseGeometry]) -> BaseGeometry:
        result = base
        for cut in cutouts:
            result = result.difference(cut)
        return result

    def extrude(self, shape: BaseGeometry, height: float) -> ExtrudedSolid:
        return ExtrudedSolid(profile=shape, height=height)


DEFAULT_BACKEND = ShapelyBackend()


# ── Feature shapes ─────────────────────────────────────────────────


def feature_shape(
    feature: Feature,
    position: tuple[float, float],
    *,
    backend: GeometryBackend = DEFAULT_BACKEND,
    rules: PanelRules = PANEL_RULES,
) -> BaseGeometry:
    """Cutout shape of a feature centred on its absolute *position*.

    Slide pots are a vertical slot ``slidepot_width_mm`` wide and
    ``size`` long; every other type is a hole of diameter ``size``.
    """
    ft = FeatureType.parse(feature.type)
    cx, cy = position
    if ft is FeatureType.SLIDE_POT:
        return backend.rounded_rectangle(
            cx, cy,
            rules.slidepot_width_mm, feature.size,
            rules.slidepot_corner_radius_mm,
        )
    return backend.circle(cx, cy, feature.size / 2)
