"""Feature classification — cut into the panel, or preview only."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from panelgen.catalog.models import PresetCatalog
from .frames import resolve_absolute_position
from .models import Feature


class Placement(Enum):
    SUBTRACTIVE = "subtractive"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True)
class ClassifiedFeature:
    """A feature with its resolved absolute position and placement."""
    feature: Feature
    position: tuple[float, float]
    placement: Placement


def is_within_panel(x: float, y: float, width: float, height: float) -> bool:
    """Inclusive containment of a point in the centred panel rectangle."""
    return abs(x) <= width / 2 and abs(y) <= height / 2


def classify(
    feature: Feature,
    width: float,
    height: float,
    *,
    catalog: PresetCatalog | None = None,
) -> Placement:
    """Classify by anchor point only.

    A feature whose centre sits on the edge is still cut.  The shape's
    extent is not considered: a large cutout centred just inside the
    panel is subtractive even if its body crosses the outline.
    """
    x, y = resolve_absolute_position(feature, width, height, catalog=catalog)
    if is_within_panel(x, y, width, height):
        return Placement.SUBTRACTIVE
    return Placement.OUT_OF_BOUNDS


def partition_features(
    features: Iterable[Feature],
    width: float,
    height: float,
    *,
    catalog: PresetCatalog | None = None,
) -> tuple[list[ClassifiedFeature], list[ClassifiedFeature]]:
    """Split features into (subtractive, out_of_bounds), each in input order."""
    subtractive: list[ClassifiedFeature] = []
    out_of_bounds: list[ClassifiedFeature] = []
    for feature in features:
        x, y = resolve_absolute_position(feature, width, height, catalog=catalog)
        if is_within_panel(x, y, width, height):
            subtractive.append(ClassifiedFeature(feature, (x, y), Placement.SUBTRACTIVE))
        else:
            out_of_bounds.append(ClassifiedFeature(feature, (x, y), Placement.OUT_OF_BOUNDS))
    return subtractive, out_of_bounds
