"""Panel generation — model, frame resolution, classification, geometry.

Submodules:
  models         PanelModel / Feature / Position dataclasses.
  frames         Frame-of-reference anchors and absolute feature positions.
  classify       Subtractive vs out-of-bounds feature classification.
  shapes         Geometry backend (Shapely), feature cutout shapes, extrusion.
  outline        Panel rectangle, screw-hole spacing and screw holes.
  assembler      The generation pass (generate → PanelGeometry).
  serialization  Panel document import/export.
"""

from .models import Position, Feature, PanelModel
from .frames import resolve_anchor, resolve_absolute_position
from .classify import Placement, ClassifiedFeature, classify, partition_features
from .shapes import ExtrudedSolid, GeometryBackend, ShapelyBackend, feature_shape
from .outline import ScrewHole, PanelOutline, hole_spacing_x, screw_hole_centres, build_outline
from .assembler import PanelGeometry, generate
from .serialization import model_to_dict, parse_model, dump_model, load_model

__all__ = [
    # Models
    "Position", "Feature", "PanelModel",
    # Frames / classification
    "resolve_anchor", "resolve_absolute_position",
    "Placement", "ClassifiedFeature", "classify", "partition_features",
    # Geometry
    "ExtrudedSolid", "GeometryBackend", "ShapelyBackend", "feature_shape",
    "ScrewHole", "PanelOutline", "hole_spacing_x", "screw_hole_centres", "build_outline",
    "PanelGeometry", "generate",
    # Serialization
    "model_to_dict", "parse_model", "dump_model", "load_model",
]
