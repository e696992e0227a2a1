"""panelgen — parametric modular-synthesizer faceplate generator."""

from .errors import (
    PanelError, IndexOutOfRange, UnknownFrameName, UnknownFeatureType,
    UnknownScrewPosition, MalformedImportDocument, CatalogError,
)
from .catalog import FeatureType, FrameName, ScrewPosition
from .panel import (
    Position, Feature, PanelModel, PanelGeometry, generate,
    model_to_dict, parse_model, dump_model, load_model,
)

__version__ = "0.1.0"

__all__ = [
    "PanelError", "IndexOutOfRange", "UnknownFrameName", "UnknownFeatureType",
    "UnknownScrewPosition", "MalformedImportDocument", "CatalogError",
    "FeatureType", "FrameName", "ScrewPosition",
    "Position", "Feature", "PanelModel", "PanelGeometry", "generate",
    "model_to_dict", "parse_model", "dump_model", "load_model",
]
