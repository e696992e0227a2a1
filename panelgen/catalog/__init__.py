"""Preset catalog — load, validate and query the panel preset tables."""

from .models import (
    FeatureType, FrameName, ScrewPosition,
    VerticalPitch, HorizontalPitch, HoleLayout, SizeOption, FeatureKind, FrameInfo,
    PresetCatalog, ValidationError, CatalogResult,
)
from .loader import load_catalog, get_catalog, CATALOG_DIR
from .lookup import (
    vertical_pitch_at, horizontal_pitch_at, hole_layout_at,
    default_size_for, size_options_for, frame_anchor,
    find_vertical_pitch, find_horizontal_pitch, find_hole_layout,
)

__all__ = [
    # Models
    "FeatureType", "FrameName", "ScrewPosition",
    "VerticalPitch", "HorizontalPitch", "HoleLayout", "SizeOption", "FeatureKind",
    "FrameInfo", "PresetCatalog", "ValidationError", "CatalogResult",
    # Loader
    "load_catalog", "get_catalog", "CATALOG_DIR",
    # Lookup
    "vertical_pitch_at", "horizontal_pitch_at", "hole_layout_at",
    "default_size_for", "size_options_for", "frame_anchor",
    "find_vertical_pitch", "find_horizontal_pitch", "find_hole_layout",
]
