"""Catalog dataclasses — typed representations of catalog/data/*.json tables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from panelgen.errors import UnknownFeatureType, UnknownFrameName, UnknownScrewPosition


class FeatureType(Enum):
    PATCH_POINT = "patch_point"
    ROTARY_POT = "rotary_pot"
    SLIDE_POT = "slide_pot"
    TOGGLE_SWITCH = "toggle_switch"
    LED = "led"

    @classmethod
    def parse(cls, value: FeatureType | str) -> FeatureType:
        """Accept a member or its string value (including legacy spellings)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            value = _FEATURE_ALIASES.get(value, value)
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnknownFeatureType(value)


# Spellings used by documents saved before the types were renamed.
_FEATURE_ALIASES = {
    "rotarypot": "rotary_pot",
    "slidepot": "slide_pot",
}


class FrameName(Enum):
    CENTER = "center"
    TOP_CENTER = "topcenter"
    BOTTOM_CENTER = "bottomcenter"
    LEFT_CENTER = "leftcenter"
    RIGHT_CENTER = "rightcenter"
    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"

    @classmethod
    def parse(cls, value: FrameName | str) -> FrameName:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownFrameName(value) from None


class ScrewPosition(Enum):
    TL = "tl"
    TR = "tr"
    BL = "bl"
    BR = "br"

    @classmethod
    def parse(cls, value: ScrewPosition | str) -> ScrewPosition:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownScrewPosition(value) from None


@dataclass(frozen=True)
class VerticalPitch:
    nominal_units: int
    panel_height_mm: float
    screw_span_mm: float                # centre-to-centre, top row to bottom row
    display: str = ""


@dataclass(frozen=True)
class HorizontalPitch:
    hp: float
    screw_hole_count: int               # 2 | 4
    actual_width_mm: float              # slightly under hp * 5.08 for fit tolerance
    display: str = ""


@dataclass(frozen=True)
class HoleLayout:
    positions: tuple[ScrewPosition, ...]
    display: str = ""

    @property
    def keys(self) -> list[str]:
        return [p.value for p in self.positions]


@dataclass(frozen=True)
class SizeOption:
    size_mm: float
    display: str = ""


@dataclass(frozen=True)
class FeatureKind:
    """Display metadata for a feature type."""
    type: FeatureType
    display: str
    sizes: tuple[SizeOption, ...]


@dataclass(frozen=True)
class FrameInfo:
    """A frame of reference: unit signs applied to (width/2, height/2)."""
    name: FrameName
    display: str
    sx: int
    sy: int


@dataclass(frozen=True)
class PresetCatalog:
    vertical_pitches: tuple[VerticalPitch, ...]
    horizontal_pitches: tuple[HorizontalPitch, ...]
    hole_layouts: tuple[HoleLayout, ...]
    feature_kinds: Mapping[FeatureType, FeatureKind]
    frames: Mapping[FrameName, FrameInfo]


@dataclass
class ValidationError:
    table: str
    field: str
    message: str

    def __str__(self) -> str:
        return f"[{self.table}] {self.field}: {self.message}"


@dataclass
class CatalogResult:
    """Result of loading the catalog — presets + any validation errors."""
    catalog: PresetCatalog | None
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.catalog is not None and len(self.errors) == 0
