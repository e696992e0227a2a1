"""Panel model dataclasses — the declarative description of one faceplate."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from panelgen.catalog.lookup import default_size_for
from panelgen.catalog.models import FeatureType, FrameName, PresetCatalog
from panelgen.errors import IndexOutOfRange


@dataclass(frozen=True)
class Position:
    """Offset in mm from the anchor point that ``relative_to`` resolves to."""
    x: float = 0.0
    y: float = 0.0
    relative_to: FrameName | str = FrameName.CENTER


@dataclass(frozen=True)
class Feature:
    type: FeatureType | str
    size: float                         # diameter, or travel length for slide_pot
    position: Position = field(default_factory=Position)


@dataclass(frozen=True)
class PanelModel:
    """One faceplate design: catalog indices plus an ordered feature list.

    Feature order is edit order only; it has no effect on the cut panel.
    """
    vp_index: int = 2
    hp_index: int = 3
    holes_index: int = 0
    features: tuple[Feature, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.features, tuple):
            object.__setattr__(self, "features", tuple(self.features))

    def replace(self, **changes) -> PanelModel:
        return dataclasses.replace(self, **changes)

    def with_feature(
        self, feature_type: FeatureType | str, catalog: PresetCatalog | None = None,
    ) -> PanelModel:
        """Append a feature at the panel centre with its default size."""
        ft = FeatureType.parse(feature_type)
        feature = Feature(type=ft, size=default_size_for(ft, catalog))
        return self.replace(features=self.features + (feature,))

    def without_feature(self, index: int) -> PanelModel:
        if not isinstance(index, int) or not 0 <= index < len(self.features):
            raise IndexOutOfRange("features", index, len(self.features))
        return self.replace(features=self.features[:index] + self.features[index + 1:])
