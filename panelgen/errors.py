"""Structured errors raised while building a panel.

Every failure aborts the current generation or import as a whole; no
partial geometry or half-imported model is ever returned.
"""

from __future__ import annotations

from typing import Any


class PanelError(Exception):
    """Base class for all panel generation and import errors."""


class IndexOutOfRange(PanelError, IndexError):
    """A catalog or feature index does not resolve."""

    def __init__(self, field: str, index: Any, size: int) -> None:
        self.field = field
        self.index = index
        self.size = size
        super().__init__(
            f"{field}: index {index!r} out of range (0–{size - 1})"
            if size else f"{field}: index {index!r} out of range (empty table)"
        )


class UnknownFrameName(PanelError, ValueError):
    """A feature position references a frame outside the closed set."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unknown frame of reference {value!r}")


class UnknownFeatureType(PanelError, ValueError):
    """A feature has a type outside the closed set."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unknown feature type {value!r}")


class UnknownScrewPosition(PanelError, ValueError):
    """A hole layout names a screw position other than tl/tr/bl/br."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unknown screw position {value!r}")


class MalformedImportDocument(PanelError, ValueError):
    """An imported panel document is missing required structure."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed panel document: {reason}")


class CatalogError(PanelError):
    """The bundled preset tables failed validation."""

    def __init__(self, errors: list) -> None:
        self.errors = list(errors)
        lines = "\n".join(f"  {e}" for e in self.errors)
        super().__init__(f"Preset catalog has {len(self.errors)} error(s):\n{lines}")
