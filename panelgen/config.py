"""Shared physical constants for panel generation.

These values describe the mounting hardware and the stock the panel is
cut from.  The outline builder (screw holes, hole spacing) and the shape
renderer (feature cutouts, extrusion) both derive their dimensions from
this single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PanelRules:
    """Physical rules for a rack-mounted faceplate.

    All distances are in millimetres.
    """

    screw_hole_radius_mm: float = 3.2 / 2
    """Radius of an M3 mounting-screw clearance hole."""

    horizontal_pitch_mm: float = 5.08
    """Width of one HP (horizontal pitch) unit."""

    reserved_hp: float = 3
    """HP consumed before the right-hand screw column moves away from the
    left one.  Panels narrower than this get a single centred column."""

    slidepot_width_mm: float = 2.0
    """Width of the slot cut for a slide potentiometer."""

    corner_epsilon_mm: float = 0.01
    """Shaved off a fully rounded slot corner so the fillet never
    degenerates to an exact semicircle."""

    circle_segments: int = 20
    """Segments used to approximate circular cutouts."""

    panel_thickness_mm: float = 1.6
    """Extrusion height of the finished panel."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def slidepot_corner_radius_mm(self) -> float:
        return self.slidepot_width_mm / 2 - self.corner_epsilon_mm


# Module-level singleton — importable everywhere.
PANEL_RULES = PanelRules()
