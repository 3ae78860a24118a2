"""Obstruction materials and their fixed penetration loss."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .errors import UnresolvedReferenceError


@dataclass(frozen=True)
class WallMaterial:
    id: str
    name: str
    attenuation_db: float


# ---------------------------------------------------------------------------
# Material presets: material id → WallMaterial
# ---------------------------------------------------------------------------
MATERIALS: Dict[str, WallMaterial] = {
    m.id: m
    for m in (
        WallMaterial("drywall", "Drywall", 3.0),
        WallMaterial("concrete", "Concrete Block", 8.0),
        WallMaterial("reinforced_concrete", "Reinforced Concrete", 12.0),
        WallMaterial("brick", "Brick Wall", 6.0),
        WallMaterial("glass", "Glass Window", 2.0),
        WallMaterial("metal", "Metal/Steel", 20.0),
        WallMaterial("wood", "Wood Door", 4.0),
    )
}


def get_material(material_id: str) -> WallMaterial:
    """Look up a material by id.

    Raises
    ------
    UnresolvedReferenceError
        If *material_id* is not in :data:`MATERIALS`.
    """
    material = MATERIALS.get(material_id)
    if material is None:
        raise UnresolvedReferenceError(
            f"Unknown material '{material_id}'. Choose from: "
            + ", ".join(sorted(MATERIALS))
        )
    return material
