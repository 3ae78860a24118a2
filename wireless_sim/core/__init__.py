from .errors import (
    CoverageError, InvalidDimensionError, InfeasibleLinkBudgetError, UnresolvedReferenceError,
)
from .materials import MATERIALS, WallMaterial, get_material
from .building import (
    Building, Obstacle, obstacle_attenuation, segments_intersect, validate_obstacles,
)
from .device import AccessPoint

__all__ = [
    "CoverageError", "InvalidDimensionError", "InfeasibleLinkBudgetError",
    "UnresolvedReferenceError", "MATERIALS", "WallMaterial", "get_material",
    "Building", "Obstacle", "obstacle_attenuation", "segments_intersect",
    "validate_obstacles", "AccessPoint",
]
