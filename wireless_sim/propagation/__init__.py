from .pathloss import free_space_path_loss, max_distance_for_path_loss
from .linkbudget import LinkBudget, LinkParameters, compute_link_budget
from .signal import (
    NO_SIGNAL_DBM, compute_signal_strength, floor_penetration_loss, signal_from_access_point,
)

__all__ = [
    "free_space_path_loss", "max_distance_for_path_loss",
    "LinkBudget", "LinkParameters", "compute_link_budget",
    "NO_SIGNAL_DBM", "compute_signal_strength", "floor_penetration_loss",
    "signal_from_access_point",
]
