from .coverage import coverage_map, coverage_stats, estimate_users
from .heatmap import (
    Heatmap, HeatmapView, SamplePoint, SignalQuality, SIGNAL_COLORS,
    classify_signal, sample_heatmap,
)
from .placement import (
    aps_per_floor, coverage_area_per_ap, grid_positions, plan_access_points,
    recommended_ap_count,
)

__all__ = [
    "coverage_map", "coverage_stats", "estimate_users",
    "Heatmap", "HeatmapView", "SamplePoint", "SignalQuality", "SIGNAL_COLORS",
    "classify_signal", "sample_heatmap",
    "aps_per_floor", "coverage_area_per_ap", "grid_positions", "plan_access_points",
    "recommended_ap_count",
]
