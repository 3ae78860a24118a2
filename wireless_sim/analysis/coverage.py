"""Coverage analysis utilities."""

from __future__ import annotations

import math

import numpy as np

from .heatmap import Heatmap, SignalQuality


def coverage_map(heatmap: Heatmap, target_rssi_dbm: float | None = None) -> np.ndarray:
    """Boolean grid: True where strength ≥ target RSSI."""
    target = heatmap.target_rssi_dbm if target_rssi_dbm is None else target_rssi_dbm
    return heatmap.strength >= target


def coverage_stats(heatmap: Heatmap, target_rssi_dbm: float | None = None) -> dict:
    """Return basic coverage statistics for a sampled grid."""
    covered_grid = coverage_map(heatmap, target_rssi_dbm)
    total = covered_grid.size
    covered = int(np.sum(covered_grid))
    counts = {q.value: 0 for q in SignalQuality}
    for row in heatmap.samples:
        for sample in row:
            counts[sample.quality.value] += 1
    return {
        "total_points": total,
        "covered_points": covered,
        "coverage_pct": round(100.0 * covered / total, 2) if total else 0.0,
        "mean_rssi_dbm": round(float(np.mean(heatmap.strength)), 2) if total else 0.0,
        "min_rssi_dbm": round(float(np.min(heatmap.strength)), 2) if total else 0.0,
        "quality_counts": counts,
    }


def estimate_users(total_area_m2: float, user_density_per_100m2: float) -> int:
    """Expected number of clients for an area at a density per 100 m²."""
    return math.ceil(total_area_m2 * user_density_per_100m2 / 100.0)
