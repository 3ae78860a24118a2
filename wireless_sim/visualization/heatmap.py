"""Matplotlib rendering of sampled coverage heatmaps."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Rectangle

from ..analysis.heatmap import (
    HORIZONTAL, QUALITY_THRESHOLDS_DB, SIGNAL_COLORS, Heatmap, SignalQuality,
)
from ..core.building import Building, Obstacle
from ..core.device import AccessPoint


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------

def _quality_cmap(target_rssi_dbm: float) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap whose bins match the quality categories."""
    order = [SignalQuality.VERY_POOR, SignalQuality.POOR, SignalQuality.FAIR,
             SignalQuality.GOOD, SignalQuality.EXCELLENT]
    cmap = ListedColormap([SIGNAL_COLORS[q] for q in order])
    inner = sorted(target_rssi_dbm + offset for offset, _ in QUALITY_THRESHOLDS_DB)
    bounds = [-1e9] + inner + [1e9]
    return cmap, BoundaryNorm(bounds, cmap.N)


def _draw_obstacles(ax: plt.Axes, obstacles: Sequence[Obstacle], floor_level: int) -> None:  # type: ignore[name-defined]
    """Draw the obstacles of one floor and label them with material name."""
    for obs in obstacles:
        if obs.floor_level != floor_level:
            continue
        ax.add_patch(Rectangle(
            (obs.x, obs.y), obs.width, obs.height,
            facecolor="dimgray", edgecolor="black", linewidth=1.0, alpha=0.8,
        ))
        ax.annotate(
            obs.material.name,
            (obs.x + obs.width / 2, obs.y + obs.height / 2),
            fontsize=7,
            color="white",
            fontweight="bold",
            ha="center",
            va="bottom",
            bbox=dict(boxstyle="round,pad=0.15", fc="black", alpha=0.6),
        )


def _annotate_access_points(
    ax: plt.Axes, access_points: Sequence[AccessPoint], horizontal: bool  # type: ignore[name-defined]
) -> None:
    for i, ap in enumerate(access_points):
        y = ap.y if horizontal else ap.z
        ax.plot(ap.x, y, "^", color="cyan", markersize=10, markeredgecolor="black",
                label="AP" if i == 0 else None)
        ax.annotate(ap.id, (ap.x, y), textcoords="offset points", xytext=(6, 6), fontsize=8)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------

def plot_heatmap(
    heatmap: Heatmap,
    building: Building,
    access_points: Sequence[AccessPoint] = (),
    obstacles: Sequence[Obstacle] = (),
    save_path: Optional[str | Path] = None,
    figsize: tuple[int, int] = (10, 8),
) -> plt.Figure:  # type: ignore[name-defined]
    """Plot a heatmap coloured by signal-quality category."""
    horizontal = heatmap.view.kind == HORIZONTAL
    fig, ax = plt.subplots(figsize=figsize)
    top = building.width_m if horizontal else building.total_height_m
    extent = [0, building.length_m, 0, top]
    cmap, norm = _quality_cmap(heatmap.target_rssi_dbm)
    im = ax.imshow(
        np.asarray(heatmap.strength), origin="lower", extent=extent,
        cmap=cmap, norm=norm, aspect="auto",
    )
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label("Signal strength (dBm)")

    if horizontal:
        _draw_obstacles(ax, obstacles, building.floor_at(heatmap.view.z_m))
        ax.set_ylabel("Y (m)")
        ax.set_title(f"Signal Heatmap at z = {heatmap.view.z_m:.1f} m")
    else:
        for floor in range(1, building.floor_count):
            ax.axhline(floor * building.floor_height_m, color="white", linestyle="--", linewidth=1)
        ax.set_ylabel("Z (m)")
        ax.set_title(f"Vertical Cross-Section at {heatmap.view.slice_percent:.0f}% width")

    _annotate_access_points(ax, access_points, horizontal)
    ax.set_xlabel("X (m)")
    if access_points:
        ax.legend(loc="upper right", fontsize=8)
    fig.tight_layout()
    if save_path:
        fig.savefig(str(save_path), dpi=150)
    return fig
