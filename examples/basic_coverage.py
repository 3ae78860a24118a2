#!/usr/bin/env python3
"""Basic wireless coverage example.

Plans Wi-Fi 2.4 GHz access points for a 50×30 m single-storey office with two
interior walls, prints the link budget and coverage report, and saves the
floor-plan heatmap.
"""

from wireless_sim.analysis import HeatmapView, coverage_stats
from wireless_sim.core import Building, Obstacle
from wireless_sim.core.simulation import CoverageScenario, CoverageSimulation
from wireless_sim.propagation import LinkParameters
from wireless_sim.technologies import WIFI
from wireless_sim.visualization import plot_heatmap


def main() -> None:
    # --- Building (50 m × 30 m, one 3 m storey) ---
    building = Building(length_m=50, width_m=30, floor_height_m=3, floor_count=1)

    # --- Interior walls ---
    obstacles = (
        Obstacle(id="1", name="Interior Wall 1", material_id="drywall",
                 x=15, y=5, width=20, height=0.2),
        Obstacle(id="2", name="Server Room", material_id="reinforced_concrete",
                 x=40, y=20, width=0.3, height=10),
    )

    # --- Link parameters from the Wi-Fi profile ---
    link = LinkParameters.from_technology(WIFI, band="2.4GHz")

    scenario = CoverageScenario(building=building, obstacles=obstacles, technology="wifi", link=link)

    # --- Simulate ---
    sim = CoverageSimulation()
    result = sim.run(scenario)
    heatmap = sim.heatmap(scenario, HeatmapView.horizontal(z_m=1.0))

    # --- Coverage report ---
    print("=" * 50)
    print("Wireless Coverage Report")
    print("=" * 50)
    for k, v in result.summary().items():
        print(f"  {k:>24s}: {v}")
    for k, v in coverage_stats(heatmap).items():
        print(f"  {k:>24s}: {v}")
    for ap in result.access_points:
        print(f"  AP {ap.id}: ({ap.x:.1f}, {ap.y:.1f}, {ap.z:.1f}) m")
    print("=" * 50)

    # --- Heatmap ---
    plot_heatmap(heatmap, building, result.access_points, obstacles, save_path="coverage_heatmap.png")
    print("Heatmap saved: coverage_heatmap.png")


if __name__ == "__main__":
    main()
