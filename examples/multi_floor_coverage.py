#!/usr/bin/env python3
"""Multi-storey 5 GHz example with a vertical cross-section.

A 120×60 m, four-storey building needs several APs per floor at 5 GHz. The
script saves one floor plan per storey and a vertical slice through the middle
of the building to show inter-floor penetration loss.
"""

from wireless_sim.analysis import HeatmapView, coverage_stats
from wireless_sim.core import Building, Obstacle
from wireless_sim.core.simulation import CoverageScenario, CoverageSimulation
from wireless_sim.propagation import LinkParameters
from wireless_sim.technologies import WIFI
from wireless_sim.visualization import plot_heatmap


def main() -> None:
    building = Building(length_m=120, width_m=60, floor_height_m=3.5, floor_count=4)
    obstacles = tuple(
        Obstacle(id=f"core-{floor}", name="Lift core", material_id="reinforced_concrete",
                 x=55, y=25, width=10, height=10, floor_level=floor)
        for floor in range(building.floor_count)
    )
    link = LinkParameters.from_technology(WIFI, band="5GHz", safety_margin_db=8)
    scenario = CoverageScenario(building=building, obstacles=obstacles, technology="wifi", link=link)

    sim = CoverageSimulation()
    result = sim.run(scenario)
    print(f"Recommended APs: {result.recommended_aps} (placed {len(result.access_points)})")

    for floor in range(building.floor_count):
        view = HeatmapView.horizontal_floor(floor, building, height_above_floor_m=1.0)
        heatmap = sim.heatmap(scenario, view, resolution=40)
        stats = coverage_stats(heatmap)
        print(f"  Floor {floor}: {stats['coverage_pct']}% at or above target")
        plot_heatmap(heatmap, building, [ap for ap in result.access_points if ap.floor_level == floor],
                     obstacles, save_path=f"floor_{floor}_heatmap.png")

    section = sim.heatmap(scenario, HeatmapView.vertical(slice_percent=50), resolution=40)
    plot_heatmap(section, building, result.access_points, save_path="vertical_section.png")
    print("Heatmaps saved.")


if __name__ == "__main__":
    main()
