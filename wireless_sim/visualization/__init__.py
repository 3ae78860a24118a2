from .heatmap import plot_heatmap

__all__ = ["plot_heatmap"]
