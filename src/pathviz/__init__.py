"""pathviz - chart data preparation for emission scenario visualizations."""

__version__ = "0.1.0"
