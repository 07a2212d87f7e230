"""slicewise: pie and doughnut charts as inline SVG with an HTML legend."""

from slicewise.core.chart_builder import ChartBuilder, render

__version__ = "0.1.0"

__all__ = ["ChartBuilder", "__version__", "render"]
