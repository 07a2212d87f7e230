"""Chart builder module for pie and doughnut charts."""

from .builder import ChartBuilder, render
from .colors import generate_palette
from .geometry import build_slices, compute_geometry

__all__ = [
    "ChartBuilder",
    "build_slices",
    "compute_geometry",
    "generate_palette",
    "render",
]
