"""Arc geometry for pie and doughnut charts.

Angles are in degrees with 0 on the positive x-axis. SVG's y-axis points
down, so increasing angles run clockwise on screen: 270 is the top of the
chart, 90 the bottom.
"""

import math
from collections.abc import Sequence

from slicewise.core.models import ChartConfig, Geometry, SlicePath

from .colors import palette_color
from .formatting import format_number, round_half_up

# Gap between the outer radius and the edge of the SVG viewport
EDGE_MARGIN = 4


def compute_geometry(config: ChartConfig) -> Geometry:
    """Derive centre and radii from the configured size and style.

    Args:
        config: Chart configuration

    Returns:
        Geometry with centre point and outer/inner radius
    """
    cx = round_half_up(config.size / 2)
    cy = round_half_up(config.size / 2)
    radius = min(cx, cy) - EDGE_MARGIN
    inner_radius = round_half_up(radius / 2) if config.is_doughnut else 0
    return Geometry(cx=cx, cy=cy, radius=radius, inner_radius=inner_radius)


def _point(geometry: Geometry, radius: int, angle: float) -> str:
    theta = math.radians(angle)
    x = geometry.cx + radius * math.cos(theta)
    y = geometry.cy + radius * math.sin(theta)
    return f"{format_number(x)},{format_number(y)}"


def _arc(radius: int, large_arc: int, sweep: int, target: str) -> str:
    return f"A{radius},{radius} 0 {large_arc},{sweep} {target}"


def full_ring_path(geometry: Geometry) -> str:
    """Path data for a complete ring, or a disc when the inner radius is 0.

    The outer edge is two clockwise half circles and the inner edge two
    counter-clockwise ones, so the hole stays unfilled under the nonzero rule.
    """
    cx, cy = geometry.cx, geometry.cy
    r, ir = geometry.radius, geometry.inner_radius
    return " ".join(
        [
            f"M{cx},{cy - r}",
            _arc(r, 1, 1, f"{cx},{cy + r}"),
            _arc(r, 1, 1, f"{cx},{cy - r}"),
            f"L{cx},{cy - ir}",
            _arc(ir, 1, 0, f"{cx},{cy + ir}"),
            _arc(ir, 1, 0, f"{cx},{cy - ir}"),
            "Z",
        ]
    )


def wedge_path(geometry: Geometry, start_angle: float, end_angle: float) -> str:
    """Path data for one wedge (pie) or ring segment (doughnut)."""
    large_arc = 1 if (end_angle - start_angle) > 180 else 0
    return " ".join(
        [
            f"M{_point(geometry, geometry.radius, start_angle)}",
            _arc(geometry.radius, large_arc, 1, _point(geometry, geometry.radius, end_angle)),
            f"L{_point(geometry, geometry.inner_radius, end_angle)}",
            _arc(geometry.inner_radius, large_arc, 0, _point(geometry, geometry.inner_radius, start_angle)),
            "Z",
        ]
    )


def build_slices(
    values: Sequence[int | float],
    geometry: Geometry,
    start_angle: float,
    palette: Sequence[str],
) -> list[SlicePath]:
    """Convert slice values into filled SVG paths.

    A series with a total of zero yields no paths; the caller draws the
    empty-chart circle instead. When exactly one value is positive the chart
    is a single full ring, since a 360 degree arc has coincident end points.
    Otherwise every slice gets a path in input order, zero values included,
    so path i is always filled with palette[i].

    Args:
        values: Slice values in series order
        geometry: Chart centre and radii
        start_angle: Angle where the first slice begins
        palette: Colours, index-aligned with values

    Returns:
        Slice paths in series order

    Raises:
        PaletteError: If a slice that needs a colour has none in the palette
    """
    total = sum(values)
    if total == 0:
        return []

    positive = [index for index, value in enumerate(values) if value > 0]
    if len(positive) == 1:
        index = positive[0]
        return [
            SlicePath(
                index=index,
                start_angle=start_angle,
                end_angle=start_angle + 360,
                d=full_ring_path(geometry),
                fill=palette_color(palette, index),
            )
        ]

    slices = []
    current = float(start_angle)
    for index, value in enumerate(values):
        end = current + (value / total) * 360
        slices.append(
            SlicePath(
                index=index,
                start_angle=current,
                end_angle=end,
                d=wedge_path(geometry, current, end),
                fill=palette_color(palette, index),
            )
        )
        current = end

    return slices
