"""End-to-end chart rendering scenarios."""

import re

import polars as pl
import pytest

from slicewise import ChartBuilder
from slicewise.core.chart_builder import build_slices, compute_geometry, generate_palette
from slicewise.core.models import ChartConfig

WEEKDAYS = {"Monday": 10, "Tuesday": 20, "Wednesday": 30}
PALETTE = ["hsl(355, 90%, 65%)", "hsl(37, 100%, 70%)", "hsl(140, 70%, 65%)"]


def path_fills(html: str) -> list[str]:
    """Extract path fills in document order."""
    return re.findall(r'<path [^>]*?fill="([^"]*)"', html)


def test_weekday_round_trip() -> None:
    """Test the default weekday chart geometry and legend."""
    config = ChartConfig()
    palette = generate_palette(config.hue, 3)
    slices = build_slices(list(WEEKDAYS.values()), compute_geometry(config), config.start_angle, palette)
    assert slices[0].start_angle == 270
    assert [s.sweep for s in slices] == pytest.approx([60, 120, 180])

    html = ChartBuilder(WEEKDAYS).build()
    assert path_fills(html) == generate_palette(220, 3)
    assert re.findall(r"<li><span>(\w+)</span><span>(\d+)</span></li>", html) == [
        ("Monday", "10"),
        ("Tuesday", "20"),
        ("Wednesday", "30"),
    ]


def test_fully_configured_doughnut() -> None:
    """Test a doughnut with custom palette, size and direction."""
    chart = ChartBuilder(WEEKDAYS)
    chart.set_size(250)
    chart.set_direction("row")
    chart.set_style("doughnut")
    chart.set_palette(PALETTE)
    html = chart.build()

    assert path_fills(html) == PALETTE
    assert html.count("A121,121 0 ") == 3
    assert html.count("A61,61 0 ") == 3


def test_single_nonzero_value_is_full_ring() -> None:
    """Test that one nonzero value draws one ring, not a near-360 wedge."""
    chart = ChartBuilder({"Done": 0, "Open": 7})
    chart.set_style("doughnut")
    html = chart.build()
    assert len(path_fills(html)) == 1
    assert path_fills(html) == [generate_palette(220, 2)[1]]
    assert "M100,4 A96,96 0 1,1 100,196 A96,96 0 1,1 100,4 L100,52" in html


def test_all_zero_values() -> None:
    """Test the empty-chart fallback with a legend still listed."""
    html = ChartBuilder({"A": 0, "B": 0, "C": 0}).build()
    assert path_fills(html) == []
    assert "<circle" in html
    assert html.count("<li>") == 3


def test_frame_matches_mapping() -> None:
    """Test that a polars frame renders like the equivalent mapping."""
    frame = pl.DataFrame({"day": list(WEEKDAYS), "count": list(WEEKDAYS.values())})
    assert ChartBuilder.from_frame(frame, "count", "day").build() == ChartBuilder(WEEKDAYS).build()


def test_start_position_rotates_first_slice() -> None:
    """Test that the first slice starts on the chosen side."""
    chart = ChartBuilder([1, 1])
    chart.set_start_position("right")
    html = chart.build()
    assert 'd="M196,100 ' in html
