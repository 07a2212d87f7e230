"""Tests for chart dimensions and the arc geometry engine."""

import pytest

from slicewise.core.chart_builder.geometry import (
    build_slices,
    compute_geometry,
    full_ring_path,
    wedge_path,
)
from slicewise.core.errors import PaletteError
from slicewise.core.models import ChartConfig, Geometry

PALETTE = ["c0", "c1", "c2", "c3", "c4"]


@pytest.fixture
def pie() -> Geometry:
    """Default 200px pie geometry."""
    return compute_geometry(ChartConfig())


class TestComputeGeometry:
    """Test derived centre and radii."""

    def test_default_pie(self, pie: Geometry) -> None:
        """Test the default 200px chart."""
        assert (pie.cx, pie.cy, pie.radius, pie.inner_radius) == (100, 100, 96, 0)

    def test_doughnut_rounds_half_up(self) -> None:
        """Test that a 121px radius gives a 61px hole."""
        geometry = compute_geometry(ChartConfig(size=250, style="doughnut"))
        assert geometry.radius == 121
        assert geometry.inner_radius == 61

    def test_odd_size_rounds_half_up(self) -> None:
        """Test that the centre of a 201px chart is 101."""
        geometry = compute_geometry(ChartConfig(size=201))
        assert geometry.cx == 101
        assert geometry.radius == 97

    def test_unknown_style_is_pie(self) -> None:
        """Test that a misspelt style draws a pie."""
        geometry = compute_geometry(ChartConfig(style="donut"))
        assert geometry.inner_radius == 0

    def test_degenerate_size(self) -> None:
        """Test that tiny sizes do not fail."""
        geometry = compute_geometry(ChartConfig(size=0))
        assert geometry.radius == -4


class TestPaths:
    """Test path data for single shapes."""

    def test_quarter_wedge(self, pie: Geometry) -> None:
        """Test a 90 degree wedge from the top to the right."""
        assert wedge_path(pie, 270, 360) == "M100,4 A96,96 0 0,1 196,100 L100,100 A0,0 0 0,0 100,100 Z"

    def test_large_arc_flag(self, pie: Geometry) -> None:
        """Test that sweeps over 180 degrees set the large-arc flag on both arcs."""
        assert wedge_path(pie, 0, 270) == "M196,100 A96,96 0 1,1 100,4 L100,100 A0,0 0 1,0 100,100 Z"

    def test_half_circle_is_not_large(self, pie: Geometry) -> None:
        """Test that exactly 180 degrees keeps the small-arc flag."""
        assert " 0 0,1 " in wedge_path(pie, 90, 270)

    def test_full_disc(self, pie: Geometry) -> None:
        """Test the full-circle path with no hole."""
        assert full_ring_path(pie) == (
            "M100,4 A96,96 0 1,1 100,196 A96,96 0 1,1 100,4 "
            "L100,100 A0,0 0 1,0 100,100 A0,0 0 1,0 100,100 Z"
        )

    def test_full_ring(self) -> None:
        """Test the full ring for a 250px doughnut."""
        geometry = compute_geometry(ChartConfig(size=250, style="doughnut"))
        assert full_ring_path(geometry) == (
            "M125,4 A121,121 0 1,1 125,246 A121,121 0 1,1 125,4 "
            "L125,64 A61,61 0 1,0 125,186 A61,61 0 1,0 125,64 Z"
        )


class TestBuildSlices:
    """Test slice sweeps and colouring."""

    def test_weekday_sweeps(self, pie: Geometry) -> None:
        """Test sweeps of 60, 120 and 180 degrees starting at the top."""
        slices = build_slices([10, 20, 30], pie, 270, PALETTE)
        assert [s.sweep for s in slices] == pytest.approx([60, 120, 180])
        assert slices[0].start_angle == 270
        assert slices[0].d.startswith("M100,4 A96,96 0 0,1 183.138,52 ")
        assert [s.fill for s in slices] == ["c0", "c1", "c2"]

    @pytest.mark.parametrize("values", [[1, 2], [3, 3, 3], [1, 2, 3, 4, 5], [7, 1, 13, 2]])
    def test_sweeps_cover_full_circle(self, pie: Geometry, values: list[int]) -> None:
        """Test that slice sweeps add up to 360 degrees."""
        slices = build_slices(values, pie, 90, PALETTE)
        assert sum(s.sweep for s in slices) == pytest.approx(360)
        assert slices[-1].end_angle == pytest.approx(90 + 360)

    def test_zero_slices_keep_their_slot(self, pie: Geometry) -> None:
        """Test that zero values still produce a path aligned with the palette."""
        slices = build_slices([1, 0, 3], pie, 270, PALETTE)
        assert [s.index for s in slices] == [0, 1, 2]
        assert slices[1].sweep == 0
        assert slices[2].fill == "c2"

    def test_single_positive_slice_is_full_ring(self, pie: Geometry) -> None:
        """Test that one positive value gives one full disc in its own colour."""
        slices = build_slices([0, 5, 0], pie, 270, PALETTE)
        assert len(slices) == 1
        assert slices[0].index == 1
        assert slices[0].fill == "c1"
        assert slices[0].d == full_ring_path(pie)
        assert slices[0].sweep == 360

    def test_zero_total_has_no_slices(self, pie: Geometry) -> None:
        """Test that an all-zero series yields nothing to draw."""
        assert build_slices([0, 0], pie, 270, PALETTE) == []
        assert build_slices([], pie, 270, []) == []

    def test_short_palette(self, pie: Geometry) -> None:
        """Test that a palette shorter than the series raises."""
        with pytest.raises(PaletteError):
            build_slices([1, 2, 3], pie, 270, ["c0", "c1"])

    def test_single_slice_only_needs_its_colour(self, pie: Geometry) -> None:
        """Test that the padding slice of a single value needs no colour."""
        slices = build_slices([5, 0], pie, 270, ["only"])
        assert slices[0].fill == "only"
