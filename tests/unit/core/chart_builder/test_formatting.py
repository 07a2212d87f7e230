"""Tests for markup number formatting."""

import pytest

from slicewise.core.chart_builder.formatting import format_number, format_value, round_half_up


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.5, 1), (1.5, 2), (2.5, 3), (60.5, 61), (100, 100), (-0.5, -1), (-1.4, -1)],
)
def test_round_half_up(value: float, expected: int) -> None:
    """Test that halves round away from zero."""
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (10, "10"),
        (10.0, "10"),
        (183.13843876330611, "183.138"),
        (43.333333333333336, "43.333"),
        (2.5, "2.5"),
        (-1.8e-16, "0"),
        (99.99999999999997, "100"),
    ],
)
def test_format_number(value: float, expected: str) -> None:
    """Test trimmed fixed-precision output."""
    assert format_number(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(10, "10"), (10.0, "10"), (0.0004, "0.0004"), (4.5, "4.5"), (183.13843876330611, "183.13843876330611")],
)
def test_format_value(value: float, expected: str) -> None:
    """Test that legend values keep their precision."""
    assert format_value(value) == expected
