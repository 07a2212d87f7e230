"""Enumerations for slicewise core types."""

from enum import Enum


class Direction(str, Enum):
    """Flex direction of the chart/legend wrapper."""

    ROW = "row"  # Legend to the right of the chart
    COLUMN = "column"  # Legend below the chart


class ChartStyle(str, Enum):
    """Known chart styles.

    Styles are stored as plain strings on the config; only DOUGHNUT changes
    rendering, anything else draws a pie.
    """

    PIE = "pie"
    DOUGHNUT = "doughnut"


class StartPosition(str, Enum):
    """Side of the chart where the first slice begins."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def angle(self) -> int:
        """Start angle in degrees, 0 on the positive x-axis, clockwise on screen."""
        return _START_ANGLES[self]


_START_ANGLES: dict[StartPosition, int] = {
    StartPosition.TOP: 270,
    StartPosition.RIGHT: 360,
    StartPosition.BOTTOM: 90,
    StartPosition.LEFT: 180,
}


class ErrorCode(str, Enum):
    """Application error codes for structured error responses."""

    E400_VALIDATION = "E400_VALIDATION"
    E422_UNPROCESSABLE = "E422_UNPROCESSABLE"
    E500_INTERNAL = "E500_INTERNAL"
