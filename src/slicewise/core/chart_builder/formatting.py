"""Number formatting for path data, colour strings and legend values."""

import math

# Decimal places kept in emitted coordinates and lightness values
DEFAULT_PRECISION = 3


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a number for markup with trailing zeros trimmed.

    Examples:
        >>> format_number(100.0)
        '100'
        >>> format_number(43.33333)
        '43.333'
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_value(value: int | float) -> str:
    """Format a caller-supplied value for legend text, without rounding.

    Examples:
        >>> format_value(10.0)
        '10'
        >>> format_value(0.0004)
        '0.0004'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)
