"""Colour definitions and palette generation for slicewise charts."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from slicewise.core.errors import PaletteError
from slicewise.core.models import ChartConfig

from .formatting import format_number


class NeutralColors(BaseModel):
    """Colours that do not come from the slice palette."""

    model_config = ConfigDict(frozen=True)

    EMPTY_FILL: str = "hsla(0, 0%, 100%, .025)"  # Barely visible disc for all-zero charts


class LightnessScale:
    """Lightness range of the generated palette, in percent."""

    START: float = 10
    STOP: float = 90
    SPAN: float = 100  # Step is SPAN / n for n slices


def lightness_steps(count: int) -> list[float]:
    """Lightness samples for a generated palette.

    Starts at 10% and steps by 100 / count, one sample per slice. Past five
    slices the last samples run above 90%.

    Args:
        count: Number of slices

    Returns:
        `count` lightness values in increasing order, empty when count is 0
    """
    if count <= 0:
        return []
    step = LightnessScale.SPAN / count
    return [LightnessScale.START + i * step for i in range(count)]


def hsl(hue: int, lightness: float) -> str:
    return f"hsl({hue}, 100%, {format_number(lightness)}%)"


def generate_palette(hue: int, count: int) -> list[str]:
    """Generate a single-hue palette, darkest first.

    Args:
        hue: Hue in degrees
        count: Number of slices

    Returns:
        List of `hsl()` colour strings
    """
    return [hsl(hue, lightness) for lightness in lightness_steps(count)]


def resolve_palette(config: ChartConfig, count: int) -> list[str]:
    """Return the custom palette verbatim, or a generated one."""
    if config.palette is not None:
        return list(config.palette)
    return generate_palette(config.hue, count)


def palette_color(palette: Sequence[str], index: int) -> str:
    """Look up a slice colour.

    Raises:
        PaletteError: If the palette has no colour at `index`
    """
    if not 0 <= index < len(palette):
        raise PaletteError(index=index, palette_size=len(palette))
    return palette[index]


neutral_colors = NeutralColors()
