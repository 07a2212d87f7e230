"""Chart builder producing pie and doughnut chart markup."""

from collections.abc import Sequence
from typing import Any

import polars as pl
from pydantic import ValidationError as PydanticValidationError

from slicewise.core.enums import Direction, StartPosition
from slicewise.core.errors import ValidationError
from slicewise.core.models import ChartConfig, ErrorDetail, Series
from slicewise.core.series import ChartValues, build_series, series_from_frame
from slicewise.infra.logging import get_logger

from .colors import resolve_palette
from .geometry import build_slices, compute_geometry
from .markup import legend_element, style_element, svg_element, to_html, wrapper_element

logger = get_logger(__name__)


def render(series: Series, config: ChartConfig) -> str:
    """Render a series as chart markup.

    The output is a flex <div> holding the <svg>, then the <style> block
    colouring the legend, then the <ul> legend. Pure function of its inputs.

    Args:
        series: Chart values
        config: Chart configuration

    Returns:
        HTML markup string

    Raises:
        PaletteError: If a custom palette is too short for the series
    """
    geometry = compute_geometry(config)
    palette = resolve_palette(config, len(series))
    slices = build_slices(series.values, geometry, config.start_angle, palette)

    document = wrapper_element(
        config,
        svg_element(config, slices),
        style_element(palette),
        legend_element(series),
    )

    logger.debug(
        "Rendered chart",
        entries=len(series),
        slices=len(slices),
        doughnut=config.is_doughnut,
        custom_palette=config.palette is not None,
    )
    return to_html(document)


class ChartBuilder:
    """Configure a chart step by step, then build its markup.

    Example:
        >>> chart = ChartBuilder({"Monday": 10, "Tuesday": 20, "Wednesday": 30})
        >>> chart.set_style("doughnut")
        >>> html = chart.build()
    """

    def __init__(self, values: ChartValues) -> None:
        """Initialize chart builder.

        Args:
            values: Mapping of label to number, or a list of numbers

        Raises:
            ValidationError: If values are not numbers
        """
        self._series = build_series(values)
        self._config = ChartConfig()

    @classmethod
    def from_frame(cls, frame: pl.DataFrame, value_column: str, label_column: str | None = None) -> "ChartBuilder":
        """Create a builder from a polars DataFrame.

        Args:
            frame: One row per slice
            value_column: Numeric column with slice values
            label_column: Optional column with legend labels

        Returns:
            ChartBuilder instance
        """
        builder = cls([])
        builder._series = series_from_frame(frame, value_column, label_column)  # noqa: SLF001
        return builder

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def series(self) -> Series:
        return self._series

    def _update(self, **changes: Any) -> None:
        """Replace the config with a validated copy.

        Raises:
            ValidationError: If a value has the wrong type; the config is left unchanged
        """
        try:
            self._config = ChartConfig.model_validate({**self._config.model_dump(), **changes})
        except PydanticValidationError as e:
            fields = ", ".join(changes)
            raise ValidationError.from_pydantic(f"Invalid chart setting: {fields}", e) from e

    def set_size(self, size: int) -> None:
        """Set the chart width and height in pixels."""
        self._update(size=size)

    def set_gap(self, gap: int) -> None:
        """Set the gap between chart and legend in pixels."""
        self._update(gap=gap)

    def set_hue(self, hue: int) -> None:
        """Set the hue of the generated palette."""
        self._update(hue=hue)

    def set_direction(self, direction: str) -> None:
        """Place the legend beside ("row") or below ("column") the chart.

        Other values are ignored.
        """
        try:
            value = Direction(direction)
        except ValueError:
            logger.debug("Ignoring unsupported direction", direction=direction)
            return
        self._update(direction=value)

    def set_style(self, style: str) -> None:
        """Set the chart style; "doughnut" draws a ring, anything else a pie."""
        self._update(style=style)

    def set_start_position(self, position: str) -> None:
        """Start the first slice at the top, right, bottom or left.

        Other values are ignored.
        """
        try:
            start = StartPosition(position)
        except ValueError:
            logger.debug("Ignoring unsupported start position", position=position)
            return
        self._update(start_angle=start.angle)

    def set_palette(self, palette: Sequence[str]) -> None:
        """Use the given colours, in order, instead of a generated palette.

        Colours are written into the legend <style> block unescaped, so any CSS
        colour value works but "{", "}" and "<" are rejected.

        Raises:
            ValidationError: If palette is a single string or a colour is not allowed
        """
        if isinstance(palette, (str, bytes)):
            raise ValidationError(
                "Palette must be a sequence of colours, not a single string",
                details=[ErrorDetail(field="palette", reason=f"got {type(palette).__name__}")],
                hint=f"Wrap the colour in a list: [{palette!r}]",
            )
        self._update(palette=tuple(palette))

    def build(self) -> str:
        """Build the chart markup from the current configuration."""
        return render(self._series, self._config)
