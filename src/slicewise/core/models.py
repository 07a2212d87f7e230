"""Pydantic models for slicewise data structures."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import ChartStyle, Direction, StartPosition

# Characters that would end a CSS rule or the <style> element
PALETTE_FORBIDDEN_CHARS = ("{", "}", "<")


class ChartConfig(BaseModel):
    """Immutable chart configuration.

    ChartBuilder replaces its config on every setter call; render() only ever
    reads one.
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(default=200, description="Chart width and height in pixels")
    gap: int = Field(default=32, description="Gap between chart and legend in pixels")
    direction: Direction = Field(default=Direction.ROW, description="Wrapper flex direction")
    style: str = Field(default=ChartStyle.PIE.value, description="Chart style, only 'doughnut' is special")
    start_angle: int = Field(default=StartPosition.TOP.angle, description="Angle of the first slice edge")
    hue: int = Field(default=220, description="Hue used for the generated palette")
    palette: tuple[str, ...] | None = Field(default=None, description="Custom colours, used verbatim")

    @field_validator("palette")
    @classmethod
    def reject_markup_in_colours(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        """Colours end up inside a <style> rule; they must not close it."""
        for colour in v or ():
            if any(char in colour for char in PALETTE_FORBIDDEN_CHARS):
                raise ValueError(f"Colour {colour!r} contains one of {' '.join(PALETTE_FORBIDDEN_CHARS)}")
        return v

    @property
    def is_doughnut(self) -> bool:
        """Whether the chart is drawn as a ring."""
        return self.style == ChartStyle.DOUGHNUT.value


class SeriesEntry(BaseModel):
    """One input value with its optional label."""

    model_config = ConfigDict(frozen=True)

    label: str | None = Field(default=None, description="Legend label, None for positional input")
    value: int | float = Field(..., description="Slice weight")
    synthetic: bool = Field(default=False, description="Padding entry, never shown in the legend")

    @field_validator("value", mode="before")
    @classmethod
    def reject_booleans(cls, v: object) -> object:
        """Booleans are ints to Python but not chart values."""
        if isinstance(v, bool):
            raise ValueError("Boolean is not a chart value")
        return v


class Series(BaseModel):
    """Ordered chart values."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[SeriesEntry, ...] = Field(default_factory=tuple)

    @property
    def values(self) -> list[int | float]:
        return [entry.value for entry in self.entries]

    @property
    def total_value(self) -> int | float:
        return sum(self.values)

    @property
    def legend_entries(self) -> list[SeriesEntry]:
        """Entries that came from the caller, in input order."""
        return [entry for entry in self.entries if not entry.synthetic]

    def __len__(self) -> int:
        return len(self.entries)


class Geometry(BaseModel):
    """Derived chart dimensions."""

    model_config = ConfigDict(frozen=True)

    cx: int
    cy: int
    radius: int
    inner_radius: int


class SlicePath(BaseModel):
    """One emitted slice path."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., description="Index of the slice in the series")
    start_angle: float = Field(..., description="Start of the sweep in degrees")
    end_angle: float = Field(..., description="End of the sweep in degrees")
    d: str = Field(..., description="SVG path data")
    fill: str = Field(..., description="Fill colour")

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    reason: str | None = Field(default=None, description="Detailed reason for the error")
    suggestion: str | None = Field(default=None, description="Suggested correction")


class ErrorResponse(BaseModel):
    """Serializable form of a slicewise error."""

    code: str = Field(..., description="Error code (e.g., E422_UNPROCESSABLE)")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(default=None, description="Detailed error information")
    hint: str | None = Field(default=None, description="Correction hint for the caller")
