"""Construction of chart series from caller input."""

from collections.abc import Mapping, Sequence

import polars as pl
from pydantic import ValidationError as PydanticValidationError

from slicewise.core.errors import ValidationError
from slicewise.core.models import ErrorDetail, Series, SeriesEntry
from slicewise.infra.logging import get_logger

logger = get_logger(__name__)

ChartValues = Mapping[str | int, int | float] | Sequence[int | float]


def build_series(values: ChartValues) -> Series:
    """Build a series from a label mapping or a plain list of numbers.

    Mapping keys become legend labels, except integer keys which are treated
    as positions. A single entry is padded with a synthetic zero entry.

    Args:
        values: Mapping of label to number, or a sequence of numbers

    Returns:
        Series in input order

    Raises:
        ValidationError: If the input is not a mapping or sequence, or a value is not a number
    """
    if isinstance(values, Mapping):
        pairs = [(None if isinstance(key, int) else str(key), value) for key, value in values.items()]
    elif isinstance(values, Sequence) and not isinstance(values, (str, bytes)):
        pairs = [(None, value) for value in values]
    else:
        msg = f"Chart values must be a mapping or a sequence, got {type(values).__name__}"
        raise ValidationError(msg, hint="Pass a dict of label to number or a list of numbers")

    return _series_from_pairs(pairs)


def _series_from_pairs(pairs: list[tuple[str | None, object]]) -> Series:
    entries = []
    for position, (label, value) in enumerate(pairs):
        try:
            entries.append(SeriesEntry(label=label, value=value))
        except PydanticValidationError as e:
            field = label if label is not None else f"[{position}]"
            raise ValidationError.from_pydantic(f"Invalid chart value for {field}", e, prefix=f"{field}.") from e

    if len(entries) == 1:
        entries.append(SeriesEntry(value=0, synthetic=True))

    return Series(entries=tuple(entries))


def series_from_frame(frame: pl.DataFrame, value_column: str, label_column: str | None = None) -> Series:
    """Build a series from two columns of a polars DataFrame.

    Args:
        frame: Input data frame, one row per slice
        value_column: Numeric column holding the slice values
        label_column: Optional column holding the legend labels

    Returns:
        Series in row order

    Raises:
        ValidationError: If a column is missing or the value column is not numeric
    """
    missing = [column for column in (value_column, label_column) if column and column not in frame.columns]
    if missing:
        raise ValidationError(
            f"Missing columns: {missing}",
            details=[ErrorDetail(field=column, reason="Column not found in frame") for column in missing],
            hint=f"Available columns: {', '.join(frame.columns)}",
        )

    if not frame.schema[value_column].is_numeric():
        raise ValidationError(
            f"Column '{value_column}' is not numeric",
            details=[ErrorDetail(field=value_column, reason=f"dtype {frame.schema[value_column]}")],
        )

    values = frame.get_column(value_column).fill_null(0).to_list()
    logger.debug("Building series from frame", rows=frame.height, value_column=value_column)

    if label_column is None:
        return build_series(values)

    # Rows are kept as-is, duplicate labels included
    labels = frame.get_column(label_column).cast(pl.Utf8).to_list()
    return _series_from_pairs(list(zip(labels, values, strict=True)))
