"""Row table normalization."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

import polars as pl
import polars.selectors as cs

from scatterspec.core.errors import RowConversionError

RowTable = Iterable[Mapping[str, Any]] | pl.DataFrame


def _json_safe(value: Any) -> Any:  # noqa: ANN401
    # JSON has no NaN or infinity; missing coordinates become null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def normalize_rows(rows: RowTable) -> list[dict[str, Any]]:
    """Convert a row table into a fresh list of plain dicts.

    Rows are copied, so the returned list never shares containers with the
    caller's data. Non-finite floats are replaced by ``None``; other field
    contents are not checked.

    Args:
        rows: Sequence of row mappings or a polars DataFrame

    Returns:
        List of row dicts in input order

    Raises:
        RowConversionError: If rows is not a table of mappings
    """
    if isinstance(rows, pl.DataFrame):
        rows = rows.with_columns(cs.float().fill_nan(None)).to_dicts()
    elif isinstance(rows, (str, bytes, Mapping)) or not isinstance(rows, Iterable):
        msg = "Row table must be a sequence of mappings"
        raise RowConversionError(msg, row_type=type(rows).__name__)

    table: list[dict[str, Any]] = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            msg = f"Row {index} is not a mapping"
            raise RowConversionError(msg, row_type=type(row).__name__)
        table.append({key: _json_safe(value) for key, value in row.items()})
    return table
