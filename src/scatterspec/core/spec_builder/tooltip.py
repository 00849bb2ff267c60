"""Tooltip descriptors for XY plot marks."""

from __future__ import annotations

import re
from collections.abc import Iterable

_FIELD_PATTERN = re.compile(r"datum\['((?:[^'\\]|\\.)*)'\]")


def _quote(name: str) -> str:
    return name.replace("\\", "\\\\").replace("'", "\\'")


def _unquote(name: str) -> str:
    return re.sub(r"\\(.)", r"\1", name)


def build_tooltip_fields(columns: Iterable[str]) -> dict[str, str]:
    """Build a Vega tooltip descriptor listing every column of the hovered datum.

    The descriptor is a signal expression producing an object keyed by column
    name, e.g. ``{'x': datum['x'], 'status': datum['status']}``. Repeated
    column names are listed once. An empty column list gives an empty object.

    Args:
        columns: Column identifiers present in every row

    Returns:
        Descriptor usable as the ``tooltip`` encoding of a mark
    """
    seen: dict[str, None] = dict.fromkeys(columns)
    entries = ", ".join(f"'{_quote(name)}': datum['{_quote(name)}']" for name in seen)
    return {"signal": "{" + entries + "}"}


def tooltip_field_names(descriptor: dict[str, str]) -> set[str]:
    """Return the column identifiers a tooltip descriptor refers to."""
    return {_unquote(match) for match in _FIELD_PATTERN.findall(descriptor.get("signal", ""))}
