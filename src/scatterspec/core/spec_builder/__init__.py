"""Spec builder module for XY plots."""

from .builder import SpecBuilder, build_xy_spec, to_json
from .rows import normalize_rows
from .tooltip import build_tooltip_fields, tooltip_field_names

__all__ = [
    "SpecBuilder",
    "build_tooltip_fields",
    "build_xy_spec",
    "normalize_rows",
    "to_json",
    "tooltip_field_names",
]
