"""Vega specs for interactive XY plots of dimensionality reduction results."""

from scatterspec.core.enums import LayoutMode, StatusCode
from scatterspec.core.models import PlotParameters
from scatterspec.core.spec_builder import SpecBuilder, build_tooltip_fields, build_xy_spec, to_json

__version__ = "0.1.0"

__all__ = [
    "LayoutMode",
    "PlotParameters",
    "SpecBuilder",
    "StatusCode",
    "__version__",
    "build_tooltip_fields",
    "build_xy_spec",
    "to_json",
]
