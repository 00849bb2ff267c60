"""Vega spec builder for XY (MDS/PCA) scatter plots."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from scatterspec.core.enums import LayoutMode
from scatterspec.core.errors import ParameterValidationError, ScatterSpecError, SpecBuildError
from scatterspec.core.models import CanvasDimensions, ErrorDetail, PlotParameters
from scatterspec.infra.config import ScatterSpecSettings, get_settings
from scatterspec.infra.logging import get_logger

from .rows import RowTable, normalize_rows
from .styles import STATUS_DOMAIN, AxisStyle, LayoutFractions, MarkStyle, legend_style
from .tooltip import build_tooltip_fields

logger = get_logger(__name__)

SOURCE_DATA = "source"
SELECTED_DATA = "selected_points"
COLOUR_SCALE = "colour_scale"


class SpecBuilder:
    """Assembles Vega v5 specs for XY plots.

    The builder holds only settings; every call to :meth:`build` returns a new
    spec and leaves its arguments untouched.
    """

    def __init__(self, settings: ScatterSpecSettings | None = None) -> None:
        """Initialize spec builder.

        Args:
            settings: Builder settings, defaults to environment variables
        """
        self.settings = settings or get_settings()

    def build(
        self,
        params: PlotParameters,
        rows: RowTable,
        width: float,
        height: float,
        strict: bool | None = None,
    ) -> dict[str, Any]:
        """Build the XY plot spec.

        Args:
            params: Plot parameters
            rows: Row table embedded as the ``source`` data
            width: Container width in pixels
            height: Container height in pixels
            strict: Validate parameters first; defaults to ``settings.strict``

        Returns:
            Vega spec as a JSON-serializable dict

        Raises:
            ParameterValidationError: If strict validation rejects the input
            RowConversionError: If rows is not a table of mappings
            SpecBuildError: If assembly fails for any other reason
        """
        use_strict = self.settings.strict if strict is None else strict
        if use_strict:
            self.validate(params, width, height)

        try:
            values = normalize_rows(rows)
            tooltip = build_tooltip_fields(params.columns)
            plot_width, plot_height = self.plot_size(params.layout_mode, width, height)

            spec: dict[str, Any] = {
                "$schema": self.settings.schema_url,
                "description": self.settings.description,
                "width": plot_width,
                "height": plot_height,
                "padding": LayoutFractions.PADDING,
                "autosize": {"type": "fit", "resize": True},
                "title": {"text": params.title},
                "signals": [self._click_signal()],
                "data": self._data(values),
                "scales": self._scales(params),
                "legends": [self._legend()],
                "axes": self._axes(params),
                "marks": [
                    self._base_marks(params, dict(tooltip)),
                    self._selected_marks(params, dict(tooltip)),
                ],
            }
        except ScatterSpecError:
            raise
        except Exception as e:
            msg = f"Failed to build XY spec: {e}"
            raise SpecBuildError(msg) from e

        logger.debug(
            "Built XY spec",
            rows=len(values),
            layout_mode=params.layout_mode.value,
            width=plot_width,
            height=plot_height,
        )
        return spec

    @staticmethod
    def plot_size(layout_mode: LayoutMode, width: float, height: float) -> tuple[float, float]:
        """Size of the plot area for a container of the given size."""
        return width * LayoutFractions.WIDTH[layout_mode], height * LayoutFractions.HEIGHT

    def validate(self, params: PlotParameters, width: float, height: float) -> None:
        """Check parameters and canvas size.

        Raises:
            ParameterValidationError: Listing every problem found
        """
        details: list[ErrorDetail] = []

        if len(params.status_colours) != len(STATUS_DOMAIN):
            details.append(
                ErrorDetail(
                    field="status_colours",
                    reason=f"expected {len(STATUS_DOMAIN)} colours, got {len(params.status_colours)}",
                    suggestion="Give one colour for each of the statuses -1, 0 and 1",
                )
            )
        if not params.columns:
            details.append(
                ErrorDetail(
                    field="columns",
                    reason="no columns given",
                    suggestion="List the row columns to show in tooltips",
                )
            )
        try:
            CanvasDimensions(width=width, height=height)
        except PydanticValidationError as e:
            details.extend(
                ErrorDetail(field=str(err["loc"][0]), reason=err["msg"], suggestion="Use a positive pixel size")
                for err in e.errors()
            )

        if details:
            logger.warning("Rejected XY plot parameters", fields=[d.field for d in details])
            raise ParameterValidationError(details)

    @staticmethod
    def _click_signal() -> dict[str, Any]:
        return {
            "name": "click",
            "value": None,
            "on": [{"events": "mousedown", "update": "[datum, now()]"}],
        }

    @staticmethod
    def _data(values: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [
            {
                "name": SOURCE_DATA,
                "values": values,
                "transform": [{"type": "formula", "expr": "datum.x", "as": "tooltip"}],
            },
            # Filled in by the rendering runtime when points are clicked
            {"name": SELECTED_DATA},
        ]

    @staticmethod
    def _scales(params: PlotParameters) -> list[dict[str, Any]]:
        def linear(name: str, field: str, extent: str) -> dict[str, Any]:
            return {
                "name": name,
                "type": "linear",
                "round": True,
                "nice": True,
                "zero": True,
                "domain": {"data": SOURCE_DATA, "field": field},
                "range": extent,
            }

        return [
            linear("x", params.x_field, "width"),
            linear("y", params.y_field, "height"),
            {
                "name": COLOUR_SCALE,
                "type": "ordinal",
                "domain": list(STATUS_DOMAIN),
                "range": list(params.status_colours),
            },
        ]

    @staticmethod
    def _legend() -> dict[str, Any]:
        return {
            "fill": COLOUR_SCALE,
            "title": legend_style.title,
            "symbolStrokeColor": legend_style.stroke_color,
            "symbolStrokeWidth": legend_style.stroke_width,
            "symbolOpacity": legend_style.opacity,
            "symbolType": legend_style.symbol_type,
        }

    @staticmethod
    def _axes(params: PlotParameters) -> list[dict[str, Any]]:
        return [
            {
                "scale": "x",
                "grid": AxisStyle.GRID,
                "domain": AxisStyle.DOMAIN,
                "orient": "bottom",
                "tickCount": AxisStyle.X_TICK_COUNT,
                "title": params.x_field,
            },
            {
                "scale": "y",
                "grid": AxisStyle.GRID,
                "domain": AxisStyle.DOMAIN,
                "orient": "left",
                "titlePadding": AxisStyle.Y_TITLE_PADDING,
                "title": params.y_field,
            },
        ]

    @staticmethod
    def _position(params: PlotParameters) -> dict[str, Any]:
        return {
            "x": {"scale": "x", "field": params.x_field},
            "y": {"scale": "y", "field": params.y_field},
            "shape": MarkStyle.SHAPE,
        }

    def _base_marks(self, params: PlotParameters, tooltip: dict[str, str]) -> dict[str, Any]:
        return {
            "name": "marks",
            "type": "symbol",
            "from": {"data": SOURCE_DATA},
            "encode": {
                "update": {
                    **self._position(params),
                    "size": [
                        {"test": "datum.status == 0", "value": MarkStyle.SIZE_BACKGROUND},
                        {"value": MarkStyle.SIZE_EMPHASIS},
                    ],
                    "opacity": {"value": MarkStyle.BASE_OPACITY},
                    "fill": {"scale": COLOUR_SCALE, "field": "status"},
                    "strokeWidth": {"value": MarkStyle.STROKE_WIDTH},
                    "stroke": {"value": MarkStyle.BASE_STROKE},
                    "tooltip": tooltip,
                }
            },
        }

    def _selected_marks(self, params: PlotParameters, tooltip: dict[str, str]) -> dict[str, Any]:
        return {
            "name": "selected_marks",
            "type": "symbol",
            "from": {"data": SELECTED_DATA},
            "encode": {
                "update": {
                    **self._position(params),
                    "size": {"value": MarkStyle.SIZE_EMPHASIS},
                    "fill": {"value": self.settings.highlight_fill},
                    "strokeWidth": {"value": MarkStyle.STROKE_WIDTH},
                    "stroke": {"value": MarkStyle.SELECTED_STROKE},
                    "opacity": {"value": MarkStyle.SELECTED_OPACITY},
                    "tooltip": tooltip,
                }
            },
        }


def build_xy_spec(
    params: PlotParameters,
    rows: RowTable,
    width: float,
    height: float,
) -> dict[str, Any]:
    """Build an XY plot spec with settings taken from the environment."""
    return SpecBuilder().build(params, rows, width, height)


def to_json(spec: dict[str, Any], indent: int | None = None) -> str:
    """Serialize a spec.

    Dates and other values JSON has no type for become strings. NaN and
    infinity raise ValueError instead of producing invalid JSON.
    """
    return json.dumps(spec, indent=indent, ensure_ascii=False, allow_nan=False, default=str)
