"""Pydantic models for scatterspec inputs."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import LayoutMode

# Sentinel point count of a plot that is not paired with a sibling panel.
UNBOUNDED_POINT_COUNT = -1


class PlotParameters(BaseModel):
    """Parameters describing one XY plot.

    Field names follow Python conventions; the aliases match the keys of the
    JSON payload sent by the widget shell, and either form is accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    x_field: str = Field(..., alias="x", description="Column supplying x coordinates")
    y_field: str = Field(..., alias="y", description="Column supplying y coordinates")
    title: str = Field(default="", description="Plot title")
    columns: list[str] = Field(default_factory=list, alias="cols", description="Columns shown in tooltips")
    status_colours: list[str] = Field(
        default_factory=list,
        description="Colours for status codes -1, 0 and 1, in that order",
    )
    point_count: int = Field(default=UNBOUNDED_POINT_COUNT, alias="counts", description="-1 for a single plot")

    @property
    def layout_mode(self) -> LayoutMode:
        """Layout mode implied by ``point_count``."""
        if self.point_count == UNBOUNDED_POINT_COUNT:
            return LayoutMode.SINGLE
        return LayoutMode.PAIRED

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PlotParameters":
        """Build parameters from a widget payload mapping."""
        return cls.model_validate(dict(payload))


class CanvasDimensions(BaseModel):
    """Pixel dimensions supplied by the hosting layout."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0, description="Container width in pixels")
    height: float = Field(..., gt=0, description="Container height in pixels")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    reason: str | None = Field(default=None, description="Detailed reason for the error")
    suggestion: str | None = Field(default=None, description="Suggested correction")
