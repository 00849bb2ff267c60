"""Fixed cosmetic settings of the XY plot.

None of these values are configurable per call; they describe the look of
every XY plot the builder produces.
"""

from pydantic import BaseModel, ConfigDict

from scatterspec.core.enums import LayoutMode, StatusCode


class LayoutFractions:
    """Share of the container given to the plot area."""

    WIDTH: dict[LayoutMode, float] = {  # noqa: RUF012
        LayoutMode.SINGLE: 0.9,
        LayoutMode.PAIRED: 0.5,
    }
    HEIGHT: float = 0.35  # Same in both modes; leaves room for sibling panels
    PADDING: int = 0


class MarkStyle:
    """Symbol styling for the base and selected layers."""

    SHAPE: str = "circle"

    SIZE_BACKGROUND: int = 40  # status 0
    SIZE_EMPHASIS: int = 100  # every other status, and selected points

    BASE_OPACITY: float = 0.65
    SELECTED_OPACITY: float = 1.0

    STROKE_WIDTH: int = 1
    BASE_STROKE: str = "transparent"
    SELECTED_STROKE: str = "black"


class LegendStyle(BaseModel):
    """Styling of the status legend swatches."""

    model_config = ConfigDict(frozen=True)

    title: str = "Status"
    stroke_color: str = "black"
    stroke_width: int = 1
    opacity: float = 0.7
    symbol_type: str = "circle"


class AxisStyle:
    """Axis settings shared by the x and y axes."""

    GRID: bool = True
    DOMAIN: bool = False
    X_TICK_COUNT: int = 5
    Y_TITLE_PADDING: int = 5


# Colour scale domain; the order matches PlotParameters.status_colours.
STATUS_DOMAIN: tuple[int, ...] = tuple(int(code) for code in sorted(StatusCode))

legend_style = LegendStyle()
