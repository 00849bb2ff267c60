"""Enumerations for scatterspec core types."""

from enum import Enum, IntEnum


class LayoutMode(str, Enum):
    """How the XY plot shares the horizontal space of its container."""

    SINGLE = "single"  # Plot fills most of the row
    PAIRED = "paired"  # Plot shares the row with a sibling panel


class StatusCode(IntEnum):
    """Per-row status category driving colour and emphasis."""

    DOWN = -1
    NOT_SIG = 0
    UP = 1


class ErrorCode(str, Enum):
    """Application error codes for structured error responses."""

    E400_VALIDATION = "E400_VALIDATION"
    E500_INTERNAL = "E500_INTERNAL"


class BuildPhase(str, Enum):
    """Phases of spec assembly, used to tag errors."""

    PARAMETER_VALIDATION = "parameter_validation"
    ROW_CONVERSION = "row_conversion"
    SPEC_ASSEMBLY = "spec_assembly"
