"""
Shared type definitions for the antfield system.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


# =============================================================================
# Domain Constants
# =============================================================================

MAX_COORD = 2**64 - 1  # Largest coordinate on either axis (unsigned 64-bit)
DIGIT_SUM_MAX = 0xFFFF  # Digit sums must fit an unsigned 16-bit value

OBSTACLE_THRESHOLD = 25

DEFAULT_SEED = (1000, 1000)
DEFAULT_WINDOW = (500, 500, 2499, 2499)  # x0, y0, x1, y1 (inclusive)


class CellState(Enum):
    """State of a single field cell."""

    CLEAR = "clear"  # Passable, not reached by a traversal
    OBSTACLE = "obstacle"  # Impassable, never changes
    AVAIL = "avail"  # Passable and reachable from the seed


Coordinate = tuple[int, int]

FieldStore = dict[Coordinate, CellState]

Color = tuple[int, int, int]


def _default_colors() -> dict[CellState, Color]:
    return {
        CellState.CLEAR: (0xFF, 0xFF, 0x00),
        CellState.OBSTACLE: (0x00, 0x00, 0xFF),
        CellState.AVAIL: (0x00, 0xFF, 0x00),
    }


@dataclass(frozen=True)
class FieldConfig:
    """Fixed parameters governing classification and rendering."""

    threshold: int = OBSTACLE_THRESHOLD
    max_coord: int = MAX_COORD
    colors: Mapping[CellState, Color] = field(default_factory=_default_colors, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))

    def color_of(self, state: CellState) -> Color:
        return self.colors[state]


DEFAULT_CONFIG = FieldConfig()


# =============================================================================
# Errors
# =============================================================================


class AntFieldError(Exception):
    """Base class for antfield failures."""


class DigitSumOverflowError(AntFieldError, OverflowError):
    """A digit sum does not fit the 16-bit result width."""


class CoordinateError(AntFieldError, ValueError):
    """A coordinate lies outside the field's domain."""


class RenderError(AntFieldError):
    """A rendered window could not be written to its output path."""

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"couldn't write {path}: {cause}")
        self.path = path
        self.cause = cause
