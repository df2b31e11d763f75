"""
ASCII rendering for antfield windows.

One character per cell, optionally colored with the same palette as the
raster output.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from antfield import get_cell_state
from field_types import DEFAULT_CONFIG, CellState, FieldConfig, FieldStore
from raster import check_window

__all__ = ["render_ascii", "CELL_CHARS"]

logger = logging.getLogger(__name__)

CELL_CHARS: dict[CellState, str] = {
    CellState.CLEAR: ".",
    CellState.OBSTACLE: "#",
    CellState.AVAIL: "o",
}

_CELL_COLORS: dict[CellState, Callable[[str], str]] = {
    CellState.CLEAR: chalk.yellow,
    CellState.OBSTACLE: chalk.blue,
    CellState.AVAIL: chalk.green,
}


def render_ascii(
    store: FieldStore,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    config: FieldConfig = DEFAULT_CONFIG,
    color: bool = True,
) -> str:
    """
    Render an inclusive window of the field as text.

    Args:
        store: The field store (read only)
        x0, y0: Top-left corner of the window
        x1, y1: Bottom-right corner of the window
        config: Classification parameters
        color: Colorize each cell by state

    Returns:
        One line per row, top row first
    """
    width, height = check_window(x0, y0, x1, y1, config)
    logger.debug("render_ascii: %dx%d window at (%d, %d)", width, height, x0, y0)

    lines: list[str] = []
    for y in range(y0, y1 + 1):
        line_parts: list[str] = []
        for x in range(x0, x1 + 1):
            state = get_cell_state(store, x, y, config)
            char = CELL_CHARS[state]
            line_parts.append(_CELL_COLORS[state](char) if color else char)
        lines.append("".join(line_parts))

    return "\n".join(lines)
