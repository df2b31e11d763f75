"""
Raster output for antfield windows.

One pixel per cell, written as binary PPM (P6) through Pillow.
"""

from __future__ import annotations

import logging

from PIL import Image

from antfield import check_coordinate, get_cell_state
from field_types import DEFAULT_CONFIG, FieldConfig, FieldStore, RenderError

__all__ = ["check_window", "window_pixels", "render_window"]

logger = logging.getLogger(__name__)


def check_window(
    x0: int, y0: int, x1: int, y1: int, config: FieldConfig = DEFAULT_CONFIG
) -> tuple[int, int]:
    """
    Validate an inclusive window and return its (width, height).

    Raises:
        CoordinateError: If a corner lies outside the field's domain
        ValueError: If the window is inverted on either axis
    """
    check_coordinate(x0, y0, config)
    check_coordinate(x1, y1, config)
    if x0 > x1 or y0 > y1:
        raise ValueError(
            f"Invalid window: ({x0}, {y0})-({x1}, {y1})\n"
            f"  Expected x0 <= x1 and y0 <= y1"
        )
    return (x1 - x0 + 1, y1 - y0 + 1)


def window_pixels(
    store: FieldStore,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    config: FieldConfig = DEFAULT_CONFIG,
) -> bytes:
    """Raw RGB bytes for the window, row-major from (x0, y0)."""
    check_window(x0, y0, x1, y1, config)
    buffer = bytearray()
    for y in range(y0, y1 + 1):
        for x in range(x0, x1 + 1):
            buffer.extend(config.color_of(get_cell_state(store, x, y, config)))
    return bytes(buffer)


def render_window(
    store: FieldStore,
    path: str,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    config: FieldConfig = DEFAULT_CONFIG,
) -> None:
    """
    Write an inclusive window of the field to a PPM image.

    Args:
        store: The field store (read only)
        path: Output file path
        x0, y0: Top-left corner of the window
        x1, y1: Bottom-right corner of the window
        config: Classification parameters and color palette

    Raises:
        CoordinateError: If a corner lies outside the field's domain
        ValueError: If the window is inverted
        RenderError: If the file cannot be created or written
    """
    size = check_window(x0, y0, x1, y1, config)
    image = Image.frombytes("RGB", size, window_pixels(store, x0, y0, x1, y1, config))

    logger.info("render_window: %dx%d window to %s", size[0], size[1], path)
    try:
        image.save(path, format="PPM")
    except OSError as e:
        raise RenderError(path, e) from e
