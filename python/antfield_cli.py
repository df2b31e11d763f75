"""
Command-line entry point for antfield.

Counts the cells reachable from a seed and optionally writes a window of the
field to a PPM image.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from antfield import count_avail, count_states, mark_reachable
from ascii_render import render_ascii
from field_types import (
    DEFAULT_SEED,
    DEFAULT_WINDOW,
    OBSTACLE_THRESHOLD,
    AntFieldError,
    FieldConfig,
    FieldStore,
    RenderError,
)
from raster import render_window

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="antfield",
        description="Count field cells reachable from a seed and optionally render a window",
    )
    parser.add_argument("output", nargs="?", help="Write the window as a PPM image to this path")
    parser.add_argument(
        "--seed",
        nargs=2,
        type=int,
        default=DEFAULT_SEED,
        metavar=("X", "Y"),
        help="Traversal start coordinate (default: %(default)s)",
    )
    parser.add_argument(
        "--window",
        nargs=4,
        type=int,
        default=DEFAULT_WINDOW,
        metavar=("X0", "Y0", "X1", "Y1"),
        help="Inclusive window to render (default: %(default)s)",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=OBSTACLE_THRESHOLD,
        help="Digit-sum threshold above which a cell is an obstacle (default: %(default)s)",
    )
    parser.add_argument("--ascii", action="store_true", help="Print the window to the terminal")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the traversal and report; returns the process exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    console = Console()
    err_console = Console(stderr=True)
    config = FieldConfig(threshold=args.threshold)
    store: FieldStore = {}
    seed_x, seed_y = args.seed
    x0, y0, x1, y1 = args.window

    console.print("Calculating available cells...", highlight=False)
    try:
        mark_reachable(store, seed_x, seed_y, config)
    except AntFieldError as e:
        err_console.print(f"error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 2
    print(f"Available cells count: {count_avail(store)}.")

    if args.verbose:
        for state, count in sorted(count_states(store).items(), key=lambda item: item[0].value):
            logger.debug("stored %s cells: %d", state.value, count)

    try:
        if args.ascii:
            print(render_ascii(store, x0, y0, x1, y1, config))
        if args.output is not None:
            console.print(
                f"Writing PPM-image into {args.output}...",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            render_window(store, args.output, x0, y0, x1, y1, config)
    except RenderError as e:
        err_console.print(f"error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 1
    except ValueError as e:
        err_console.print(f"error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 2

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
