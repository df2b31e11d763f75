"""
Sparse flood fill over a procedurally classified, unbounded field.

Cells are only stored once something explicitly sets them; every other cell
is classified on demand from the digit sums of its coordinates.
"""

from __future__ import annotations

import logging
from collections import Counter

from field_types import (
    DEFAULT_CONFIG,
    DIGIT_SUM_MAX,
    CellState,
    Coordinate,
    CoordinateError,
    DigitSumOverflowError,
    FieldConfig,
    FieldStore,
)

__all__ = [
    "digit_sum",
    "classify_cell",
    "lookup_cell",
    "get_cell_state",
    "set_cell_state",
    "mark_reachable",
    "count_avail",
    "count_states",
    "check_coordinate",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Classification
# =============================================================================


def digit_sum(n: int) -> int:
    """
    Sum the decimal digits of a non-negative integer.

    Args:
        n: The value to sum; 0 yields 0

    Returns:
        The digit sum

    Raises:
        ValueError: If n is negative
        DigitSumOverflowError: If the sum does not fit in 16 bits
    """
    if n < 0:
        raise ValueError(f"digit_sum requires a non-negative integer, got {n}")

    acc = 0
    while n > 0:
        acc += n % 10
        if acc > DIGIT_SUM_MAX:
            raise DigitSumOverflowError(
                f"Digit sum exceeds {DIGIT_SUM_MAX} (16-bit limit)"
            )
        n //= 10
    return acc


def classify_cell(x: int, y: int, config: FieldConfig = DEFAULT_CONFIG) -> CellState:
    """Classify a cell that has never been explicitly set."""
    if digit_sum(x) + digit_sum(y) > config.threshold:
        return CellState.OBSTACLE
    return CellState.CLEAR


def check_coordinate(x: int, y: int, config: FieldConfig = DEFAULT_CONFIG) -> Coordinate:
    """
    Validate that (x, y) lies inside the field's domain.

    Raises:
        CoordinateError: If either axis is negative or above config.max_coord
    """
    for axis, value in (("x", x), ("y", y)):
        if not 0 <= value <= config.max_coord:
            raise CoordinateError(
                f"Coordinate out of range: ({x}, {y})\n"
                f"  Axis {axis} = {value}\n"
                f"  Valid range: 0..{config.max_coord}"
            )
    return (x, y)


# =============================================================================
# Field Store
# =============================================================================


def lookup_cell(store: FieldStore, x: int, y: int) -> CellState | None:
    """Return the explicitly stored state at (x, y), or None if never set."""
    return store.get((x, y))


def get_cell_state(
    store: FieldStore, x: int, y: int, config: FieldConfig = DEFAULT_CONFIG
) -> CellState:
    """
    Get the state of a cell, classifying it if it was never set.

    Classification results are not written back: only set_cell_state grows
    the store.

    Args:
        store: The field store
        x: Column coordinate
        y: Row coordinate
        config: Classification parameters

    Returns:
        The stored state, or the classification rule's result
    """
    state = lookup_cell(store, x, y)
    if state is None:
        return classify_cell(x, y, config)
    return state


def set_cell_state(store: FieldStore, x: int, y: int, state: CellState) -> None:
    """Store a state at (x, y), replacing any previous entry."""
    store[(x, y)] = state


# =============================================================================
# Reachability
# =============================================================================


def mark_reachable(
    store: FieldStore, x: int, y: int, config: FieldConfig = DEFAULT_CONFIG
) -> int:
    """
    Mark every clear cell 4-connected to (x, y) as AVAIL.

    Uses an explicit worklist, so region size is bounded by memory rather
    than interpreter recursion depth. A branch ends at any cell that is not
    CLEAR, which covers both obstacles and cells already marked.

    Args:
        store: The field store, mutated in place
        x: Seed column
        y: Seed row
        config: Classification parameters and domain bounds

    Returns:
        Number of cells newly marked AVAIL by this call

    Raises:
        CoordinateError: If the seed lies outside the domain
    """
    check_coordinate(x, y, config)
    logger.debug("mark_reachable: seed=(%d, %d), threshold=%d", x, y, config.threshold)

    max_coord = config.max_coord
    marked = 0
    worklist: list[Coordinate] = [(x, y)]

    while worklist:
        cx, cy = worklist.pop()
        if get_cell_state(store, cx, cy, config) != CellState.CLEAR:
            continue

        set_cell_state(store, cx, cy, CellState.AVAIL)
        marked += 1

        if cy < max_coord:
            worklist.append((cx, cy + 1))
        if cy > 0:
            worklist.append((cx, cy - 1))
        if cx > 0:
            worklist.append((cx - 1, cy))
        if cx < max_coord:
            worklist.append((cx + 1, cy))

    logger.info("mark_reachable: marked %d cells from (%d, %d)", marked, x, y)
    return marked


# =============================================================================
# Aggregation
# =============================================================================


def count_avail(store: FieldStore) -> int:
    """Count stored cells in the AVAIL state."""
    return sum(1 for state in store.values() if state == CellState.AVAIL)


def count_states(store: FieldStore) -> Counter[CellState]:
    """Histogram of explicitly stored states."""
    return Counter(store.values())
