"""
Field pattern parsing for antfield.

Builds a fully explicit store from a hand-drawn pattern, one string per row:
- 'X': Obstacle
- ' ': Clear
- '*': Clear, and expected to be reached by a traversal from inside the pattern
"""

from __future__ import annotations

from field_types import CellState, Coordinate, FieldStore

__all__ = ["parse_field", "expected_reachable"]

_OBSTACLE = "X"
_CLEAR = " "
_REACHABLE = "*"


def _check_rows(rows: list[str]) -> None:
    if not rows:
        raise ValueError("Field pattern must contain at least one row")

    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in field pattern\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{rows[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)


def parse_field(rows: list[str], origin: Coordinate = (0, 0)) -> FieldStore:
    """
    Parse a field pattern into a store with every cell set explicitly.

    Example:
        parse_field([
            "XXXX",
            "X**X",
            "XXXX",
        ])
        Stores 12 cells: the border as OBSTACLE, the two interior cells as CLEAR.

    Args:
        rows: Pattern rows, top row first; all rows must be the same length
        origin: Field coordinate of the pattern's top-left character

    Returns:
        FieldStore covering the whole pattern

    Raises:
        ValueError: On an unknown character or inconsistent row lengths
    """
    _check_rows(rows)
    ox, oy = origin
    store: FieldStore = {}

    for row_idx, row in enumerate(rows):
        for col_idx, char in enumerate(row):
            if char == _OBSTACLE:
                state = CellState.OBSTACLE
            elif char in (_CLEAR, _REACHABLE):
                state = CellState.CLEAR
            else:
                raise ValueError(
                    f"Invalid character '{char}' in field pattern\n"
                    f"  Row {row_idx}: \"{row}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: 'X' (obstacle), ' ' (clear), '*' (reachable)"
                )
            store[(ox + col_idx, oy + row_idx)] = state

    return store


def expected_reachable(rows: list[str], origin: Coordinate = (0, 0)) -> set[Coordinate]:
    """Coordinates of every '*' in the pattern."""
    _check_rows(rows)
    ox, oy = origin
    return {
        (ox + col_idx, oy + row_idx)
        for row_idx, row in enumerate(rows)
        for col_idx, char in enumerate(row)
        if char == _REACHABLE
    }
