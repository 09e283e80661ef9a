"""Board representation and placement checks for the hybrid solver."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
EMPTY = 0
DIGITS = range(1, GRID_SIZE + 1)

Board = List[int]  # 0 = empty, values 1..9, row-major


def row_of(index: int) -> int:
    return index // GRID_SIZE


def col_of(index: int) -> int:
    return index % GRID_SIZE


def box_of(index: int) -> int:
    return (row_of(index) // BOX_SIZE) * BOX_SIZE + col_of(index) // BOX_SIZE


def _build_units() -> Tuple[Tuple[Tuple[int, ...], ...], ...]:
    rows = tuple(
        tuple(r * GRID_SIZE + c for c in range(GRID_SIZE)) for r in range(GRID_SIZE)
    )
    cols = tuple(
        tuple(r * GRID_SIZE + c for r in range(GRID_SIZE)) for c in range(GRID_SIZE)
    )
    boxes = []
    for b in range(GRID_SIZE):
        top = (b // BOX_SIZE) * BOX_SIZE
        left = (b % BOX_SIZE) * BOX_SIZE
        boxes.append(
            tuple(
                (top + dr) * GRID_SIZE + left + dc
                for dr in range(BOX_SIZE)
                for dc in range(BOX_SIZE)
            )
        )
    return rows, cols, tuple(boxes)


ROWS, COLS, BOXES = _build_units()

# Per cell: the 27 indices of its row, column and box (the cell itself
# appears in each of the three and is skipped by ``is_valid``).
_UNIT_SCAN: Tuple[Tuple[int, ...], ...] = tuple(
    ROWS[row_of(i)] + COLS[col_of(i)] + BOXES[box_of(i)] for i in range(CELL_COUNT)
)


def is_valid(board: Sequence[int], index: int, value: int) -> bool:
    """Return ``True`` when ``value`` may be placed at ``index``.

    Only the other filled cells of the row, column and box are consulted;
    the current content of ``index`` itself is ignored. ``value`` must be
    in 1..9.
    """

    for peer in _UNIT_SCAN[index]:
        if peer != index and board[peer] == value:
            return False
    return True


def first_empty(board: Sequence[int]) -> Optional[int]:
    """Return the lowest empty cell index, or ``None`` for a full board."""

    for index in range(CELL_COUNT):
        if board[index] == EMPTY:
            return index
    return None


def legal_values(board: Sequence[int], index: int) -> List[int]:
    return [value for value in DIGITS if is_valid(board, index, value)]


def is_complete(board: Sequence[int]) -> bool:
    return EMPTY not in board


def find_conflicts(board: Sequence[int]) -> List[Tuple[int, int]]:
    """List pairs of filled cells that share a unit and a value.

    Each pair ``(a, b)`` has ``a < b`` and is reported once even when the
    two cells share more than one unit.
    """

    seen: set[Tuple[int, int]] = set()
    for unit in ROWS + COLS + BOXES:
        for pos, a in enumerate(unit):
            value = board[a]
            if value == EMPTY:
                continue
            for b in unit[pos + 1 :]:
                if board[b] == value:
                    seen.add((min(a, b), max(a, b)))
    return sorted(seen)


__all__ = [
    "BOX_SIZE",
    "BOXES",
    "Board",
    "CELL_COUNT",
    "COLS",
    "DIGITS",
    "EMPTY",
    "GRID_SIZE",
    "ROWS",
    "box_of",
    "col_of",
    "find_conflicts",
    "first_empty",
    "is_complete",
    "is_valid",
    "legal_values",
    "row_of",
]
