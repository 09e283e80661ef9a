"""Reading puzzles from text and rendering boards."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from contracts.errors import PuzzleInputError, input_error, make_issue
from sudoku_solver import CELL_COUNT, GRID_SIZE, Board

_BOX_RULE = "+-------+-------+-------+"


def parse_grid(text: str) -> Board:
    """Parse 81 digits (0 = empty) from ``text``, ignoring whitespace."""

    board: List[int] = []
    for ch in text:
        if ch.isspace():
            continue
        if ch not in "0123456789":
            raise input_error(
                make_issue("bad-character", f"cell {len(board)}: {ch!r} is not a digit", len(board))
            )
        if len(board) == CELL_COUNT:
            raise input_error(
                make_issue("too-many-cells", f"more than {CELL_COUNT} cells supplied", CELL_COUNT)
            )
        board.append(ord(ch) - ord("0"))

    if len(board) < CELL_COUNT:
        raise input_error(
            make_issue(
                "too-few-cells",
                f"expected {CELL_COUNT} cells, found {len(board)}",
                len(board),
            )
        )
    return board


def read_puzzle(path: str | Path) -> Board:
    """Read a single puzzle file."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PuzzleInputError("not-found", str(path)) from exc
    return parse_grid(text)


def iter_puzzles(path: str | Path) -> Iterator[Tuple[int, Board]]:
    """Yield ``(line_number, board)`` for every puzzle line in ``path``."""

    path = Path(path)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError as exc:
        raise PuzzleInputError("not-found", str(path)) from exc
    for number, line in enumerate(lines, start=1):
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        try:
            yield number, parse_grid(value)
        except PuzzleInputError as exc:
            raise PuzzleInputError(exc.code, f"line {number}: {exc.detail}", exc.issues) from exc


def to_string(board: Sequence[int]) -> str:
    return "".join(str(v) for v in board)


def _format_plain(board: Sequence[int]) -> str:
    rows = []
    for r in range(GRID_SIZE):
        rows.append(" ".join(str(v) for v in board[r * GRID_SIZE : (r + 1) * GRID_SIZE]))
    return "\n".join(rows)


def _format_boxed(board: Sequence[int]) -> str:
    lines = []
    for r in range(GRID_SIZE):
        if r % 3 == 0:
            lines.append(_BOX_RULE)
        row = []
        for c in range(GRID_SIZE):
            v = board[r * GRID_SIZE + c]
            row.append(str(v) if v != 0 else ".")
            if c % 3 == 2:
                row.append("|")
        lines.append("| " + " ".join(row[:-1]) + " |")
    lines.append(_BOX_RULE)
    return "\n".join(lines)


def format_board(board: Sequence[int], style: str = "plain") -> str:
    """Render ``board`` as ``plain`` digit rows or a ``boxed`` grid."""

    if style == "plain":
        return _format_plain(board)
    if style == "boxed":
        return _format_boxed(board)
    raise ValueError(f"Unknown board style: {style!r}")


__all__ = ["format_board", "iter_puzzles", "parse_grid", "read_puzzle", "to_string"]
