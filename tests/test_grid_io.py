from __future__ import annotations

import pytest

from contracts.errors import PuzzleInputError
from grid_io import format_board, iter_puzzles, parse_grid, read_puzzle, to_string

SOLVED = (
    "123456789"
    "456789123"
    "789123456"
    "214365897"
    "365897214"
    "897214365"
    "531642978"
    "642978531"
    "978531642"
)


def test_whitespace_is_ignored() -> None:
    spaced = "\n".join(" ".join(SOLVED[r * 9 : (r + 1) * 9]) for r in range(9))
    assert parse_grid(spaced) == parse_grid(SOLVED)
    assert to_string(parse_grid(spaced)) == SOLVED


def test_too_few_cells() -> None:
    with pytest.raises(PuzzleInputError) as excinfo:
        parse_grid(SOLVED[:80])
    assert excinfo.value.code == "too-few-cells"
    assert excinfo.value.issues[0].position == 80


def test_too_many_cells() -> None:
    with pytest.raises(PuzzleInputError) as excinfo:
        parse_grid(SOLVED + "1")
    assert excinfo.value.code == "too-many-cells"


def test_bad_character_reports_position() -> None:
    with pytest.raises(PuzzleInputError) as excinfo:
        parse_grid("12x" + SOLVED[3:])
    assert excinfo.value.code == "bad-character"
    assert excinfo.value.issues[0].position == 2


def test_bad_character_after_full_grid() -> None:
    with pytest.raises(PuzzleInputError) as excinfo:
        parse_grid(SOLVED + "x")
    assert excinfo.value.code == "bad-character"
    assert excinfo.value.issues[0].position == 81


def test_read_puzzle_missing_file(tmp_path) -> None:
    with pytest.raises(PuzzleInputError) as excinfo:
        read_puzzle(tmp_path / "missing.txt")
    assert excinfo.value.code == "not-found"


def test_read_puzzle(tmp_path) -> None:
    path = tmp_path / "puzzle.txt"
    path.write_text(SOLVED + "\n", encoding="utf-8")
    assert to_string(read_puzzle(path)) == SOLVED


def test_iter_puzzles_skips_comments_and_blank_lines(tmp_path) -> None:
    path = tmp_path / "batch.txt"
    path.write_text(f"# header\n\n{SOLVED}\n{'0' * 81}\n", encoding="utf-8")
    items = list(iter_puzzles(path))
    assert [number for number, _ in items] == [3, 4]
    assert to_string(items[1][1]) == "0" * 81


def test_iter_puzzles_names_the_bad_line(tmp_path) -> None:
    path = tmp_path / "batch.txt"
    path.write_text(f"{SOLVED}\n123\n", encoding="utf-8")
    with pytest.raises(PuzzleInputError) as excinfo:
        list(iter_puzzles(path))
    assert excinfo.value.code == "too-few-cells"
    assert "line 2" in str(excinfo.value)


def test_format_plain_and_boxed() -> None:
    board = parse_grid(SOLVED)
    board[0] = 0
    plain = format_board(board).splitlines()
    assert plain[0] == "0 2 3 4 5 6 7 8 9"
    assert len(plain) == 9

    boxed = format_board(board, "boxed").splitlines()
    assert boxed[0] == "+-------+-------+-------+"
    assert boxed[1] == "| . 2 3 | 4 5 6 | 7 8 9 |"
    assert len(boxed) == 13

    with pytest.raises(ValueError):
        format_board(board, "fancy")
