"""Board helpers: validity, lock, full rows, clear, ghost"""
from typing import Iterable, Optional, Sequence, Tuple
from tetris_piece import Piece, COLS, ROWS

Cell = Optional[str]
Row = Tuple[Cell, ...]
# Immutable grid of color tags; every helper returns a new board
Board = Tuple[Row, ...]

EMPTY_ROW: Row = (None,) * COLS


def empty_board() -> Board:
    return (EMPTY_ROW,) * ROWS


def board_from_rows(lines: Sequence[str], fill: str = "gray") -> Board:
    """Build a board from text, bottom-aligned: '#' is locked, anything else empty.

    >>> board_from_rows(["#########."])[-1][-1] is None
    True
    """
    rows = [tuple(fill if ch == "#" else None for ch in line.ljust(COLS)[:COLS]) for line in lines]
    return (EMPTY_ROW,) * (ROWS - len(rows)) + tuple(rows)


def is_valid(board: Board, piece: Piece) -> bool:
    """True if every cell of the pose is on the grid and empty."""
    for x, y in piece.cells():
        if x < 0 or x >= COLS or y < 0 or y >= ROWS:
            return False
        if board[y][x] is not None:
            return False
    return True


def lock(board: Board, piece: Piece) -> Board:
    if not is_valid(board, piece):
        raise ValueError(f"cannot lock invalid pose {piece}")
    rows = [list(r) for r in board]
    for x, y in piece.cells():
        rows[y][x] = piece.color
    return tuple(tuple(r) for r in rows)


def full_rows(board: Board) -> Tuple[int, ...]:
    return tuple(y for y, row in enumerate(board) if all(c is not None for c in row))


def clear_rows(board: Board, rows: Iterable[int]) -> Board:
    drop = set(rows)
    kept = tuple(row for y, row in enumerate(board) if y not in drop)
    return (EMPTY_ROW,) * (ROWS - len(kept)) + kept


def drop_distance(board: Board, piece: Piece) -> int:
    d = 0
    while is_valid(board, piece.shifted(0, d + 1)):
        d += 1
    return d


def ghost_piece(board: Board, piece: Piece) -> Piece:
    """Return the pose where the piece would land if hard-dropped."""
    return piece.shifted(0, drop_distance(board, piece))
