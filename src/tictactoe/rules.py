"""Win and tie detection for a single 3x3 board."""

from __future__ import annotations

from typing import FrozenSet, Tuple

from .board import Board, CellState, Horiz, Player, Position, Vert

Line = FrozenSet[Position]

_ROWS: Tuple[Line, ...] = tuple(
    frozenset(Position(h, v) for h in Horiz) for v in Vert
)
_COLUMNS: Tuple[Line, ...] = tuple(
    frozenset(Position(h, v) for v in Vert) for h in Horiz
)
_DIAGONALS: Tuple[Line, ...] = (
    frozenset(Position(h, v) for h, v in zip(Horiz, Vert)),
    frozenset(Position(h, v) for h, v in zip(Horiz, reversed(Vert))),
)

WINNING_LINES: Tuple[Line, ...] = _ROWS + _COLUMNS + _DIAGONALS


def has_won(board: Board, player: Player) -> bool:
    mark = CellState.played(player)
    return any(all(board[p] == mark for p in line) for line in WINNING_LINES)


def is_tied(board: Board) -> bool:
    """Full board with no completed line for either player."""
    if not board.is_full():
        return False
    return not any(has_won(board, p) for p in Player)
