"""Tic-tac-toe engine whose states carry their legal moves as capabilities."""

from .board import Board, CellState, Horiz, Player, Position, Vert
from .display import DisplayInfo, display_info
from .game import API, GameApi, MoveResult, NextMoveInfo, ResultKind, new_game
from .logger import inject_logging
from .rules import WINNING_LINES, has_won, is_tied

__all__ = [
    "API",
    "Board",
    "CellState",
    "DisplayInfo",
    "GameApi",
    "Horiz",
    "MoveResult",
    "NextMoveInfo",
    "Player",
    "Position",
    "ResultKind",
    "Vert",
    "WINNING_LINES",
    "display_info",
    "has_won",
    "inject_logging",
    "is_tied",
    "new_game",
]
