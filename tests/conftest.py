"""Shared helpers for the tic-tac-toe tests."""

from __future__ import annotations

from typing import Iterable

from tictactoe.board import Position
from tictactoe.game import MoveResult


def play(result: MoveResult, names: Iterable[str]) -> MoveResult:
    """Click through ``names`` in order, asserting each one is a legal move."""
    for name in names:
        move = result.move_for(Position.parse(name))
        assert move is not None, f"{name} is not playable"
        result = move.capability()
    return result
