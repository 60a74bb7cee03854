"""Driver-side helpers: cell markers, status text and click handling."""

from __future__ import annotations

from typing import Dict, List

from .board import CellState, Position
from .game import MoveResult, ResultKind


def marker(state: CellState) -> str:
    return "" if state.player is None else state.player.value


def status_text(result: MoveResult) -> str:
    if result.kind is ResultKind.PLAYER_X_TO_MOVE:
        return "Player X to move"
    if result.kind is ResultKind.PLAYER_O_TO_MOVE:
        return "Player O to move"
    if result.kind is ResultKind.GAME_WON:
        assert result.winner is not None
        return f"GAME WON by Player {result.winner.value}"
    return "GAME OVER - Tie"


def handle_user_input(result: MoveResult, position: Position) -> MoveResult:
    """Play ``position`` if it is a legal move, otherwise keep ``result``.

    Clicks on occupied cells or on a finished game have no matching
    capability and are ignored.
    """

    move = result.move_for(position)
    if move is None:
        return result
    return move.capability()


def render_cells(result: MoveResult) -> List[Dict[str, str]]:
    return [
        {"position": cell.pos.name, "marker": marker(cell.state)}
        for cell in result.display.cells
    ]
