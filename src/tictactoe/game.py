"""Game engine: move results carrying the capabilities for every legal move.

A :class:`MoveResult` is an immutable snapshot of one point in a game. The
non-terminal results list one :class:`NextMoveInfo` per empty cell, and the
only way to advance the game is to call one of those capabilities. Each
capability is bound to the board and player it was created from, so calling
it again always returns an equal result and never disturbs the snapshot that
produced it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, Optional, Tuple

from .board import Board, Player, Position
from .display import DisplayInfo, display_info
from .rules import has_won, is_tied


class ResultKind(Enum):
    PLAYER_X_TO_MOVE = "PlayerXToMove"
    PLAYER_O_TO_MOVE = "PlayerOToMove"
    GAME_WON = "GameWon"
    GAME_TIED = "GameTied"

    @property
    def is_terminal(self) -> bool:
        return self in (ResultKind.GAME_WON, ResultKind.GAME_TIED)


_TO_MOVE = {
    Player.X: ResultKind.PLAYER_X_TO_MOVE,
    Player.O: ResultKind.PLAYER_O_TO_MOVE,
}


@dataclass(frozen=True)
class NextMoveInfo:
    pos_to_play: Position
    # Compared by position only; two capabilities for the same cell are equal
    capability: Callable[[], "MoveResult"] = field(compare=False, repr=False)


@dataclass(frozen=True)
class MoveResult:
    kind: ResultKind
    display: DisplayInfo
    moves: Tuple[NextMoveInfo, ...] = ()
    winner: Optional[Player] = None

    def __post_init__(self) -> None:
        if self.kind.is_terminal and self.moves:
            raise ValueError(f"{self.kind.value} cannot carry moves")
        if not self.kind.is_terminal and not self.moves:
            raise ValueError(f"{self.kind.value} needs at least one move")
        if (self.kind is ResultKind.GAME_WON) != (self.winner is not None):
            raise ValueError("Only GameWon carries a winner")

    @classmethod
    def to_move(
        cls, player: Player, display: DisplayInfo, moves: Tuple[NextMoveInfo, ...]
    ) -> "MoveResult":
        return cls(kind=_TO_MOVE[player], display=display, moves=moves)

    @classmethod
    def game_won(cls, display: DisplayInfo, winner: Player) -> "MoveResult":
        return cls(kind=ResultKind.GAME_WON, display=display, winner=winner)

    @classmethod
    def game_tied(cls, display: DisplayInfo) -> "MoveResult":
        return cls(kind=ResultKind.GAME_TIED, display=display)

    @property
    def is_terminal(self) -> bool:
        return self.kind.is_terminal

    @property
    def player_to_move(self) -> Optional[Player]:
        for player, kind in _TO_MOVE.items():
            if kind is self.kind:
                return player
        return None

    def move_for(self, position: Position) -> Optional[NextMoveInfo]:
        for move in self.moves:
            if move.pos_to_play == position:
                return move
        return None


def _player_to_move(board: Board, player: Player) -> MoveResult:
    moves = tuple(
        NextMoveInfo(pos, partial(step, board, player, pos))
        for pos in board.empty_positions()
    )
    return MoveResult.to_move(player, display_info(board), moves)


def new_game() -> MoveResult:
    return _player_to_move(Board.empty(), Player.X)


def step(board: Board, player: Player, position: Position) -> MoveResult:
    """Play ``player`` on ``position`` and describe the resulting state."""

    new_board = board.place(position, player)
    # Win is checked first so a winning final move is never reported as a tie
    if has_won(new_board, player):
        return MoveResult.game_won(display_info(new_board), player)
    if is_tied(new_board):
        return MoveResult.game_tied(display_info(new_board))
    return _player_to_move(new_board, player.opponent)


@dataclass(frozen=True)
class GameApi:
    """Public operations of the engine; wrappers replace it with the same shape."""

    new_game: Callable[[], MoveResult]


API = GameApi(new_game=new_game)
