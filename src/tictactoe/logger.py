"""Logging side channel wrapped around the engine API."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from .game import GameApi, MoveResult, NextMoveInfo
from .presenter import status_text

LOGGER = logging.getLogger("tictactoe.engine")

Log = Callable[[str], None]


def inject_logging(api: GameApi, log: Optional[Log] = None) -> GameApi:
    """Return an API of the same shape that reports every call to ``log``.

    ``new_game`` logs once per call, and every capability reachable from its
    result is wrapped so the move it plays is logged as well. Results are
    otherwise returned untouched. Without ``log`` the messages go to the
    ``tictactoe.engine`` logger at INFO level.
    """

    sink: Log = log if log is not None else LOGGER.info

    def wrap_move(result: MoveResult, move: NextMoveInfo) -> NextMoveInfo:
        player = result.player_to_move
        assert player is not None

        def capability() -> MoveResult:
            next_result = move.capability()
            sink(
                f"Player {player.value} played {move.pos_to_play.name}: "
                f"{status_text(next_result)}"
            )
            return wrap_result(next_result)

        return replace(move, capability=capability)

    def wrap_result(result: MoveResult) -> MoveResult:
        if result.is_terminal:
            return result
        return replace(result, moves=tuple(wrap_move(result, m) for m in result.moves))

    def new_game() -> MoveResult:
        result = api.new_game()
        sink(f"New game: {status_text(result)}")
        return wrap_result(result)

    return GameApi(new_game=new_game)
