"""Read-only board snapshot handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import Board, CellState, Position


@dataclass(frozen=True)
class CellInfo:
    pos: Position
    state: CellState


@dataclass(frozen=True)
class DisplayInfo:
    cells: Tuple[CellInfo, ...]


def display_info(board: Board) -> DisplayInfo:
    return DisplayInfo(cells=tuple(CellInfo(pos, state) for pos, state in board.items()))
