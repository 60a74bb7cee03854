"""Positions, players, cell states and the immutable 3x3 board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, NamedTuple, Optional, Tuple


class Player(Enum):
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Horiz(Enum):
    LEFT = "Left"
    HCENTER = "HCenter"
    RIGHT = "Right"


class Vert(Enum):
    TOP = "Top"
    VCENTER = "VCenter"
    BOTTOM = "Bottom"


class Position(NamedTuple):
    horiz: Horiz
    vert: Vert

    @property
    def name(self) -> str:
        """Canonical name such as ``"LeftTop"`` or ``"HCenterVCenter"``."""
        return self.horiz.value + self.vert.value

    @classmethod
    def parse(cls, name: str) -> "Position":
        try:
            return _BY_NAME[name]
        except KeyError as exc:
            raise ValueError(f"Unknown position {name!r}") from exc

    def __repr__(self) -> str:
        return f"Position({self.name})"


# Horizontal outer, vertical inner: LeftTop, LeftVCenter, LeftBottom, HCenterTop...
ALL_POSITIONS: Tuple[Position, ...] = tuple(
    Position(h, v) for h in Horiz for v in Vert
)

_BY_NAME: Dict[str, Position] = {p.name: p for p in ALL_POSITIONS}
_INDEX: Dict[Position, int] = {p: i for i, p in enumerate(ALL_POSITIONS)}


@dataclass(frozen=True)
class CellState:
    """``Empty`` when ``player`` is None, otherwise ``Played(player)``."""

    player: Optional[Player] = None

    @property
    def is_empty(self) -> bool:
        return self.player is None

    @classmethod
    def played(cls, player: Player) -> "CellState":
        return _PLAYED[player]


EMPTY = CellState()
_PLAYED: Dict[Player, CellState] = {p: CellState(p) for p in Player}


@dataclass(frozen=True)
class Board:
    # One state per position, stored in ALL_POSITIONS order
    cells: Tuple[CellState, ...] = (EMPTY,) * len(ALL_POSITIONS)

    def __post_init__(self) -> None:
        if len(self.cells) != len(ALL_POSITIONS):
            raise ValueError(
                f"Board needs exactly {len(ALL_POSITIONS)} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    def __getitem__(self, position: Position) -> CellState:
        return self.cells[_INDEX[position]]

    def items(self) -> Iterator[Tuple[Position, CellState]]:
        return zip(ALL_POSITIONS, self.cells)

    def place(self, position: Position, player: Player) -> "Board":
        """Return a copy of the board with ``player`` on ``position``."""
        idx = _INDEX[position]
        if not self.cells[idx].is_empty:
            raise ValueError(f"Cell {position.name} already occupied")
        cells = list(self.cells)
        cells[idx] = CellState.played(player)
        return Board(cells=tuple(cells))

    def empty_positions(self) -> Iterator[Position]:
        return (p for p, state in self.items() if state.is_empty)

    def is_full(self) -> bool:
        return all(not c.is_empty for c in self.cells)
