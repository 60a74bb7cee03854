"""Unit tests for positions and the immutable board."""

import pytest

from tictactoe.board import ALL_POSITIONS, EMPTY, Board, CellState, Horiz, Player, Position, Vert


def test_all_positions_are_distinct_and_named():
    assert len(ALL_POSITIONS) == 9
    assert len(set(ALL_POSITIONS)) == 9
    assert [p.name for p in ALL_POSITIONS[:4]] == [
        "LeftTop",
        "LeftVCenter",
        "LeftBottom",
        "HCenterTop",
    ]


def test_parse_round_trips_names():
    assert Position.parse("HCenterVCenter") == Position(Horiz.HCENTER, Vert.VCENTER)
    with pytest.raises(ValueError):
        Position.parse("Middle")


def test_empty_board_has_every_position_empty():
    board = Board.empty()
    assert all(board[p] == EMPTY for p in ALL_POSITIONS)
    assert list(board.empty_positions()) == list(ALL_POSITIONS)
    assert not board.is_full()


def test_place_returns_new_board_and_leaves_original():
    board = Board.empty()
    pos = Position(Horiz.RIGHT, Vert.BOTTOM)
    placed = board.place(pos, Player.O)

    assert placed[pos] == CellState.played(Player.O)
    assert board[pos] == EMPTY
    assert pos not in list(placed.empty_positions())
    assert len(list(placed.empty_positions())) == 8


def test_place_on_occupied_cell_fails():
    pos = Position(Horiz.LEFT, Vert.TOP)
    board = Board.empty().place(pos, Player.X)
    with pytest.raises(ValueError):
        board.place(pos, Player.O)


def test_board_rejects_wrong_cell_count():
    with pytest.raises(ValueError):
        Board(cells=(EMPTY,) * 8)


def test_opponent_alternates():
    assert Player.X.opponent is Player.O
    assert Player.O.opponent is Player.X
