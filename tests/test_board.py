import pytest

from edge_puzzle import Board, neighbors
from edge_puzzle.board import BOTTOM, LEFT, RIGHT, TOP, edges_match

from conftest import solved_pieces


def test_neighbors_corner_edge_centre():
    assert neighbors(0) == [(RIGHT, 1), (BOTTOM, 3)]
    assert neighbors(4) == [(TOP, 1), (RIGHT, 5), (BOTTOM, 7), (LEFT, 3)]
    assert neighbors(8) == [(TOP, 5), (LEFT, 7)]
    assert neighbors(7) == [(TOP, 4), (RIGHT, 8), (LEFT, 6)]


def test_neighbors_out_of_range():
    with pytest.raises(ValueError):
        neighbors(9)


def test_edges_match_uses_equal_symbols():
    assert edges_match(("+", "-", "×", "÷"), ("x", "x", "+", "x"), TOP)
    assert not edges_match(("+", "-", "×", "÷"), ("x", "x", "-", "x"), TOP)
    assert edges_match(("+", "-", "×", "÷"), ("x", "x", "x", "-"), RIGHT)


def test_can_place_on_empty_board():
    board = Board()
    assert board.can_place(("+", "+", "+", "+"), 4, {})


def test_can_place_checks_all_neighbors():
    pieces = {p.id: p.edges for p in solved_pieces()}
    board = Board()
    for pos in (1, 3, 5, 7):
        board.place(pos, pos)

    assert board.can_place(pieces[4], 4, pieces)
    # Rotated centre piece no longer fits
    top, right, bottom, left = pieces[4]
    assert not board.can_place((left, top, right, bottom), 4, pieces)


def test_can_place_accepts_function_lookup():
    pieces = {p.id: p.edges for p in solved_pieces()}
    board = Board()
    board.place(0, 0)
    assert board.can_place(pieces[1], 1, lambda piece_id: pieces[piece_id])
    assert not board.can_place(pieces[2], 1, lambda piece_id: pieces[piece_id])


def test_can_place_is_pure():
    pieces = {p.id: p.edges for p in solved_pieces()}
    board = Board()
    board.place(0, 0)
    board.can_place(pieces[1], 1, pieces)
    assert board.cells == [0] + [None] * 8


def test_place_rejects_occupied_and_duplicate():
    board = Board()
    board.place(2, 0)
    with pytest.raises(ValueError):
        board.place(3, 0)
    with pytest.raises(ValueError):
        board.place(2, 1)


def test_board_helpers():
    board = Board()
    assert board.empty_positions() == list(range(9))
    board.place(5, 2)
    assert board.placed_ids() == {5}
    assert board.piece_at(2) == 5
    assert not board.is_full()
    copy = board.copy()
    copy.place(6, 3)
    assert board.piece_at(3) is None


def test_board_needs_nine_cells():
    with pytest.raises(ValueError):
        Board(cells=[None] * 4)
