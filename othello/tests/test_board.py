import dataclasses

import pytest

from othello.game.board import Board, Color, Move, BLACK, WHITE, EMPTY


def test_initial_layout_and_counts():
    b = Board.initial()
    assert b.cell(3, 3) == BLACK and b.cell(4, 4) == BLACK
    assert b.cell(3, 4) == WHITE and b.cell(4, 3) == WHITE
    assert b.counts() == (2, 2, 60)
    assert b.occupied() == 4


def test_opponent_is_closed_over_two_colors():
    assert BLACK.opponent is WHITE
    assert WHITE.opponent is BLACK
    assert len(Color) == 2


def test_from_rows_rejects_bad_shape_and_symbols():
    with pytest.raises(ValueError):
        Board.from_rows([["."] * 8] * 7)
    rows = [["."] * 8 for _ in range(8)]
    rows[0][0] = "X"
    with pytest.raises(ValueError):
        Board.from_rows(rows)


def test_text_roundtrip_keeps_every_cell():
    b = Board.initial().with_cells(WHITE, [(0, 0), (7, 7)]).with_cells(BLACK, [(0, 7)])
    text = b.to_text()
    assert text.splitlines()[0] == "W......B"
    assert Board.from_text(text) == b
    # Colors and symbols are interchangeable on the way in
    assert Board.from_rows(b.to_rows()).grid == b.grid


def test_with_cells_copies_instead_of_mutating():
    b = Board.initial()
    b2 = b.with_cells(BLACK, [(0, 0)])
    assert b.cell(0, 0) is EMPTY
    assert b2.cell(0, 0) is BLACK
    with pytest.raises(dataclasses.FrozenInstanceError):
        b.grid = b2.grid


def test_cell_out_of_bounds():
    with pytest.raises(IndexError):
        Board.initial().cell(8, 0)


def test_move_notation():
    m = Move(2, 4, BLACK)
    assert m.notation == "2E"
    assert m.position == (2, 4)
    assert str(Move(7, 0, Color.WHITE)) == "WHITE 7A"
