import random

import pytest

from othello.game.board import Board, Move, BLACK, WHITE, EMPTY
from othello.game.rules import (
    resolve_move, apply_move, flips_for_move, legal_moves, valid_moves,
    has_any_move, is_game_over,
)
from othello.errors import CellOccupiedError, IllegalMoveError


def _empty_rows():
    return [["."] * 8 for _ in range(8)]


def _board_where_black_must_pass() -> Board:
    """
    All WHITE except a single BLACK at (3,3) and the only EMPTY at (4,4).
    WHITE playing at (4,4) flips (3,3) along the NW ray; BLACK has nothing.
    """
    rows = [["W"] * 8 for _ in range(8)]
    rows[3][3] = "B"
    rows[4][4] = "."
    return Board.from_rows(rows)


def test_initial_legal_moves_in_row_major_order():
    b = Board.initial()
    assert [m.position for m in valid_moves(b, BLACK)] == [(2, 4), (3, 5), (4, 2), (5, 3)]
    assert [m.position for m in valid_moves(b, WHITE)] == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert all(m.color is BLACK for m in valid_moves(b, BLACK))


def test_black_2E_flips_single_white():
    b = Board.initial()
    b2, legal = resolve_move(b, Move(2, 4, BLACK))
    assert legal
    blacks = {(r, c) for r in range(8) for c in range(8) if b2.cell(r, c) is BLACK}
    whites = {(r, c) for r in range(8) for c in range(8) if b2.cell(r, c) is WHITE}
    assert blacks == {(2, 4), (3, 3), (3, 4), (4, 4)}
    assert whites == {(4, 3)}
    # The original is untouched
    assert b.cell(3, 4) is WHITE and b.cell(2, 4) is EMPTY


def test_enumerator_boards_match_applier():
    b = Board.initial()
    for move, child in legal_moves(b, WHITE):
        assert apply_move(b, move) == child


def test_illegal_move_reports_false_and_returns_input():
    b = Board.initial()
    b2, legal = resolve_move(b, Move(0, 0, BLACK))
    assert not legal
    assert b2 is b
    with pytest.raises(IllegalMoveError):
        apply_move(b, Move(0, 0, BLACK))


def test_occupied_cell_fails_fast():
    b = Board.initial()
    with pytest.raises(CellOccupiedError):
        resolve_move(b, Move(3, 3, WHITE))
    # Still an IllegalMoveError for callers that only catch that
    with pytest.raises(IllegalMoveError):
        apply_move(b, Move(4, 3, BLACK))


def test_adjacent_own_piece_does_not_count_as_bracket():
    # B at (0,1) right next to the origin: zero candidates in that direction
    rows = _empty_rows()
    rows[0][1] = "B"
    rows[1][1] = "W"
    b = Board.from_rows(rows)
    assert flips_for_move(b, Move(0, 0, BLACK)) == []
    assert not resolve_move(b, Move(0, 0, BLACK))[1]


def test_gap_or_board_edge_breaks_the_run():
    rows = _empty_rows()
    # W then a gap then B: no bracket
    rows[0][1] = "W"
    rows[0][3] = "B"
    # W run straight down to the bottom edge: no bracket
    for r in range(1, 8):
        rows[r][0] = "W"
    b = Board.from_rows(rows)
    assert flips_for_move(b, Move(0, 0, BLACK)) == []


def test_flips_collected_from_every_closing_direction():
    rows = _empty_rows()
    # Center (3,3); W neighbours in E, S and SE, each closed by B except S
    rows[3][4] = "W"; rows[3][5] = "W"; rows[3][6] = "B"   # E: 2 flips
    rows[4][4] = "W"; rows[5][5] = "B"                     # SE: 1 flip
    rows[4][3] = "W"; rows[5][3] = "."                     # S: open, no flips
    rows[2][2] = "B"                                       # NW: own piece adjacent
    b = Board.from_rows(rows)
    flips = flips_for_move(b, Move(3, 3, BLACK))
    assert sorted(flips) == [(3, 4), (3, 5), (4, 4)]
    b2 = apply_move(b, Move(3, 3, BLACK))
    assert b2.cell(4, 3) is WHITE
    assert b2.count(BLACK) == 3 + 1 + 3
    assert b2.count(WHITE) == 1


def test_forced_pass_board():
    b = _board_where_black_must_pass()
    assert not has_any_move(b, BLACK)
    assert valid_moves(b, BLACK) == []
    assert has_any_move(b, WHITE)
    assert [m.position for m in valid_moves(b, WHITE)] == [(4, 4)]
    assert not is_game_over(b)
    b2 = apply_move(b, Move(4, 4, WHITE))
    assert b2.count(WHITE) == 64
    assert is_game_over(b2)


def test_game_over_when_nobody_can_move():
    rows = _empty_rows()
    rows[0][0] = "B"
    rows[7][7] = "B"
    b = Board.from_rows(rows)
    assert is_game_over(b)


def test_piece_count_grows_by_one_plus_flips_over_random_games():
    rng = random.Random(4500)
    for _ in range(5):
        board, player = Board.initial(), BLACK
        while not is_game_over(board):
            options = legal_moves(board, player)
            if not options:
                player = player.opponent
                continue
            for move, child in options:
                flipped = len(flips_for_move(board, move))
                assert flipped >= 1
                assert child.occupied() == board.occupied() + 1
                assert child.count(player) == board.count(player) + 1 + flipped
                assert child.count(player.opponent) == board.count(player.opponent) - flipped
            _, board = rng.choice(options)
            player = player.opponent
