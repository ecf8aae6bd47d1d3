# othello/game/rules.py
from __future__ import annotations
from typing import List, Tuple
from .board import (
    Board,
    BLACK,
    WHITE,
    SIZE,
    Color,
    Move,
    in_bounds,
)
from ..errors import CellOccupiedError, IllegalMoveError

# Directions: N, NE, E, SE, S, SW, W, NW
DIRS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)


def _line_flips(board: Board, player: Color, r: int, c: int, dr: int, dc: int) -> List[Tuple[int, int]]:
    """
    If placing at (r,c) brackets opponent stones along (dr,dc),
    return list of coordinates to flip along that ray; else [].
    """
    flips: List[Tuple[int, int]] = []
    opp = player.opponent

    # Step off the origin before looking at anything
    rr, cc = r + dr, c + dc
    while in_bounds(rr, cc):
        cell = board.cell(rr, cc)
        if cell is opp:
            flips.append((rr, cc))
        elif cell is player:
            return flips  # bracketed; empty when our own stone is adjacent
        else:  # EMPTY
            return []
        rr += dr
        cc += dc
    return []  # ran off board without closing bracket


def flips_for_move(board: Board, move: Move) -> List[Tuple[int, int]]:
    """
    Returns list of all stones to flip if move.color plays at the move's
    cell, or [] if illegal. The target cell must be empty.
    """
    r, c = move.position
    if not in_bounds(r, c):
        raise IllegalMoveError(f"Move off the board: {(r, c)}")
    if not board.is_empty(r, c):
        raise CellOccupiedError(f"Cell {move.notation} is already occupied")
    flips: List[Tuple[int, int]] = []
    for dr, dc in DIRS:
        flips.extend(_line_flips(board, move.color, r, c, dr, dc))
    return flips


def resolve_move(board: Board, move: Move) -> Tuple[Board, bool]:
    """
    Returns (new_board, legal). When legal, new_board has the placed stone
    and every bracketed opponent stone turned to move.color. When not legal
    the input board comes back untouched and must not be committed.
    """
    flips = flips_for_move(board, move)
    if not flips:
        return board, False
    return board.with_cells(move.color, [move.position, *flips]), True


def apply_move(board: Board, move: Move) -> Board:
    """
    Returns a NEW Board with the move applied (pure/immutable).
    Raises IllegalMoveError if the move is not legal.
    """
    new_board, legal = resolve_move(board, move)
    if not legal:
        raise IllegalMoveError(f"Illegal move for {move.color.label} at {move.notation}")
    return new_board


def legal_moves(board: Board, player: Color) -> List[Tuple[Move, Board]]:
    """
    Every legal move for `player` paired with the board it produces,
    in row-major order. Empty when the player has to pass.
    """
    out: List[Tuple[Move, Board]] = []
    for r in range(SIZE):
        for c in range(SIZE):
            if not board.is_empty(r, c):
                continue
            move = Move(r, c, player)
            new_board, legal = resolve_move(board, move)
            if legal:
                out.append((move, new_board))
    return out


def valid_moves(board: Board, player: Color) -> List[Move]:
    return [move for move, _ in legal_moves(board, player)]


def has_any_move(board: Board, player: Color) -> bool:
    for r in range(SIZE):
        for c in range(SIZE):
            if board.is_empty(r, c) and flips_for_move(board, Move(r, c, player)):
                return True
    return False


def is_game_over(board: Board) -> bool:
    """
    In Othello, the game ends when neither player has a legal move.
    A full board is covered by this too.
    """
    return not (has_any_move(board, BLACK) or has_any_move(board, WHITE))
