# othello/game/heuristic.py
from __future__ import annotations

from typing import NamedTuple

from .board import Board, Color, SIZE, BLACK, WHITE

# Corner emphasis; a corner scores CORNER_MULTIPLIER + 1 on top of the piece.
CORNER_MULTIPLIER = 4

_LAST = SIZE - 1


class Score(NamedTuple):
    white: int
    black: int

    def of(self, player: Color) -> int:
        return self.black if player is BLACK else self.white


def positional_bonus(r: int, c: int, corner_multiplier: int = CORNER_MULTIPLIER) -> int:
    """
    Extra value of a piece at (r, c): 1 on the top/bottom edge, and on the
    left/right edge the running bonus is scaled by corner_multiplier plus 1.
    Corners end up at corner_multiplier + 1, other edges at 1.
    """
    bonus = 0
    if r in (0, _LAST):
        bonus += 1
    if c in (0, _LAST):
        bonus *= corner_multiplier
        bonus += 1
    return bonus


def score(board: Board, weighted: bool = False,
          corner_multiplier: int = CORNER_MULTIPLIER) -> Score:
    """
    Returns Score(white, black). Unweighted this is the raw piece count.
    """
    white = black = 0
    for r, row in enumerate(board.grid):
        for c, cell in enumerate(row):
            if cell is None:
                continue
            value = 1 + (positional_bonus(r, c, corner_multiplier) if weighted else 0)
            if cell is WHITE:
                white += value
            else:
                black += value
    return Score(white, black)


def signed_value(board: Board, player: Color,
                 corner_multiplier: int = CORNER_MULTIPLIER) -> int:
    """Weighted advantage of `player` over its opponent."""
    s = score(board, weighted=True, corner_multiplier=corner_multiplier)
    return s.of(player) - s.of(player.opponent)
