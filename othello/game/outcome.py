# othello/game/outcome.py
from __future__ import annotations
from typing import Optional

from .board import Board, Color, BLACK, WHITE
from .heuristic import Score, score


def final_score(board: Board) -> Score:
    """Raw piece counts, no positional weighting."""
    return score(board, weighted=False)


def winner(board: Board) -> Optional[Color]:
    """
    Color with more pieces on the board, or None for a draw.
    """
    s = final_score(board)
    if s.black == s.white:
        return None
    return BLACK if s.black > s.white else WHITE
