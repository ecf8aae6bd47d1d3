# othello/game/turn.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .board import Board, Color, Move
from .rules import has_any_move, legal_moves
from .search import SearchResult, choose_move
from ..errors import IllegalMoveError
from ..notation import parse_move

if TYPE_CHECKING:
    from ..config import GameConfig

LOG = logging.getLogger("othello.turn")


class TurnKind(Enum):
    MOVE = "move"
    PASS = "pass"
    GAME_OVER = "game over"


@dataclass(frozen=True)
class Turn:
    """What happened on one player's turn and the board to carry forward."""

    kind: TurnKind
    color: Color
    board: Board
    move: Optional[Move] = None
    result: Optional[SearchResult] = None


def forced_turn(board: Board, color: Color) -> Optional[Turn]:
    """
    Turn outcome that needs no input: GAME_OVER when neither side can move,
    PASS when only the opponent can. None when color has a move to make.
    """
    if has_any_move(board, color):
        return None
    if not has_any_move(board, color.opponent):
        return Turn(TurnKind.GAME_OVER, color, board)
    LOG.debug("%s has no legal move and passes", color.label)
    return Turn(TurnKind.PASS, color, board)


def human_turn(board: Board, color: Color, text: str) -> Turn:
    """
    Match typed move text against the legal moves.
    Raises NotationError / IllegalMoveError; board is left as it was.
    """
    row, col = parse_move(text)
    for move, child in legal_moves(board, color):
        if move.position == (row, col):
            return Turn(TurnKind.MOVE, color, child, move)
    raise IllegalMoveError(f"{text.strip().upper()} is not a legal move for {color.label}")


def machine_turn(board: Board, color: Color, config: "GameConfig") -> Turn:
    choice = choose_move(board, color, config)
    if choice is None:
        # no legal move: pass or game over
        return forced_turn(board, color)
    return Turn(TurnKind.MOVE, color, choice.result.board, choice.move, choice.result)
