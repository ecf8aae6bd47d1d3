# othello/game/search.py
from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING, NamedTuple, Optional

from .board import Board, Color, Move
from .heuristic import CORNER_MULTIPLIER, signed_value
from .rules import legal_moves
from ..errors import SearchTimeout

if TYPE_CHECKING:
    from ..config import GameConfig

LOG = logging.getLogger("othello.search")


class SearchResult(NamedTuple):
    value: int
    board: Board
    nodes: int


class Choice(NamedTuple):
    move: Move
    result: SearchResult


def minimax(board: Board, depth: int, maximizing: bool, root_color: Color,
            alpha: float = -math.inf, beta: float = math.inf, *,
            pruning: bool = True,
            corner_multiplier: int = CORNER_MULTIPLIER,
            deadline: Optional[float] = None) -> SearchResult:
    """
    Depth-limited minimax over legal moves, optionally with alpha-beta.

    One call is one ply. The side to move is root_color on maximizing plies
    and its opponent on minimizing ones. Leaves (depth <= 0, or the side to
    move has no legal move) score the board from root_color's view with
    positional weighting. The returned board is the chosen child, or the
    input board at a leaf.

    Only strictly better children replace the running best, so ties go to
    the earliest move in row-major order and pruning never changes the
    value or board returned from a full (-inf, inf) window.

    deadline is a time.perf_counter() instant checked before each child;
    SearchTimeout is raised once it has passed.
    """
    player = root_color if maximizing else root_color.opponent
    children = legal_moves(board, player) if depth > 0 else []
    if not children:
        return SearchResult(signed_value(board, root_color, corner_multiplier), board, 1)

    best_val = -math.inf if maximizing else math.inf
    best_board = board
    nodes = 1

    for _, child in children:
        if deadline is not None and time.perf_counter() >= deadline:
            raise SearchTimeout(f"deadline passed at depth {depth}")
        val, _, child_nodes = minimax(
            child, depth - 1, not maximizing, root_color, alpha, beta,
            pruning=pruning, corner_multiplier=corner_multiplier, deadline=deadline,
        )
        nodes += child_nodes
        if maximizing:
            if val > best_val:
                best_val, best_board = val, child
            if pruning and best_val > alpha:
                alpha = best_val
        else:
            if val < best_val:
                best_val, best_board = val, child
            if pruning and best_val < beta:
                beta = best_val
        if pruning and beta <= alpha:
            break

    return SearchResult(best_val, best_board, nodes)


def _search(board: Board, player: Color, config: "GameConfig", depth: int,
            deadline: Optional[float]) -> SearchResult:
    return minimax(board, depth, True, player,
                   pruning=config.pruning,
                   corner_multiplier=config.corner_multiplier,
                   deadline=deadline)


def choose_move(board: Board, player: Color, config: "GameConfig") -> Optional[Choice]:
    """
    Pick a move for a machine-controlled player.

    Without a time limit this is one search at config.depth. With one, the
    search deepens from 1 up to config.depth and keeps the deepest result
    that finished before the deadline. Returns None when player must pass.
    """
    moves = legal_moves(board, player)
    if not moves:
        return None
    log = LOG.info if config.debug else LOG.debug

    if config.time_limit is None:
        result = _search(board, player, config, config.depth, None)
    else:
        deadline = time.perf_counter() + config.time_limit
        result = None
        for d in range(1, max(config.depth, 0) + 1):
            try:
                result = _search(board, player, config, d, deadline)
            except SearchTimeout:
                LOG.debug("Depth %d abandoned: time limit %.2fs reached", d, config.time_limit)
                break
            log("Depth %d done: value=%s nodes=%d", d, result.value, result.nodes)
        if result is None:
            if config.depth > 0:
                LOG.warning("No search finished within %.2fs; playing first legal move", config.time_limit)
            _, first_board = moves[0]
            result = SearchResult(signed_value(first_board, player, config.corner_multiplier), first_board, 1)

    move = next((m for m, b in moves if b == result.board), None)
    if move is None:
        # depth <= 0: the search only scored the current board
        move, child = moves[0]
        result = result._replace(board=child)

    log("%s searched depth=%d pruning=%s: %s value=%s nodes=%d",
        player.label, config.depth, config.pruning, move.notation, result.value, result.nodes)
    return Choice(move, result)
