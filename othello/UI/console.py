# othello/UI/console.py
from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from ..errors import ConfigError
from ..game.board import Board, Color, Move, COLUMNS, SIZE
from ..game.heuristic import Score
from ..notation import format_move

# Glyphs for empty / black / white cells
GLYPHS = {None: "□", Color.BLACK: "○", Color.WHITE: "●"}

COMMANDS = ("debug", "ai", "prune", "depth", "quit")
_ALIASES = {"1": "debug", "2": "ai", "3": "prune", "q": "quit", "exit": "quit"}


class Command(NamedTuple):
    name: str
    arg: Optional[int] = None


def render_board(board: Board, player_to_move: Color, move_number: int) -> None:
    b, w, e = board.counts()

    # Header
    print()
    print("=" * 40)
    print(f" Move #{move_number} - {player_to_move.label} to move")
    print(f" Score: BLACK={b}  WHITE={w}  Empty={e}")
    print("   " + " ".join(COLUMNS))

    for r in range(SIZE):
        line = " ".join(GLYPHS[cell] for cell in board.grid[r])
        print(f" {r} {line}")
    print("=" * 40)


def format_moves(moves: Sequence[Move]) -> str:
    """Human-friendly listing in row-then-column notation."""
    return ", ".join(format_move(m.row, m.column) for m in moves)


def parse_command(raw: str) -> Optional[Command]:
    """
    Recognise a settings command. Returns None when `raw` is not a command
    (the caller then treats it as a move). 'depth' needs an integer
    argument; anything else raises ConfigError.
    """
    parts = raw.strip().lower().split()
    if not parts:
        return None
    name = _ALIASES.get(parts[0], parts[0])
    if name not in COMMANDS:
        return None
    if name == "depth":
        if len(parts) != 2:
            raise ConfigError("Usage: depth <integer>")
        try:
            return Command(name, int(parts[1]))
        except ValueError:
            raise ConfigError(f"Depth must be an integer, got {parts[1]!r}")
    return Command(name)


def prompt_text(player: Color, is_machine: bool, moves: Sequence[Move]) -> str:
    if not moves:
        return f"{player.label}: no moves possible. Press enter to forfeit turn.\n> "
    if is_machine:
        return f"{player.label} AI: press enter to let the computer move.\n> "
    return (f"{player.label} legal moves: {format_moves(moves)}\n"
            "Enter a move like 2E (or E2). Commands: debug, ai, prune, depth N, quit\n> ")


def announce_pass(player: Color) -> None:
    print(f"-> {player.label} has no legal moves and PASSES.")


def announce_move(move: Move) -> None:
    print(f"-> {move.color.label} plays {move.notation}")


def announce_winner(final: Score) -> None:
    print()
    print("#" * 40)
    if final.black > final.white:
        print(f"FINAL: BLACK wins {final.black}-{final.white}")
    elif final.white > final.black:
        print(f"FINAL: WHITE wins {final.white}-{final.black}")
    else:
        print(f"FINAL: DRAW {final.black}-{final.white}")
    print("#" * 40)
