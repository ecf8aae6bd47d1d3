# othello/main.py
import argparse
import logging
import sys
from typing import Callable, Optional

from . import __version__

from .config import GameConfig, DEFAULT_DEPTH
from .errors import ConfigError, IllegalMoveError, NotationError
from .game.board import Board, Color, BLACK, WHITE
from .game.heuristic import CORNER_MULTIPLIER
from .game.outcome import final_score
from .game.rules import valid_moves
from .game.turn import TurnKind, forced_turn, human_turn, machine_turn
from .UI.console import (
    Command, announce_move, announce_pass, announce_winner, format_moves,
    parse_command, prompt_text, render_board,
)


LOG = logging.getLogger("othello")


# Setup and Helper functions
def setup_logging(verbose: bool, log_file: Optional[str] = None) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Time limit must be a number.")
    if seconds <= 0:
        raise argparse.ArgumentTypeError("Time limit must be positive.")
    return seconds


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="othello",
        description="Othello on the console - human or minimax players on either side",
    )
    p.add_argument("--verbose", action="store_true",
                   help="Enable verbose debug logging (search details included).")
    p.add_argument("--black-ai", action="store_true",
                   help="Let the computer play BLACK.")
    p.add_argument("--white-ai", action="store_true",
                   help="Let the computer play WHITE.")
    p.add_argument("--depth", type=int, default=DEFAULT_DEPTH,
                   help=f"Maximum search depth in plies (default: {DEFAULT_DEPTH}).")
    p.add_argument("--no-pruning", action="store_true",
                   help="Disable alpha-beta pruning (plain minimax).")
    p.add_argument("--corner-multiplier", type=int, default=CORNER_MULTIPLIER,
                   help=f"Corner emphasis in the board heuristic (default: {CORNER_MULTIPLIER}).")
    p.add_argument("--time-limit", type=positive_float, default=None,
                   help="Seconds per computer move; deepens iteratively up to --depth.")
    p.add_argument("--log-file", type=str, default=None,
                   help="Optional path to write logs to (in addition to stderr).")
    return p.parse_args(argv)


def config_from_args(args) -> GameConfig:
    machine = set()
    if args.black_ai:
        machine.add(BLACK)
    if args.white_ai:
        machine.add(WHITE)
    return GameConfig(
        debug=args.verbose,
        machine=frozenset(machine),
        pruning=not args.no_pruning,
        depth=args.depth,
        corner_multiplier=args.corner_multiplier,
        time_limit=args.time_limit,
    )


def apply_command(config: GameConfig, cmd: Command, player: Color) -> GameConfig:
    if cmd.name == "debug":
        config = config.toggle_debug()
        logging.getLogger("othello").setLevel(logging.DEBUG if config.debug else logging.INFO)
        print(f"Debug mode: {config.debug}")
    elif cmd.name == "ai":
        config = config.toggle_machine(player)
        print(f"{player.label} AI: {config.is_machine(player)}")
    elif cmd.name == "prune":
        config = config.toggle_pruning()
        print(f"Alpha-beta pruning: {config.pruning}")
    elif cmd.name == "depth":
        config = config.with_depth(cmd.arg)
        print(f"Search depth: {config.depth}")
    return config


# the actual game loop
def run_game(config: GameConfig, read_line: Callable[[str], str] = input,
             board: Optional[Board] = None) -> int:
    """
    One game on one terminal.
    - BLACK moves first
    - Human moves are checked against the legal list
    - A player without moves passes; when neither can move the game ends
    """
    board = board if board is not None else Board.initial()
    player = BLACK
    move_number = 1

    while True:
        render_board(board, player, move_number)

        forced = forced_turn(board, player)
        if forced is not None and forced.kind is TurnKind.GAME_OVER:
            final = final_score(forced.board)
            LOG.info("Game over after %d moves: BLACK=%d WHITE=%d",
                     move_number - 1, final.black, final.white)
            announce_winner(final)
            return 0

        moves = valid_moves(board, player)
        try:
            raw = read_line(prompt_text(player, config.is_machine(player), moves))
        except EOFError:
            LOG.info("Input closed. Exiting.")
            return 0

        try:
            cmd = parse_command(raw)
        except ConfigError as e:
            print(e)
            continue
        if cmd is not None:
            if cmd.name == "quit":
                LOG.info("User quit. Exiting.")
                return 0
            config = apply_command(config, cmd, player)
            continue

        if forced is not None:
            announce_pass(player)
            player = player.opponent
            continue

        if config.is_machine(player):
            turn = machine_turn(board, player, config)
        else:
            try:
                turn = human_turn(board, player, raw)
            except (NotationError, IllegalMoveError) as e:
                print(f"Invalid move! {e}")
                continue
            if config.debug:
                print(f"Possible moves: {format_moves(moves)}")

        announce_move(turn.move)
        board = turn.board
        player = player.opponent
        move_number += 1


# Runnable main
def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    LOG.info("Othello v%s starting…", __version__)
    return run_game(config_from_args(args))


if __name__ == "__main__":
    sys.exit(main())
