# othello/config.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional

from .errors import ConfigError
from .game.board import Color
from .game.heuristic import CORNER_MULTIPLIER

DEFAULT_DEPTH = 6


@dataclass(frozen=True)
class GameConfig:
    """
    Runtime settings for one game. Passed to the turn loop and the search
    as a value; toggles return a new GameConfig.
    """

    debug: bool = False
    machine: FrozenSet[Color] = field(default_factory=frozenset)
    pruning: bool = True
    depth: int = DEFAULT_DEPTH
    corner_multiplier: int = CORNER_MULTIPLIER
    time_limit: Optional[float] = None  # seconds per machine move; None = no limit

    def __post_init__(self) -> None:
        if self.time_limit is not None and self.time_limit <= 0:
            raise ConfigError(f"Time limit must be positive, got {self.time_limit}")

    def is_machine(self, player: Color) -> bool:
        return player in self.machine

    def toggle_machine(self, player: Color) -> "GameConfig":
        return replace(self, machine=self.machine ^ {player})

    def toggle_debug(self) -> "GameConfig":
        return replace(self, debug=not self.debug)

    def toggle_pruning(self) -> "GameConfig":
        return replace(self, pruning=not self.pruning)

    def with_depth(self, depth: int) -> "GameConfig":
        # Not range-checked; depth <= 0 means "evaluate the current board".
        return replace(self, depth=int(depth))
