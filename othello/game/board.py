# othello/game/board.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union


class Color(str, Enum):
    BLACK = "B"
    WHITE = "W"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def label(self) -> str:
        return self.name


BLACK = Color.BLACK
WHITE = Color.WHITE

# Cell values
EMPTY = None
EMPTY_SYMBOL = "."

# Board dimensions
SIZE = 8

Cell = Optional[Color]
Grid = Tuple[Tuple[Cell, ...], ...]  # immutable (tuple-of-tuples)

COLUMNS = "ABCDEFGH"

_SYMBOL_TO_CELL = {EMPTY_SYMBOL: EMPTY, "B": BLACK, "W": WHITE}


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def cell_symbol(cell: Cell) -> str:
    return EMPTY_SYMBOL if cell is EMPTY else cell.value


def _to_cell(value: Union[str, Cell]) -> Cell:
    if value is None or isinstance(value, Color):
        return value
    if value in _SYMBOL_TO_CELL:
        return _SYMBOL_TO_CELL[value]
    raise ValueError(f"Invalid cell: {value!r}")


@dataclass(frozen=True)
class Move:
    """Attempt to place `color` at (row, column)."""

    row: int
    column: int
    color: Color

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.column

    @property
    def notation(self) -> str:
        return f"{self.row}{COLUMNS[self.column]}"

    def __str__(self) -> str:
        return f"{self.color.label} {self.notation}"


@dataclass(frozen=True)
class Board:
    """
    Immutable board wrapper around a tuple-of-tuples grid.

    Use Board.initial() to create a fresh starting position.
    Use Board.from_rows / Board.from_text for tests, and Board.to_text()
    for serialization. Every transition goes through with_cells(), which
    returns a new Board; an existing Board is never changed.
    """

    grid: Grid

    @staticmethod
    def initial() -> "Board":
        rows: List[List[Cell]] = [[EMPTY] * SIZE for _ in range(SIZE)]
        mid = SIZE // 2
        rows[mid - 1][mid - 1] = BLACK  # 3D
        rows[mid][mid] = BLACK          # 4E
        rows[mid - 1][mid] = WHITE      # 3E
        rows[mid][mid - 1] = WHITE      # 4D
        return Board(tuple(tuple(r) for r in rows))

    @staticmethod
    def from_rows(rows: Sequence[Sequence[Union[str, Cell]]]) -> "Board":
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError("Board must be 8x8")
        return Board(tuple(tuple(_to_cell(cell) for cell in rr) for rr in rows))

    @staticmethod
    def from_text(text: str) -> "Board":
        lines = [line.replace(" ", "") for line in text.strip().splitlines()]
        return Board.from_rows([list(line) for line in lines])

    def to_rows(self) -> List[List[str]]:
        return [[cell_symbol(cell) for cell in r] for r in self.grid]

    def to_text(self) -> str:
        return "\n".join("".join(r) for r in self.to_rows())

    def cell(self, r: int, c: int) -> Cell:
        if not in_bounds(r, c):
            raise IndexError("Out of bounds")
        return self.grid[r][c]

    def is_empty(self, r: int, c: int) -> bool:
        return self.cell(r, c) is EMPTY

    def occupied(self) -> int:
        return sum(cell is not EMPTY for row in self.grid for cell in row)

    def count(self, player: Color) -> int:
        return sum(cell is player for row in self.grid for cell in row)

    def counts(self) -> Tuple[int, int, int]:
        b = self.count(BLACK)
        w = self.count(WHITE)
        e = SIZE * SIZE - (b + w)
        return b, w, e

    def with_cells(self, player: Color, cells: Iterable[Tuple[int, int]]) -> "Board":
        rows = [list(r) for r in self.grid]
        for r, c in cells:
            rows[r][c] = player
        return Board(tuple(tuple(r) for r in rows))

