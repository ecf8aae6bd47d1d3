#   othello/notation.py

from __future__ import annotations

import re
from typing import Tuple

from .errors import NotationError
from .game.board import COLUMNS, SIZE

# Rows are digits, columns are letters; both 0-based on the board
ROW_MIN = 0
ROW_MAX = SIZE - 1

# Precompiled patterns: "2E" (row first) or "E2" (column first)
_RE_ROW_COL = re.compile(r"^([0-9])([A-Z])$")
_RE_COL_ROW = re.compile(r"^([A-Z])([0-9])$")


def format_move(row: int, col: int) -> str:
    """Return 'rC', e.g. (2, 4) -> '2E'."""
    _validate_coord(row, col)
    return f"{row}{COLUMNS[col]}"


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse '2E' or 'E2' (any case, surrounding whitespace ignored) into
    0-based (row, col). Raise NotationError if malformed or off the board.
    """
    s = text.strip().upper()
    m = _RE_ROW_COL.match(s)
    if m:
        row_s, col_s = m.group(1), m.group(2)
    else:
        m = _RE_COL_ROW.match(s)
        if not m:
            raise NotationError(f"Malformed move: {text!r}")
        col_s, row_s = m.group(1), m.group(2)
    if col_s not in COLUMNS:
        raise NotationError(f"Column must be A..H: {text!r}")
    row, col = int(row_s), COLUMNS.index(col_s)
    _validate_coord(row, col)
    return row, col


# Internal validators
def _validate_coord(row: int, col: int) -> None:
    if not (ROW_MIN <= row <= ROW_MAX and 0 <= col < len(COLUMNS)):
        raise NotationError(f"Row/col out of bounds (0..7): {(row, col)}")
