from __future__ import annotations
import re
import string
from typing import Optional

from gomoku.types import Coord

COL_LABELS = string.ascii_uppercase

_LETTER_FORM = re.compile(r"^([a-z])\s*(\d+)$")
_NUMBER_FORM = re.compile(r"^(\d+)[\s,]+(\d+)$")


def col_label(col: int) -> str:
    return COL_LABELS[col]


def format_coord(coord: Coord) -> str:
    return f"{col_label(coord[0])}{coord[1] + 1}"


def parse_move(raw: str, size: int) -> Optional[Coord]:
    """
    Accepts "K10" (column letter, row number) or "11 10" (column, row), both
    1-based as printed around the board. Returns None when the player quits.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None

    m = _LETTER_FORM.match(s)
    if m:
        col = ord(m.group(1)) - ord("a")
        row = int(m.group(2)) - 1
    else:
        m = _NUMBER_FORM.match(s)
        if not m:
            raise ValueError("Invalid input. Enter a point like K10 or '11 10', or q.")
        col = int(m.group(1)) - 1
        row = int(m.group(2)) - 1

    if not (0 <= col < size and 0 <= row < size):
        last = format_coord((size - 1, size - 1))
        raise ValueError(f"Point must be between A1 and {last}.")
    return (col, row)
