# src/gomoku/types.py

from __future__ import annotations
from typing import Literal, Optional, Tuple

Stone = Literal["B", "W"]
Cell = Optional[Stone]
Coord = Tuple[int, int]   # (col, row)

Outcome = Literal["in_progress", "attacker_won", "defender_won", "draw"]

ATTACKER: Stone = "B"   # automated player
DEFENDER: Stone = "W"   # human player


def other(stone: Stone) -> Stone:
    return "W" if stone == "B" else "B"
