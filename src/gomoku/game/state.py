from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from gomoku.core.board import Board
from gomoku.types import ATTACKER, Coord, Stone


@dataclass(slots=True)
class GameState:
    board: Board
    current: Stone
    last_status: str = ""
    last_move: Optional[Coord] = None

    @property
    def attacker_to_move(self) -> bool:
        return self.current == ATTACKER
