from __future__ import annotations
from typing import Protocol

from gomoku.game.state import GameState
from gomoku.types import Coord


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Coord:
        ...
