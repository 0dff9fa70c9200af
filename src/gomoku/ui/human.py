from __future__ import annotations

from gomoku.game.state import GameState
from gomoku.types import Coord


class HumanAgent:
    name = "Human"

    def choose_move(self, state: GameState) -> Coord:
        raise RuntimeError("HumanAgent.choose_move should never be called.")
