from __future__ import annotations

import random
from dataclasses import dataclass, field

from gomoku.core.scoring import score_grid
from gomoku.game.state import GameState
from gomoku.types import Coord


@dataclass(slots=True)
class RandomAgent:
    """Baseline: a uniformly random point next to an existing stone."""
    name: str = "Random"
    seed: int | None = None

    rng: random.Random = field(init=False)
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def choose_move(self, state: GameState) -> Coord:
        board = state.board
        empties = board.empty_cells()
        if not empties:
            raise ValueError("No empty points left to play.")

        scores = score_grid(board, state.current)
        near = [(col, row) for (col, row) in empties if scores[row][col].is_candidate]
        move = self.rng.choice(near or empties)

        self.last_info = {"move": move, "candidates": len(near), "time_ms": 1, "reason": "random"}
        return move
