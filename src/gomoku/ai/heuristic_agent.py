from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Optional

from gomoku.ai.selector import select_move
from gomoku.core.scoring import ScoreGrid
from gomoku.game.state import GameState
from gomoku.types import Coord


@dataclass(slots=True)
class HeuristicAgent:
    """
    Single-pass attack/defense scorer.
    Knobs:
      - seed: RNG seed for the tie-break between equally scored points
              (None => fresh entropy every game)
    After each move `last_info` holds the decision summary and `last_scores`
    the full per-point score grid (for the debug overlay).
    """
    name: str = "Heuristic"
    seed: Optional[int] = None

    rng: random.Random = field(init=False)
    last_info: dict = field(default_factory=dict)
    last_scores: Optional[ScoreGrid] = None

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def choose_move(self, state: GameState) -> Coord:
        start = time.perf_counter()
        sel = select_move(state.board.snapshot(), self.rng, state.current)
        elapsed = time.perf_counter() - start

        candidates = sum(
            1 for line in sel.scores for s in line if s is not None and s.is_candidate
        )
        self.last_scores = sel.scores
        self.last_info = {
            "move": sel.move,
            "reason": sel.reason,
            "eval": sel.value,
            "candidates": candidates,
            "time_ms": max(1, int(elapsed * 1000)),
            "seed": self.seed,
        }
        return sel.move
