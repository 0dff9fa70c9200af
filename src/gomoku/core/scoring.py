from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from gomoku.config import FORCING_SCORE, STEP_SCORE
from gomoku.core.board import BoardLike
from gomoku.core.geometry import DIRECTIONS, Direction, neg, step
from gomoku.types import ATTACKER, Coord, Stone


@dataclass(frozen=True, slots=True)
class CellScore:
    attack: int = 0
    defense: int = 0
    forcing: bool = False

    @property
    def is_candidate(self) -> bool:
        return self.attack > 0 or self.defense > 0 or self.forcing

    @property
    def best(self) -> int:
        return max(self.attack, self.defense)


ZERO = CellScore()

ScoreGrid = List[List[Optional[CellScore]]]  # [row][col], None on occupied points


def _walk(
    board: BoardLike, origin: Coord, d: Direction, friendly: Stone, step_score: int
) -> Tuple[int, int]:
    """
    Walk outward from `origin` along `d` over occupied points.
    Returns (score, penalty): +step_score per friendly stone, penalty 1 if the
    walk is stopped by an opposing stone, or runs off the board after covering
    at least one stone. An empty point ends the walk with no penalty.
    """
    score = 0
    k = 1
    while True:
        c = step(origin, d, k)
        if not board.in_bounds(c):
            return score, (1 if k > 1 else 0)
        p = board.get(c)
        if p is None:
            return score, 0
        if p != friendly:
            return score, 1
        score += step_score
        k += 1


def _direction_score(
    board: BoardLike, coord: Coord, d: Direction, me: Stone, step_score: int, forcing_at: int
) -> Optional[CellScore]:
    first = step(coord, d)
    if not board.in_bounds(first):
        return None
    friendly = board.get(first)
    if friendly is None:
        return None

    total = 0
    penalty = 0
    forcing = False
    for sd in (d, neg(d)):
        s, p = _walk(board, coord, sd, friendly, step_score)
        total += s
        penalty += p
        if s >= forcing_at:
            forcing = True

    value = total // (1 + penalty)
    if friendly == me:
        return CellScore(attack=value, forcing=forcing)
    return CellScore(defense=value, forcing=forcing)


def evaluate_cell(
    board: BoardLike,
    coord: Coord,
    me: Stone = ATTACKER,
    *,
    step_score: int = STEP_SCORE,
    forcing_at: int = FORCING_SCORE,
) -> CellScore:
    """
    Score an empty point for the player `me`.

    Every occupied neighbour picks a line through the point. Stones of `me`
    along that line count towards attack, opposing stones towards defense.
    Lines capped by the other colour or the board edge are divided down by
    the number of capped ends. Only the best line in each category counts.
    """
    if board.get(coord) is not None:
        raise ValueError(f"Cannot score occupied point {coord}.")

    attack = 0
    defense = 0
    forcing = False
    for d in DIRECTIONS:
        cand = _direction_score(board, coord, d, me, step_score, forcing_at)
        if cand is None:
            continue
        attack = max(attack, cand.attack)
        defense = max(defense, cand.defense)
        forcing = forcing or cand.forcing

    if not (attack or defense or forcing):
        return ZERO
    return CellScore(attack, defense, forcing)


def score_grid(board: BoardLike, me: Stone = ATTACKER) -> ScoreGrid:
    grid: ScoreGrid = [[None for _ in range(board.size)] for _ in range(board.size)]
    for col, row in board.empty_cells():
        grid[row][col] = evaluate_cell(board, (col, row), me)
    return grid
