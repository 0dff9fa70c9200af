from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from gomoku.core.board import BoardLike
from gomoku.core.scoring import ScoreGrid, score_grid
from gomoku.types import ATTACKER, Coord, Stone

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Selection:
    move: Coord
    scores: ScoreGrid
    reason: str   # "forcing" | "attack" | "defense" | "opening"
    value: int


def _opening_move(board: BoardLike) -> Coord:
    # Nothing on the board touches an empty point: take the empty point closest to the centre.
    center = (board.size - 1) / 2
    return min(
        board.empty_cells(),
        key=lambda c: (abs(c[0] - center) + abs(c[1] - center), c[1], c[0]),
    )


def select_move(board: BoardLike, rng: Optional[random.Random] = None, me: Stone = ATTACKER) -> Selection:
    """
    Pick a point for `me` from one pass of the cell evaluator.

    1) The first forcing point in row-major order wins outright.
    2) Otherwise compare the best attack with the best defense; the larger
       category wins, attack on a tie, and the move is drawn uniformly from
       the points tied at that maximum.
    """
    if board.is_full():
        raise ValueError("No empty points left to play.")

    rng = rng if rng is not None else random.Random()
    snap = board.snapshot()
    scores = score_grid(snap, me)

    best_attack = 0
    best_defense = 0
    attack_cells: List[Coord] = []
    defense_cells: List[Coord] = []

    for row in range(snap.size):
        for col in range(snap.size):
            s = scores[row][col]
            if s is None or not s.is_candidate:
                continue

            if s.forcing:
                log.debug("forcing point %s (%s)", (col, row), s)
                return Selection((col, row), scores, "forcing", s.best)

            if s.attack > best_attack:
                best_attack = s.attack
                attack_cells = [(col, row)]
            elif s.attack == best_attack and s.attack > 0:
                attack_cells.append((col, row))

            if s.defense > best_defense:
                best_defense = s.defense
                defense_cells = [(col, row)]
            elif s.defense == best_defense and s.defense > 0:
                defense_cells.append((col, row))

    if best_defense > best_attack:
        move = rng.choice(defense_cells)
        log.debug("defense %d over attack %d, %d tied -> %s", best_defense, best_attack, len(defense_cells), move)
        return Selection(move, scores, "defense", best_defense)

    if best_attack > 0:
        move = rng.choice(attack_cells)
        log.debug("attack %d vs defense %d, %d tied -> %s", best_attack, best_defense, len(attack_cells), move)
        return Selection(move, scores, "attack", best_attack)

    move = _opening_move(snap)
    log.debug("no scored points, opening at %s", move)
    return Selection(move, scores, "opening", 0)


def evaluate_and_choose(
    board: BoardLike, rng: Optional[random.Random] = None, me: Stone = ATTACKER
) -> Tuple[Coord, ScoreGrid]:
    sel = select_move(board, rng, me)
    return sel.move, sel.scores
