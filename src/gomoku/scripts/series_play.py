from __future__ import annotations

import random
from typing import Dict, Tuple

from gomoku.core.board import Board
from gomoku.core.rules import game_outcome
from gomoku.game.state import GameState
from gomoku.types import ATTACKER, DEFENDER, other

from .series_types import Agg

# Outcome codes: "B" / "W" for the winning colour, "D" for a draw.
SideStats = Dict[str, int]


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if rng is not None:
        rng.seed(seed)


def play_headless(
    agent_b, agent_w, seed_base: int = 0, board_size: int | None = None, opening_moves: int = 1
) -> Tuple[str, Dict[str, SideStats]]:
    """
    Play one game without rendering. `opening_moves` random stones go down
    near the centre first (White, then alternating); play then continues
    with whichever colour is next.
    """
    board = Board(board_size) if board_size else Board()
    state = GameState(board=board, current=DEFENDER)
    stats = {
        ATTACKER: {"moves": 0, "time_ms": 0, "forcing": 0},
        DEFENDER: {"moves": 0, "time_ms": 0, "forcing": 0},
    }

    seed_agent(agent_b, seed_base + 101)
    seed_agent(agent_w, seed_base + 202)

    rng = random.Random(seed_base)
    mid = board.size // 2
    for _ in range(opening_moves):
        near = [
            (col, row)
            for row in range(mid - 2, mid + 3)
            for col in range(mid - 2, mid + 3)
            if board.in_bounds((col, row)) and board.is_empty((col, row))
        ]
        move = rng.choice(near)
        board.place(move, state.current)
        state.last_move = move
        state.current = other(state.current)

    while True:
        if state.last_move is not None:
            outcome = game_outcome(board, state.last_move)
            if outcome == "attacker_won":
                return ATTACKER, stats
            if outcome == "defender_won":
                return DEFENDER, stats
            if outcome == "draw":
                return "D", stats

        agent = agent_b if state.current == ATTACKER else agent_w
        move = agent.choose_move(state)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        if info.get("reason") == "forcing":
            side_stats["forcing"] += 1

        board.place(move, state.current)
        state.last_move = move
        state.current = other(state.current)


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_black: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == ATTACKER and a_is_black) or (outcome == DEFENDER and not a_is_black)
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def add_stats(agg: Agg, side: SideStats) -> None:
    agg.moves += side["moves"]
    agg.time_ms += side["time_ms"]
    agg.forcing += side["forcing"]


def run_pairing(args):
    """Worker entry point: play every game of one pairing, alternating colours."""
    (a_name, b_name, a_make, b_make, games, base_seed, board_size) = args
    out = []
    for g in range(games):
        if g % 2 == 0:
            outcome, stats = play_headless(a_make(), b_make(), seed_base=base_seed + g, board_size=board_size)
            out.append((a_name, b_name, True, outcome, stats))
        else:
            outcome, stats = play_headless(b_make(), a_make(), seed_base=base_seed + g, board_size=board_size)
            out.append((a_name, b_name, False, outcome, stats))
    return out
