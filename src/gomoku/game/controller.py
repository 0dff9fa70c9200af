from __future__ import annotations

import logging
from typing import List, Optional

from gomoku.ai.base import Agent
from gomoku.config import BOARD_SIZE, HUMAN_FIRST, SHOW_SCORES
from gomoku.core.board import Board
from gomoku.core.rules import game_outcome, winner_at
from gomoku.core.scoring import ScoreGrid
from gomoku.game.state import GameState
from gomoku.types import ATTACKER, DEFENDER, Coord, Outcome, Stone, other
from gomoku.ui.effects import ai_thinking
from gomoku.ui.prompts import format_coord, parse_move
from gomoku.ui.render import render

log = logging.getLogger(__name__)

STONE_NAMES = {ATTACKER: "Black", DEFENDER: "White"}


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_b: Agent, agent_w: Agent, current: Stone) -> str:
    b_name = _agent_name(agent_b, "Black")
    w_name = _agent_name(agent_w, "White")

    header = f"Black: {b_name} | White: {w_name} | Turn: {STONE_NAMES[current]}"
    if status:
        return f"{header}\n{status}"
    return header


def _final_status(outcome: Outcome) -> str:
    if outcome == "attacker_won":
        return "Black wins!"
    if outcome == "defender_won":
        return "White wins!"
    return "Draw game."


def run_game(
    agent_b: Agent,
    agent_w: Agent,
    show_thinking: bool = True,
    show_scores: bool = SHOW_SCORES,
    first: Stone = DEFENDER if HUMAN_FIRST else ATTACKER,
    board_size: int = BOARD_SIZE,
) -> Optional[Outcome]:
    """
    Play one interactive game. The controller owns the board; agents only
    ever receive the state and return a point. Returns the outcome, or None
    if a human quit.
    """
    state = GameState(board=Board(board_size), current=first, last_status=f"{STONE_NAMES[first]} starts.")
    winning_line: Optional[List[Coord]] = None
    scores: Optional[ScoreGrid] = None

    while True:
        render(
            state.board,
            _status_with_agents(state.last_status, agent_b, agent_w, state.current),
            highlight=winning_line,
            scores=scores if show_scores else None,
        )

        if state.last_move is not None:
            outcome = game_outcome(state.board, state.last_move)
            if outcome != "in_progress":
                w = winner_at(state.board, state.last_move)
                winning_line = w[1] if w else None
                render(
                    state.board,
                    _status_with_agents(_final_status(outcome), agent_b, agent_w, state.current),
                    highlight=winning_line,
                )
                log.info("game over: %s after %s", outcome, format_coord(state.last_move))
                return outcome

        current_agent = agent_b if state.current == ATTACKER else agent_w

        try:
            if current_agent.name == "Human":
                raw = input(f"{STONE_NAMES[state.current]} move: ")
                move = parse_move(raw, state.board.size)
                if move is None:
                    render(
                        state.board,
                        _status_with_agents("Game quit.", agent_b, agent_w, state.current),
                    )
                    return None

                state.last_status = f"{STONE_NAMES[state.current]} played {format_coord(move)}"

            else:
                if show_thinking:
                    ai_thinking(f"{current_agent.name}")

                move = current_agent.choose_move(state)
                scores = getattr(current_agent, "last_scores", None)

                info = getattr(current_agent, "last_info", None)
                if info:
                    state.last_status = (
                        f"{current_agent.name} played {format_coord(move)} | "
                        f"{info.get('reason')} | "
                        f"eval={info.get('eval')} | "
                        f"candidates={info.get('candidates')} | "
                        f"{info.get('time_ms')}ms"
                    )
                else:
                    state.last_status = f"{current_agent.name} played {format_coord(move)}"

            # Apply the move (works for BOTH human and AI)
            state.board.place(move, state.current)
            state.last_move = move
            state.current = other(state.current)
            state.last_status += f" | Next: {STONE_NAMES[state.current]}"

        except ValueError as e:
            state.last_status = str(e)
