"""Agents and headless play."""

from gomoku.ai.heuristic_agent import HeuristicAgent
from gomoku.ai.random_agent import RandomAgent
from gomoku.core.board import Board
from gomoku.core.rules import check_winner
from gomoku.game.state import GameState
from gomoku.scripts.series_play import play_headless


def test_heuristic_agent_blocks_open_four():
    board = Board.from_stones(20, {(5, r): "W" for r in range(5, 9)})
    agent = HeuristicAgent(seed=0)
    move = agent.choose_move(GameState(board=board, current="B"))

    assert move == (5, 4)
    assert agent.last_info["reason"] == "forcing"
    assert agent.last_scores is not None
    assert agent.last_scores[4][5].forcing
    assert board.is_empty(move)  # the agent never places the stone itself


def test_heuristic_agent_plays_for_the_side_to_move():
    board = Board.from_stones(20, {(3, 3): "W", (4, 3): "W", (5, 3): "W", (12, 12): "B"})
    agent = HeuristicAgent(seed=0)
    agent.choose_move(GameState(board=board, current="W"))
    assert agent.last_info["reason"] == "attack"
    assert agent.last_info["move"] in {(2, 3), (6, 3)}


def test_seeded_agents_repeat_themselves():
    board = Board.from_stones(20, {(10, 10): "W", (10, 11): "B"})
    state = GameState(board=board, current="B")
    assert HeuristicAgent(seed=5).choose_move(state) == HeuristicAgent(seed=5).choose_move(state)


def test_random_agent_stays_next_to_stones():
    board = Board.from_stones(20, {(10, 10): "W"})
    agent = RandomAgent(seed=1)
    for _ in range(20):
        col, row = agent.choose_move(GameState(board=board, current="B"))
        assert max(abs(col - 10), abs(row - 10)) == 1


def test_random_agent_on_empty_board():
    move = RandomAgent(seed=0).choose_move(GameState(board=Board(5), current="B"))
    assert Board(5).in_bounds(move)


def test_state_turn_flag():
    state = GameState(board=Board(5), current="B")
    assert state.attacker_to_move
    state.current = "W"
    assert not state.attacker_to_move


def test_headless_game_finishes():
    outcome, stats = play_headless(HeuristicAgent(seed=1), RandomAgent(seed=2), seed_base=7, board_size=9)
    assert outcome in {"B", "W", "D"}
    assert stats["B"]["moves"] > 0
    assert stats["W"]["moves"] >= stats["B"]["moves"] - 1


def test_heuristic_self_play_reaches_a_result():
    outcome, _ = play_headless(HeuristicAgent(seed=3), HeuristicAgent(seed=4), seed_base=11, board_size=11)
    assert outcome in {"B", "W", "D"}


def test_heuristic_converts_an_open_four():
    board = Board.from_stones(20, {(c, 7): "B" for c in range(6, 10)})
    state = GameState(board=board, current="B")
    move = HeuristicAgent(seed=0).choose_move(state)
    board.place(move, "B")
    assert check_winner(board) == "B"
