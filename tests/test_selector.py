"""Move selector: forcing override, attack/defense comparison, random tie-breaks."""

import random

import pytest

from gomoku.ai.selector import evaluate_and_choose, select_move
from gomoku.core.board import Board


def test_two_stone_board_picks_best_attack_point():
    b = Board.from_stones(20, {(10, 10): "W", (10, 11): "B"})
    sel = select_move(b, random.Random(3))

    # Six side points score attack 10 and defense 10; attack wins the tie.
    best_attack = {(9, 10), (11, 10), (9, 11), (11, 11), (9, 12), (11, 12)}
    assert sel.reason == "attack"
    assert sel.move in best_attack

    col, row = sel.move
    chosen = sel.scores[row][col]
    top_attack = max(s.attack for line in sel.scores for s in line if s is not None)
    top_defense = max(s.defense for line in sel.scores for s in line if s is not None)
    assert chosen.attack == top_attack
    assert top_attack >= top_defense


def test_tie_break_covers_all_tied_points():
    b = Board.from_stones(20, {(10, 10): "W", (10, 11): "B"})
    rng = random.Random(0)
    picks = {evaluate_and_choose(b, rng)[0] for _ in range(200)}
    assert picks == {(9, 10), (11, 10), (9, 11), (11, 11), (9, 12), (11, 12)}


def test_same_seed_same_move():
    b = Board.from_stones(20, {(10, 10): "W", (10, 11): "B", (11, 12): "W"})
    m1, _ = evaluate_and_choose(b, random.Random(42))
    m2, _ = evaluate_and_choose(b, random.Random(42))
    assert m1 == m2


def test_open_four_is_completed():
    b = Board.from_stones(20, {(5, r): "B" for r in range(5, 9)})
    for seed in range(10):
        move, _ = evaluate_and_choose(b, random.Random(seed))
        assert move in {(5, 4), (5, 9)}


def test_forcing_beats_a_larger_attack_elsewhere():
    stones = {(5, r): "B" for r in range(5, 9)}
    stones[(5, 9)] = "W"  # capped four: forcing point (5, 4) only worth 20
    stones.update({(12, 2): "B", (13, 2): "B", (14, 2): "B"})  # open three worth 30, scanned first
    b = Board.from_stones(20, stones)

    sel = select_move(b, random.Random(1))
    assert sel.reason == "forcing"
    assert sel.move == (5, 4)
    assert sel.scores[2][11].attack == 30


def test_first_forcing_point_in_row_major_order_wins():
    stones = {(c, 12): "W" for c in range(3, 7)}   # white four on row 12
    stones.update({(15, r): "B" for r in range(4, 8)})  # black four, ends on rows 3 and 8
    b = Board.from_stones(20, stones)
    move, _ = evaluate_and_choose(b, random.Random(0))
    assert move == (15, 3)


def test_must_block_opponent_four():
    b = Board.from_stones(20, {(5, r): "W" for r in range(5, 9)})
    sel = select_move(b, random.Random(0))
    assert sel.reason == "forcing"
    assert sel.move == (5, 4)


def test_defense_wins_when_larger():
    b = Board.from_stones(20, {(5, 5): "W", (6, 5): "W", (7, 5): "W", (15, 15): "B"})
    for seed in range(5):
        sel = select_move(b, random.Random(seed))
        assert sel.reason == "defense"
        assert sel.move in {(4, 5), (8, 5)}
        assert sel.value == 30


def test_empty_board_opens_in_the_centre():
    assert evaluate_and_choose(Board(20), random.Random(0))[0] == (9, 9)
    assert evaluate_and_choose(Board(5), random.Random(0))[0] == (2, 2)
    assert select_move(Board(5)).reason == "opening"


def test_full_board_is_rejected():
    b = Board.from_stones(2, {(0, 0): "B", (1, 0): "W", (0, 1): "W", (1, 1): "B"})
    with pytest.raises(ValueError):
        evaluate_and_choose(b)


def test_board_is_left_untouched():
    b = Board.from_stones(12, {(4, 4): "B", (5, 5): "W", (6, 6): "B"})
    before = [line[:] for line in b.grid]
    evaluate_and_choose(b, random.Random(0))
    assert b.grid == before


def test_snapshot_input_and_score_grid_shape():
    b = Board.from_stones(9, {(4, 4): "B"})
    move, scores = evaluate_and_choose(b.snapshot(), random.Random(0))
    assert len(scores) == 9 and all(len(line) == 9 for line in scores)
    assert scores[4][4] is None
    assert b.is_empty(move)


def test_chosen_point_is_always_empty():
    rng = random.Random(2024)
    for _ in range(20):
        b = Board(10)
        for coord in rng.sample(list(b.cells()), 40):
            b.set(coord, rng.choice(["B", "W"]))
        move, _ = evaluate_and_choose(b, random.Random(rng.random()))
        assert b.is_empty(move)


def test_white_perspective_attacks_with_white():
    b = Board.from_stones(20, {(5, 5): "W", (6, 5): "W", (7, 5): "W", (15, 15): "B"})
    sel = select_move(b, random.Random(0), me="W")
    assert sel.reason == "attack"
    assert sel.move in {(4, 5), (8, 5)}
