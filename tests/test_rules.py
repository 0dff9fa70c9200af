"""Win detection: five or more along any axis, never four."""

import pytest

from gomoku.core.board import Board
from gomoku.core.rules import check_winner, check_winner_with_line, game_outcome, is_draw, winner_at


def _line(start, d, n):
    return [(start[0] + d[0] * i, start[1] + d[1] * i) for i in range(n)]


@pytest.mark.parametrize(
    "start,d",
    [
        ((3, 4), (1, 0)),   # horizontal
        ((7, 2), (0, 1)),   # vertical
        ((2, 2), (1, 1)),   # diagonal
        ((9, 3), (-1, 1)),  # anti-diagonal
    ],
)
def test_five_wins_on_every_axis(start, d):
    b = Board(15)
    cells = _line(start, d, 5)
    for c in cells:
        b.set(c, "W")

    res = check_winner_with_line(b)
    assert res is not None
    stone, line = res
    assert stone == "W"
    assert set(line) == set(cells)
    assert game_outcome(b) == "defender_won"


def test_four_is_not_a_win():
    b = Board(15)
    for c in _line((3, 3), (1, 0), 4):
        b.set(c, "B")
    assert check_winner(b) is None
    assert game_outcome(b) == "in_progress"


def test_four_capped_by_other_colour_is_not_a_win():
    b = Board(15)
    for c in _line((3, 3), (1, 0), 4):
        b.set(c, "B")
    b.set((7, 3), "W")
    assert check_winner(b) is None


def test_overline_still_wins():
    b = Board(15)
    for c in _line((0, 0), (1, 1), 6):
        b.set(c, "B")
    assert check_winner(b) == "B"
    assert game_outcome(b) == "attacker_won"


def test_winner_at_finds_run_from_any_stone_in_it():
    b = Board(15)
    cells = _line((4, 10), (1, -1), 5)
    for c in cells:
        b.set(c, "B")

    for c in cells:
        res = winner_at(b, c)
        assert res is not None
        assert res[0] == "B"
        assert sorted(res[1]) == sorted(cells)
        assert game_outcome(b, last_move=c) == "attacker_won"


def test_winner_at_empty_point_is_none():
    assert winner_at(Board(5), (2, 2)) is None


def test_win_length_is_configurable():
    b = Board(5)
    for c in _line((0, 2), (1, 0), 3):
        b.set(c, "W")
    assert check_winner(b) is None
    assert check_winner(b, win_length=3) == "W"
    assert game_outcome(b, win_length=3) == "defender_won"


def test_full_board_without_five_is_a_draw():
    b = Board(4)
    for col, row in b.cells():
        b.set((col, row), "B" if (col + row) % 2 else "W")
    assert is_draw(b)
    assert game_outcome(b) == "draw"


def test_snapshot_is_accepted():
    b = Board(10)
    for c in _line((2, 5), (1, 0), 5):
        b.set(c, "B")
    assert check_winner(b.snapshot()) == "B"
