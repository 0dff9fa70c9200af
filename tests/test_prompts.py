"""Terminal input parsing."""

import pytest

from gomoku.ui.prompts import format_coord, parse_move


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("K10", (10, 9)),
        ("k10", (10, 9)),
        (" a1 ", (0, 0)),
        ("11 10", (10, 9)),
        ("11,10", (10, 9)),
        ("T20", (19, 19)),
    ],
)
def test_parse_move(raw, expected):
    assert parse_move(raw, 20) == expected


@pytest.mark.parametrize("raw", ["q", "quit", "EXIT"])
def test_quit(raw):
    assert parse_move(raw, 20) is None


@pytest.mark.parametrize("raw", ["", "hello", "K", "U1", "0 3", "21 1", "A0"])
def test_bad_input_raises(raw):
    with pytest.raises(ValueError):
        parse_move(raw, 20)


def test_format_coord_round_trips_through_parse():
    assert format_coord((0, 0)) == "A1"
    assert format_coord((10, 9)) == "K10"
    assert parse_move(format_coord((7, 13)), 20) == (7, 13)
