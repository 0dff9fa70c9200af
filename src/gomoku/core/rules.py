from __future__ import annotations
from typing import List, Optional, Tuple

from gomoku.config import WIN_LENGTH
from gomoku.core.board import BoardLike
from gomoku.core.geometry import AXES, Direction, neg, step
from gomoku.types import ATTACKER, Coord, Outcome, Stone


def _run(board: BoardLike, start: Coord, d: Direction, stone: Stone) -> List[Coord]:
    line = []
    c = start
    while board.in_bounds(c) and board.get(c) == stone:
        line.append(c)
        c = step(c, d)
    return line


def check_winner_with_line(
    board: BoardLike, win_length: int = WIN_LENGTH
) -> Optional[Tuple[Stone, List[Coord]]]:
    """
    Scan every stone in row-major order and walk each axis forward from it.
    A run is only measured from its first stone (the cell behind it along the
    axis holds something else), so each line is counted once no matter which
    end the scan reaches first. The first winning run found is returned.
    """
    for coord, stone in board.stones():
        for d in AXES:
            back = step(coord, neg(d))
            if board.in_bounds(back) and board.get(back) == stone:
                continue
            line = _run(board, coord, d, stone)
            if len(line) >= win_length:
                return stone, line
    return None


def winner_at(
    board: BoardLike, coord: Coord, win_length: int = WIN_LENGTH
) -> Optional[Tuple[Stone, List[Coord]]]:
    """Only look at the lines through `coord` (the stone just placed)."""
    stone = board.get(coord)
    if stone is None:
        return None
    for d in AXES:
        behind = _run(board, coord, neg(d), stone)
        line = list(reversed(behind)) + _run(board, step(coord, d), d, stone)
        if len(line) >= win_length:
            return stone, line
    return None


def check_winner(board: BoardLike, win_length: int = WIN_LENGTH) -> Optional[Stone]:
    res = check_winner_with_line(board, win_length)
    return res[0] if res else None


def is_draw(board: BoardLike, win_length: int = WIN_LENGTH) -> bool:
    return board.is_full() and check_winner(board, win_length) is None


def game_outcome(
    board: BoardLike, last_move: Optional[Coord] = None, win_length: int = WIN_LENGTH
) -> Outcome:
    if last_move is not None:
        res = winner_at(board, last_move, win_length)
    else:
        res = check_winner_with_line(board, win_length)

    if res is not None:
        return "attacker_won" if res[0] == ATTACKER else "defender_won"
    if board.is_full():
        return "draw"
    return "in_progress"
