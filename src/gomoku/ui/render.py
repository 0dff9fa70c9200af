from __future__ import annotations
from typing import Iterable, Optional, Set

from gomoku.config import CLEAR_SCREEN
from gomoku.core.board import BoardLike
from gomoku.core.scoring import CellScore, ScoreGrid
from gomoku.types import Cell, Coord
from gomoku.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_WHITE, FG_YELLOW, REVERSE
from gomoku.ui.prompts import col_label


def _stone(cell: Cell) -> str:
    if cell == "B":
        return c("●", FG_RED)
    return c("○", FG_WHITE)


def _empty(score: Optional[CellScore]) -> str:
    if score is None or not score.is_candidate:
        return c("·", FG_GRAY)
    if score.forcing:
        return c("!", FG_YELLOW)
    # single glyph per point: tens of the better category, capped at 9
    return c(str(min(9, score.best // 10)), DIM)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(
    board: BoardLike,
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    scores: Optional[ScoreGrid] = None,
) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("GOMOKU", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    header = "    " + " ".join(col_label(i) for i in range(board.size))
    print(c(header, DIM))

    for row in range(board.size):
        parts = []
        for col in range(board.size):
            cell = board.grid[row][col]
            if cell is None:
                p = _empty(scores[row][col] if scores else None)
            else:
                p = _stone(cell)
            if (col, row) in hl:
                p = c(p, REVERSE)
            parts.append(p)
        print(c(f"{row + 1:>3} ", DIM) + " ".join(parts))

    print(c("    Enter a point like K10 (or '11 10'). Enter q to quit.", DIM))
