# src/gomoku/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple, Union

from gomoku.config import BOARD_SIZE
from gomoku.types import Cell, Coord, Stone


class _GridView:
    """
    Read-side of the board, shared by the mutable Board and the frozen snapshot.
    Subclasses provide `size` and a row-major `grid` (grid[row][col]).
    """
    __slots__ = ()

    size: int
    grid: Sequence[Sequence[Cell]]

    def in_bounds(self, coord: Coord) -> bool:
        col, row = coord
        return 0 <= col < self.size and 0 <= row < self.size

    def _check(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate {coord} is off the {self.size}x{self.size} board.")

    def get(self, coord: Coord) -> Cell:
        self._check(coord)
        col, row = coord
        return self.grid[row][col]

    def is_empty(self, coord: Coord) -> bool:
        return self.get(coord) is None

    def cells(self) -> Iterator[Coord]:
        """All coordinates in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield (col, row)

    def empty_cells(self) -> List[Coord]:
        return [c for c in self.cells() if self.grid[c[1]][c[0]] is None]

    def stones(self) -> List[Tuple[Coord, Stone]]:
        out: List[Tuple[Coord, Stone]] = []
        for c in self.cells():
            p = self.grid[c[1]][c[0]]
            if p is not None:
                out.append((c, p))
        return out

    def is_full(self) -> bool:
        return all(p is not None for line in self.grid for p in line)


@dataclass(slots=True)
class Board(_GridView):
    size: int = BOARD_SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("Board size must be positive.")
        if not self.grid:
            self.grid = [[None for _ in range(self.size)] for _ in range(self.size)]
        elif len(self.grid) != self.size or any(len(line) != self.size for line in self.grid):
            raise ValueError(f"Grid must be {self.size}x{self.size}.")

    @classmethod
    def from_stones(cls, size: int, stones: dict[Coord, Stone]) -> "Board":
        b = cls(size)
        for coord, stone in stones.items():
            b.set(coord, stone)
        return b

    def set(self, coord: Coord, cell: Cell) -> None:
        self._check(coord)
        col, row = coord
        self.grid[row][col] = cell

    def place(self, coord: Coord, stone: Stone) -> None:
        if not self.is_empty(coord):
            raise ValueError("That point is already taken.")
        self.set(coord, stone)

    def copy(self) -> "Board":
        return Board(self.size, [line[:] for line in self.grid])

    def snapshot(self) -> "BoardSnapshot":
        return BoardSnapshot(self.size, tuple(tuple(line) for line in self.grid))


@dataclass(frozen=True, slots=True)
class BoardSnapshot(_GridView):
    """Immutable copy of a Board handed to the AI and the win detector."""
    size: int
    grid: Tuple[Tuple[Cell, ...], ...]

    def snapshot(self) -> "BoardSnapshot":
        return self

    def thaw(self) -> Board:
        return Board(self.size, [list(line) for line in self.grid])


BoardLike = Union[Board, BoardSnapshot]
