from __future__ import annotations

import math
from typing import Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import NotInRangeError
from .tile import MAX_BOARD_SIZE, INVALID, PieceState, Tile

CellArray = NDArray[np.int8]

# Hex neighbour offsets (d_row, d_col). The order is relied upon by the
# potential evaluator, which pairs direction i with i + 2 and i + 3 (mod 6).
NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1))
FOOTER_WIDTH = 18

Neighbour = Optional[Tuple[Tile, PieceState]]


class Board:
    """Square Hex board stored as a flat row-major int8 array of PieceState values."""

    def __init__(self, size: int) -> None:
        if not 1 <= size <= MAX_BOARD_SIZE:
            raise ValueError(f"Board size must be in 1..={MAX_BOARD_SIZE}, got {size}.")
        self.size = int(size)
        self.cells: CellArray = np.full(self.size * self.size, PieceState.EMPTY, dtype=np.int8)

    @classmethod
    def from_compressed(cls, compressed: str) -> "Board":
        """Rebuild a board from :meth:`get_compressed` output, e.g. ``"...|B.B|.W.|"``."""
        symbols = [char for char in compressed.strip() if char != "|"]
        size = math.isqrt(len(symbols))
        if size == 0 or size * size != len(symbols):
            raise ValueError(f"Compressed board has {len(symbols)} cells, which is not a square.")
        board = cls(size)
        for index, char in enumerate(symbols):
            board.cells[index] = PieceState.from_char(char)
        return board

    def copy(self) -> "Board":
        board = Board(self.size)
        board.cells = self.cells.copy()
        return board

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, row: int, col: int) -> Optional[PieceState]:
        return self.get_tile(Tile.regular(row, col))

    def get_tile(self, tile: Tile) -> Optional[PieceState]:
        index = tile.to_index(self.size)
        if index is None:
            return None
        return PieceState(int(self.cells[index]))

    def set_tile(self, tile: Tile, state: PieceState) -> None:
        index = tile.to_index(self.size)
        if index is None:
            raise NotInRangeError()
        self.cells[index] = state

    def index_to_tile(self, index: int) -> Tile:
        if not 0 <= index < len(self.cells):
            return INVALID
        return Tile.regular(index // self.size, index % self.size)

    def neighbour(self, tile: Tile, d_row: int, d_col: int) -> Neighbour:
        other = tile.neighbour(d_row, d_col)
        state = self.get_tile(other)
        if state is None:
            return None
        return other, state

    def neighbours(self, tile: Tile) -> Tuple[Neighbour, ...]:
        return tuple(self.neighbour(tile, d_row, d_col) for d_row, d_col in NEIGHBOUR_OFFSETS)

    def empty_tiles(self) -> List[Tile]:
        return [self.index_to_tile(int(index)) for index in np.flatnonzero(self.cells == PieceState.EMPTY)]

    def stone_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Tuple[Tile, PieceState]]:
        for index in range(len(self.cells)):
            yield self.index_to_tile(index), PieceState(int(self.cells[index]))

    def __reversed__(self) -> Iterator[Tuple[Tile, PieceState]]:
        for index in range(len(self.cells) - 1, -1, -1):
            yield self.index_to_tile(index), PieceState(int(self.cells[index]))

    def iter(self) -> Iterator[Tuple[Tile, PieceState]]:
        return iter(self)

    def iter_reversed(self) -> Iterator[Tuple[Tile, PieceState]]:
        return reversed(self)

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------
    def swap_pieces(self) -> None:
        """Mirror every stone across the main diagonal and flip its colour."""
        grid = self.cells.reshape(self.size, self.size).T
        swapped = np.where(grid == PieceState.EMPTY, grid, PieceState.BLACK + PieceState.WHITE - grid)
        self.cells = swapped.astype(np.int8).reshape(-1)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def get_compressed(self) -> str:
        rows = []
        for row in self.cells.reshape(self.size, self.size):
            rows.append("".join(PieceState(int(value)).to_char() for value in row) + "|")
        return "".join(rows)

    def get_pretty(self) -> str:
        """Staircase rendering, for example::

            B . . .
             . B W .
              . . B .
               W . W B
            ------------------
        """
        lines = []
        for row_index, row in enumerate(self.cells.reshape(self.size, self.size)):
            cells = "".join(PieceState(int(value)).to_char() + " " for value in row)
            lines.append(" " * row_index + cells + "\n")
        return "".join(lines) + "-" * FOOTER_WIDTH

    def __str__(self) -> str:
        return self.get_pretty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Board(size={self.size}, cells={self.get_compressed()!r})"
