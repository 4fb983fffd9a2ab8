from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .errors import InvalidColError, InvalidColourError, InvalidRowError

# Packed move value reported when the bot invokes the pie rule.
SWAP_SENTINEL = 0xFFFF0000
MAX_BOARD_SIZE = 127


class Colour(IntEnum):
    """Stone colour. Black joins top to bottom, White joins left to right."""

    BLACK = 1
    WHITE = 2

    @property
    def group_idx(self) -> int:
        return 0 if self == Colour.BLACK else 1

    def opponent(self) -> "Colour":
        return Colour.WHITE if self == Colour.BLACK else Colour.BLACK

    @staticmethod
    def parse(text: str) -> "Colour":
        value = text.strip().lower()
        if value in ("b", "black"):
            return Colour.BLACK
        if value in ("w", "white"):
            return Colour.WHITE
        raise InvalidColourError(f"invalid colour {text!r}")

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class PieceState(IntEnum):
    """Content of a single board cell, stored as int8 on the board."""

    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def colour(self) -> Optional[Colour]:
        if self == PieceState.EMPTY:
            return None
        return Colour(int(self))

    @staticmethod
    def of(colour: Colour) -> "PieceState":
        return PieceState(int(colour))

    def to_char(self) -> str:
        return _STATE_CHARS[self]

    @staticmethod
    def from_char(char: str) -> "PieceState":
        for state, symbol in _STATE_CHARS.items():
            if symbol == char:
                return state
        raise ValueError(f"Unknown board character {char!r}.")


_STATE_CHARS = {PieceState.EMPTY: ".", PieceState.BLACK: "B", PieceState.WHITE: "W"}


class TileKind(IntEnum):
    REGULAR = 0
    EDGE1 = 1
    EDGE2 = 2
    INVALID = 3


@dataclass(frozen=True, order=True)
class Tile:
    """A board cell or one of the synthetic nodes used by the union-find.

    Regular tiles order by ``(row, col)`` and sort before ``EDGE1``, ``EDGE2``
    and ``INVALID``. Coordinates of the synthetic kinds are always zero.
    """

    kind: TileKind
    row: int = 0
    col: int = 0

    @staticmethod
    def regular(row: int, col: int) -> "Tile":
        return Tile(TileKind.REGULAR, int(row), int(col))

    @property
    def is_regular(self) -> bool:
        return self.kind == TileKind.REGULAR

    def edge(self, colour: Colour) -> int:
        """Coordinate along ``colour``'s connection axis (row for Black, col for White)."""
        if not self.is_regular:
            raise RuntimeError(f"called edge on a non-regular tile {self}")
        return self.row if colour == Colour.BLACK else self.col

    def to_index(self, size: int) -> Optional[int]:
        if self.is_regular and 0 <= self.row < size and 0 <= self.col < size:
            return self.row * size + self.col
        return None

    def neighbour(self, d_row: int, d_col: int) -> "Tile":
        if not self.is_regular:
            return INVALID
        return Tile.regular(self.row + d_row, self.col + d_col)

    @staticmethod
    def parse(text: str) -> "Tile":
        """Parse move notation: a row letter (``a`` is row 0) and a 1-based column."""
        if not text:
            raise InvalidRowError()
        row = ord(text[0]) - ord("a")
        if not 0 <= row < MAX_BOARD_SIZE:
            raise InvalidRowError()
        digits = text[1:]
        if not digits.isascii() or not digits.isdigit():
            raise InvalidColError()
        return Tile.regular(row, int(digits) - 1)

    def __str__(self) -> str:
        if self.kind == TileKind.REGULAR:
            return f"{chr(ord('a') + self.row)}{self.col + 1}"
        if self.kind == TileKind.EDGE1:
            return "edge1"
        if self.kind == TileKind.EDGE2:
            return "edge2"
        return "invalid"


EDGE1 = Tile(TileKind.EDGE1)
EDGE2 = Tile(TileKind.EDGE2)
INVALID = Tile(TileKind.INVALID)


@dataclass(frozen=True)
class Move:
    """Either a stone placement or the pie-rule swap (``tile is None``)."""

    tile: Optional[Tile] = None

    @staticmethod
    def swap() -> "Move":
        return Move(None)

    @property
    def is_swap(self) -> bool:
        return self.tile is None

    def pack(self) -> int:
        if self.tile is None:
            return SWAP_SENTINEL
        return ((self.tile.row & 0xFF) << 8) | (self.tile.col & 0xFF)

    @staticmethod
    def unpack(value: int) -> "Move":
        if value == SWAP_SENTINEL:
            return Move.swap()
        return Move(Tile.regular((value >> 8) & 0xFF, value & 0xFF))

    def __str__(self) -> str:
        return "swap" if self.tile is None else str(self.tile)
