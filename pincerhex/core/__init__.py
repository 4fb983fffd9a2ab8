"""Board model, connectivity tracking and game state for Pincerhex."""

from .board import NEIGHBOUR_OFFSETS, Board
from .errors import (
    BoardError,
    BoardFullError,
    BotError,
    EmptyMoveError,
    InvalidColError,
    InvalidColourError,
    InvalidRowError,
    InvalidTileError,
    NotInRangeError,
    PincerhexError,
    StateError,
    TileError,
    TileNotEmptyError,
)
from .rng import NumpyRand, Rand
from .state import DEFAULT_SIZE, Groups, State, Winner, first_move, should_swap
from .tile import (
    EDGE1,
    EDGE2,
    INVALID,
    MAX_BOARD_SIZE,
    SWAP_SENTINEL,
    Colour,
    Move,
    PieceState,
    Tile,
    TileKind,
)
from .union_find import UnionFind

__all__ = [
    "Board",
    "NEIGHBOUR_OFFSETS",
    "Colour",
    "PieceState",
    "Tile",
    "TileKind",
    "Move",
    "EDGE1",
    "EDGE2",
    "INVALID",
    "MAX_BOARD_SIZE",
    "SWAP_SENTINEL",
    "UnionFind",
    "State",
    "Groups",
    "Winner",
    "DEFAULT_SIZE",
    "first_move",
    "should_swap",
    "Rand",
    "NumpyRand",
    "PincerhexError",
    "TileError",
    "InvalidRowError",
    "InvalidColError",
    "InvalidColourError",
    "BoardError",
    "NotInRangeError",
    "StateError",
    "InvalidTileError",
    "TileNotEmptyError",
    "BotError",
    "EmptyMoveError",
    "BoardFullError",
]
