from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

from .board import Board
from .errors import InvalidTileError, TileNotEmptyError
from .rng import Rand
from .tile import EDGE1, EDGE2, Colour, PieceState, Tile
from .union_find import UnionFind

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 10
# One in NO_SWAP_CHANCE stones on the border of the short-diagonal zone is kept.
NO_SWAP_CHANCE = 3


class Winner(Enum):
    BOT = "bot"
    OPPONENT = "opponent"


def should_swap(row: int, col: int, size: int, rng: Rand) -> bool:
    """Pie-rule judgement for an opening stone at ``(row, col)``.

    Stones close to the obtuse corners (``row + col`` near 0 or near
    ``2 * size - 2``) are weak, so the responder keeps its colour. Stones
    exactly on the border of that zone are kept one time in three.
    """
    diagonal = row + col
    far = 2 * size - 4
    if diagonal < 2 or diagonal > far:
        return False
    if diagonal in (2, far) and rng.next_int_in_range(0, NO_SWAP_CHANCE) == 0:
        return False
    return True


def first_move(size: int, rng: Rand) -> Tuple[int, int]:
    """Random near-corner opening stone, reflected to the opposite corner half the time."""
    upper = max(1, size // 2 - 1)
    row = rng.next_int_in_range(0, upper)
    col = rng.next_int_in_range(0, upper)
    if rng.next_int_in_range(0, 2) == 0:
        row = size - 1 - row
        col = size - 1 - col
    return row, col


class Groups:
    """One union-find per colour, indexed by :attr:`Colour.group_idx`."""

    def __init__(self) -> None:
        self.sets = [UnionFind(), UnionFind()]

    def get(self, colour: Colour) -> UnionFind:
        return self.sets[colour.group_idx]

    def reset(self, colour: Colour) -> None:
        self.sets[colour.group_idx] = UnionFind()

    def join(self, tile: Tile, colour: Colour, board: Board) -> None:
        group = self.sets[colour.group_idx]
        line = tile.edge(colour)
        if line == 0:
            group.union(EDGE1, tile)
        if line == board.size - 1:
            group.union(tile, EDGE2)
        for neighbour in board.neighbours(tile):
            if neighbour is not None and neighbour[1].colour == colour:
                group.union(neighbour[0], tile)


class State:
    """Board plus per-colour connectivity, kept in sync on every placement."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self.size = size
        self.board = Board(size)
        self.to_play = Colour.BLACK
        self.groups = Groups()

    @property
    def active(self) -> Colour:
        return self.to_play

    def set_to_play(self, colour: Colour) -> None:
        self.to_play = colour

    def get_board(self) -> Board:
        return self.board

    def get_compressed(self) -> str:
        return self.board.get_compressed()

    def get_pretty(self) -> str:
        return self.board.get_pretty()

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def place_piece(self, tile: Tile, state: PieceState) -> None:
        current = self.board.get_tile(tile)
        if current is None:
            raise InvalidTileError()
        old = current.colour
        if old is not None and state != current:
            self._replace_piece(tile, old, state)
        self._set_piece(tile, state)

    def try_place_piece(self, tile: Tile, state: PieceState) -> None:
        if self.board.get_tile(tile) != PieceState.EMPTY:
            raise TileNotEmptyError()
        self._set_piece(tile, state)

    def _set_piece(self, tile: Tile, state: PieceState) -> None:
        self.board.set_tile(tile, state)
        colour = state.colour
        if colour is not None:
            self.groups.join(tile, colour, self.board)
            self.to_play = colour.opponent()

    def _replace_piece(self, tile: Tile, old: Colour, new: PieceState) -> None:
        # Removing a stone can split a group, so the old colour is rebuilt from scratch.
        self.board.set_tile(tile, new)
        self.groups.reset(old)
        for other, piece in self.board:
            if piece.colour == old:
                self.groups.join(other, old, self.board)
        logger.debug("Rebuilt %s connectivity after replacing %s with %s", old, tile, new.name)

    def swap_pieces(self) -> None:
        """Apply the pie rule on the board: mirror and recolour every stone."""
        self.board.swap_pieces()
        self.groups = Groups()
        for tile, piece in self.board:
            if piece.colour is not None:
                self.groups.join(tile, piece.colour, self.board)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_connected(self, colour: Colour) -> bool:
        return self.groups.get(colour).connected(EDGE1, EDGE2)

    def check_win(self) -> Optional[Colour]:
        if self.is_connected(Colour.WHITE):
            return Colour.WHITE
        if self.is_connected(Colour.BLACK):
            return Colour.BLACK
        return None

    def get_winner(self, colour: Colour) -> Optional[Winner]:
        winner = self.check_win()
        if winner is None:
            return None
        return Winner.BOT if winner == colour else Winner.OPPONENT

    def should_swap(self, rng: Rand) -> bool:
        for tile, piece in self.board:
            if piece.colour is not None:
                return should_swap(tile.row, tile.col, self.size, rng)
        return False

    def __repr__(self) -> str:
        return f"State(size={self.size}, to_play={self.to_play}, board={self.get_compressed()!r})"
