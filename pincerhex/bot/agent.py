from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from pincerhex.core import (
    DEFAULT_SIZE,
    BoardFullError,
    Colour,
    EmptyMoveError,
    Move,
    NumpyRand,
    PieceState,
    Rand,
    State,
    Tile,
    Winner,
    first_move,
)
from pincerhex.potential import EvaluatorConfig, PotentialEvaluator

logger = logging.getLogger(__name__)


class SwapRole(Enum):
    START = "start"
    SWAP = "swap"

    @staticmethod
    def for_colour(colour: Colour) -> "SwapRole":
        return SwapRole.START if colour == Colour.BLACK else SwapRole.SWAP


class HexBot:
    """Hex-playing agent: owns the game state and answers move requests.

    The first request goes through the pie-rule protocol. As the opener the
    bot places a random near-corner stone; as the responder it either swaps
    colours or plays normally. Every later request is answered by a fresh
    :class:`PotentialEvaluator`.
    """

    def __init__(
        self,
        colour: Colour,
        *,
        rng: Optional[Rand] = None,
        swap_rule: bool = True,
        config: Optional[EvaluatorConfig] = None,
    ) -> None:
        self.colour = colour
        # Black always opens; the decay in move scoring is measured from that side.
        self.starting = Colour.BLACK
        self.state = State(DEFAULT_SIZE)
        self.size = DEFAULT_SIZE
        self.swap_rule = swap_rule
        self.swap_state: Optional[SwapRole] = SwapRole.for_colour(colour)
        self.move_count = 0
        self.rng = rng or NumpyRand()
        self.config = config or EvaluatorConfig()

    def init_board(self, size: int) -> None:
        self.state = State(size)
        self.size = size
        self.swap_state = SwapRole.for_colour(self.colour)
        self.move_count = 0

    def set_tile(self, notation: Optional[str], state: PieceState) -> None:
        if notation is None or not notation.strip():
            raise EmptyMoveError()
        self.state.place_piece(Tile.parse(notation.strip()), state)

    def make_move(self) -> Move:
        if not self.state.get_board().empty_tiles():
            raise BoardFullError()
        if self.swap_state is not None and self.swap_rule:
            move = self._handle_swap(self.swap_state)
            self.swap_state = None
            return move
        return Move(self._regular_move())

    def _handle_swap(self, role: SwapRole) -> Move:
        if role == SwapRole.START:
            row, col = first_move(self.size, self.rng)
            tile = Tile.regular(row, col)
            self.state.place_piece(tile, PieceState.of(self.colour))
            self.move_count += 1
            logger.debug("Opening with %s as %s", tile, self.colour)
            return Move(tile)
        if self.state.should_swap(self.rng):
            self.swap()
            logger.debug("Swapping, now playing %s", self.colour)
            return Move.swap()
        return Move(self._regular_move())

    def evaluator(self) -> PotentialEvaluator:
        """Unevaluated evaluator for the current position, from the bot's side."""
        return PotentialEvaluator(
            self.state.get_board(),
            self.colour,
            self.starting,
            config=self.config,
        )

    def _regular_move(self) -> Tile:
        tile = self.evaluator().evaluate().get_best_move(self.move_count, self.rng)
        self.state.place_piece(tile, PieceState.of(self.colour))
        self.move_count += 1
        return tile

    def check_win(self) -> Optional[Winner]:
        return self.state.get_winner(self.colour)

    def swap(self) -> None:
        self.colour = self.colour.opponent()

    def get_compressed(self) -> str:
        return self.state.get_compressed()

    def get_pretty(self) -> str:
        return self.state.get_pretty()
