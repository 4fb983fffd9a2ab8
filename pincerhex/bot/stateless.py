from __future__ import annotations

from typing import Optional, Tuple

from pincerhex.core import Board, Colour, Move, NumpyRand, Tile, first_move, should_swap
from pincerhex.potential import EvaluatorConfig, PotentialEvaluator


def pack_tile(row: int, col: int) -> int:
    """Pack a coordinate the way callers encode the opponent's last move."""
    return ((row & 0xFF) << 8) | (col & 0xFF)


def unpack_player_move(player_move: int) -> Tuple[int, int]:
    return (player_move >> 8) & 0xFF, player_move & 0xFF


def compute_move(
    board: str,
    bot_colour: Colour,
    starting_colour: Colour,
    player_move: int,
    move_count: int,
    seed: int,
    *,
    config: Optional[EvaluatorConfig] = None,
) -> int:
    """Choose a move for a position given only as a compressed board string.

    Nothing is kept between calls; ``seed`` fixes every random choice. The
    result is ``0xFFFF0000`` for a swap, otherwise ``(row << 8) | col``.
    """
    rng = NumpyRand.from_seed(seed)
    position = Board.from_compressed(board)

    if move_count == 0:
        move = Move(Tile.regular(*first_move(position.size, rng)))
    elif move_count == 1 and should_swap(*unpack_player_move(player_move), position.size, rng):
        move = Move.swap()
    else:
        evaluator = PotentialEvaluator(position, bot_colour, starting_colour, config=config)
        move = Move(evaluator.evaluate().get_best_move(move_count, rng))
    return move.pack()
