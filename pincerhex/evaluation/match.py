from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from pincerhex.core import Colour, NumpyRand, PieceState, State, Tile
from pincerhex.potential import EvaluatorConfig, PotentialEvaluator

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    games_played: int
    player_a_wins: int
    player_b_wins: int
    black_wins: int
    white_wins: int
    average_length: float

    def winrate_player_a(self) -> float:
        return self.player_a_wins / max(1, self.games_played)

    def winrate_player_b(self) -> float:
        return self.player_b_wins / max(1, self.games_played)


@dataclass
class GameRecord:
    winner: Colour
    moves: List[Tile] = field(default_factory=list)


class Player:
    """Chooses stones for one side of a game."""

    def choose(self, state: State, colour: Colour, own_moves: int) -> Tile:
        raise NotImplementedError


class RandomPlayer(Player):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, state: State, colour: Colour, own_moves: int) -> Tile:
        empty = state.get_board().empty_tiles()
        return empty[int(self.rng.integers(len(empty)))]


class BotPlayer(Player):
    """Potential-field player without the pie-rule opening."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        config: Optional[EvaluatorConfig] = None,
    ) -> None:
        self.rand = NumpyRand(rng)
        self.config = config or EvaluatorConfig()

    def choose(self, state: State, colour: Colour, own_moves: int) -> Tile:
        evaluator = PotentialEvaluator(state.get_board(), colour, Colour.BLACK, config=self.config)
        return evaluator.evaluate().get_best_move(own_moves, self.rand)


def play_game(black: Player, white: Player, *, size: int) -> GameRecord:
    state = State(size)
    players = {Colour.BLACK: black, Colour.WHITE: white}
    own_moves = {Colour.BLACK: 0, Colour.WHITE: 0}
    record_moves: List[Tile] = []
    colour = Colour.BLACK

    while True:
        tile = players[colour].choose(state, colour, own_moves[colour])
        state.try_place_piece(tile, PieceState.of(colour))
        own_moves[colour] += 1
        record_moves.append(tile)
        winner = state.check_win()
        if winner is not None:
            return GameRecord(winner=winner, moves=record_moves)
        if not state.get_board().empty_tiles():
            raise RuntimeError("Board filled without a winner.")
        colour = colour.opponent()


def evaluate_players(
    player_a: Player,
    player_b: Player,
    *,
    episodes: int,
    size: int = 7,
    alternate_colours: bool = True,
) -> EvaluationResult:
    player_a_wins = 0
    player_b_wins = 0
    black_wins = 0
    total_moves = 0

    for episode in range(episodes):
        a_is_black = not alternate_colours or episode % 2 == 0
        if a_is_black:
            record = play_game(player_a, player_b, size=size)
        else:
            record = play_game(player_b, player_a, size=size)

        total_moves += len(record.moves)
        if record.winner == Colour.BLACK:
            black_wins += 1
        if (record.winner == Colour.BLACK) == a_is_black:
            player_a_wins += 1
        else:
            player_b_wins += 1
        logger.info("Game %d: %s won after %d moves", episode + 1, record.winner, len(record.moves))

    return EvaluationResult(
        games_played=episodes,
        player_a_wins=player_a_wins,
        player_b_wins=player_b_wins,
        black_wins=black_wins,
        white_wins=episodes - black_wins,
        average_length=total_moves / max(1, episodes),
    )
