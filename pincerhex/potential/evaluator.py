from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from pincerhex.core import NEIGHBOUR_OFFSETS, Board, Colour, PieceState, Rand, Tile

logger = logging.getLogger(__name__)

# Local shape adjustments used while relaxing a single cell.
ADJACENT_BLOCK_SCORE = 32
OPPOSITE_BLOCK_SCORE = 30
BLOCKED_PAIR_PENALTY = 128
OWN_STONE_WEIGHT = 10
BRIDGE_TIE_CUTOFF = 104


class Edge(IntEnum):
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3

    @property
    def colour(self) -> Colour:
        return Colour.BLACK if self in (Edge.TOP, Edge.BOTTOM) else Colour.WHITE


# Relaxation order of the four passes.
EDGES: Tuple[Edge, ...] = (Edge.LEFT, Edge.RIGHT, Edge.TOP, Edge.BOTTOM)


@dataclass
class EvaluatorConfig:
    rounds: int = 1000
    init_potential: int = 20_000
    default_potential: int = 128
    diff: int = 140
    max_value: int = 30_000
    own_bridge_score: float = 66.0
    opponent_bridge_score: float = 52.0
    bridge_cap: float = 68.0
    decay: float = 190.0
    quadrant_weight: float = 8.0
    critical_threshold: int = 268
    critical_bonus: float = 400.0
    include_opponent_potential: bool = True


class PotentialEvaluator:
    """Single-pass greedy move picker driven by per-edge connection potentials.

    For each of the four board edges a potential (the cost of linking a cell to
    that edge) is relaxed to a fixed point with alternating forward and
    backward sweeps over the dirty cells. A bridge score, a heuristic stand-in
    for two-bridge virtual connections, is recorded alongside. The move score
    combines both with a centre bias that fades as the game goes on.

    The evaluator is built fresh for every move and keeps no state between moves.
    """

    def __init__(
        self,
        board: Board,
        active: Colour,
        starting: Optional[Colour] = None,
        *,
        config: Optional[EvaluatorConfig] = None,
    ) -> None:
        self.board = board
        self.active = active
        self.starting = starting if starting is not None else active
        self.config = config or EvaluatorConfig()

        size = board.size
        cells = size * size
        self._cells: List[int] = [int(value) for value in board.cells]
        self._neighbours: List[Tuple[Optional[int], ...]] = [
            self._neighbour_indices(index) for index in range(cells)
        ]
        self.potential: List[List[int]] = [[self.config.init_potential] * 4 for _ in range(cells)]
        self.bridge: List[List[float]] = [[0.0] * 4 for _ in range(cells)]
        self.update: List[bool] = [False] * cells
        self.rounds_used: Dict[Edge, int] = {}

    def _neighbour_indices(self, index: int) -> Tuple[Optional[int], ...]:
        size = self.board.size
        row, col = divmod(index, size)
        result = []
        for d_row, d_col in NEIGHBOUR_OFFSETS:
            result.append(Tile.regular(row + d_row, col + d_col).to_index(size))
        return tuple(result)

    # ------------------------------------------------------------------
    # Relaxation
    # ------------------------------------------------------------------
    def evaluate(self) -> "PotentialEvaluator":
        self._init_tile_potential()
        for edge in EDGES:
            self._evaluate_side(edge)
        return self

    def _init_tile_potential(self) -> None:
        size = self.board.size
        for i in range(size):
            for edge, (row, col) in (
                (Edge.TOP, (0, i)),
                (Edge.BOTTOM, (size - 1, i)),
                (Edge.LEFT, (i, 0)),
                (Edge.RIGHT, (i, size - 1)),
            ):
                index = row * size + col
                if self._cells[index] == edge.colour:
                    self.potential[index][edge] = 0
                else:
                    self.potential[index][edge] = self.config.default_potential

    def _evaluate_side(self, edge: Edge) -> None:
        cells = len(self._cells)
        self.update = [True] * cells
        forward = range(cells)
        backward = range(cells - 1, -1, -1)

        rounds = 0
        for _ in range(1, self.config.rounds):
            rounds += 1
            changed = 0
            for order in (forward, backward):
                for index in order:
                    if self.update[index]:
                        changed += self._set_pot(index, edge)
            if changed == 0:
                break
        self.rounds_used[edge] = rounds
        logger.debug("Edge %s converged after %d rounds", edge.name, rounds)

    def _set_pot(self, index: int, edge: Edge) -> int:
        self.update[index] = False
        self.bridge[index][edge] = 0.0

        state = self._cells[index]
        if state == edge.colour.opponent():
            return 0

        block_score, min_potential = self._calculate_potential(index, edge)

        bridge = self.bridge[index][edge]
        if self._is_inside(index):
            bridge += block_score
        else:
            bridge -= 2.0
        if self._is_corner(index):
            bridge /= 2.0
        self.bridge[index][edge] = min(bridge, self.config.bridge_cap)

        current = self.potential[index][edge]
        if state == edge.colour:
            candidate = min_potential
        else:
            candidate = min_potential + self.config.diff
        if candidate < current:
            self.potential[index][edge] = candidate
            self._update_neighbours(index)
            return 1
        return 0

    def _calculate_potential(self, index: int, edge: Edge) -> Tuple[int, int]:
        max_value = self.config.max_value
        values = [self._pot_val(neighbour, edge) for neighbour in self._neighbours[index]]

        block_score = 0
        for idx in range(6):
            if values[idx] >= max_value and values[(idx + 2) % 6] >= max_value:
                if values[(idx + 1) % 6] < 0:
                    block_score += ADJACENT_BLOCK_SCORE
                else:
                    values[(idx + 1) % 6] += BLOCKED_PAIR_PENALTY

        for idx in range(6):
            if values[idx] >= max_value and values[(idx + 3) % 6] >= max_value:
                block_score += OPPOSITE_BLOCK_SCORE

        weights = [1] * 6
        min_potential = max_value
        for idx in range(6):
            if values[idx] < 0:
                values[idx] += max_value
                weights[idx] = OWN_STONE_WEIGHT
            if min_potential > values[idx]:
                min_potential = values[idx]

        min_potential = self._score_bridge(edge, index, weights, values, min_potential)
        return block_score, min_potential

    def _score_bridge(
        self,
        edge: Edge,
        index: int,
        weights: Sequence[int],
        values: Sequence[int],
        min_potential: int,
    ) -> int:
        total_weight = float(sum(w for w, v in zip(weights, values) if v == min_potential))

        if edge.colour == self.active:
            edge_bridge_score = self.config.own_bridge_score
        else:
            edge_bridge_score = self.config.opponent_bridge_score

        bridge_score = total_weight / 5.0
        if 2.0 <= total_weight < 10.0:
            bridge_score = edge_bridge_score + total_weight - 2.0
            min_potential -= 32

        if total_weight < 2.0:
            closest_high = self.config.max_value
            for value in values:
                if min_potential < value < closest_high:
                    closest_high = value
            if closest_high <= min_potential + BRIDGE_TIE_CUTOFF:
                bridge_score = edge_bridge_score - (closest_high - min_potential) / 4.0
                min_potential -= 64
            # Integer halving rounds toward zero.
            min_potential = int((min_potential + closest_high) / 2)

        self.bridge[index][edge] = bridge_score
        return min_potential

    def _pot_val(self, neighbour: Optional[int], edge: Edge) -> int:
        if neighbour is None:
            return self.config.max_value
        state = self._cells[neighbour]
        if state == PieceState.EMPTY:
            return self.potential[neighbour][edge]
        if state == edge.colour.opponent():
            return self.config.max_value
        return self.potential[neighbour][edge] - self.config.max_value

    def _update_neighbours(self, index: int) -> None:
        for neighbour in self._neighbours[index]:
            if neighbour is not None:
                self.update[neighbour] = True

    def _is_inside(self, index: int) -> bool:
        row, col = divmod(index, self.board.size)
        last = self.board.size - 1
        return 0 < row < last and 0 < col < last

    def _is_corner(self, index: int) -> bool:
        row, col = divmod(index, self.board.size)
        last = self.board.size - 1
        return row in (0, last) and col in (0, last)

    # ------------------------------------------------------------------
    # Move selection
    # ------------------------------------------------------------------
    def decay_factor(self, move_count: int) -> float:
        # The side that did not open has one fewer stone behind it.
        moves = move_count if self.active == self.starting else move_count + 1
        if moves <= 0:
            return 0.0
        return self.config.decay / float(moves * moves)

    def quadrant(self) -> Tuple[int, int]:
        size = self.board.size
        grid = self.board.cells.reshape(size, size)
        rows, cols = np.nonzero(grid)
        iq = int(np.sum(2 * rows + 1 - size))
        jq = int(np.sum(2 * cols + 1 - size))
        return int(np.sign(iq)), int(np.sign(jq))

    def score_moves(self, move_count: int, rng: Rand) -> Dict[Tile, float]:
        """Score every empty cell; lower is better. Draws one float per cell, row-major."""
        cfg = self.config
        size = self.board.size
        centre = size // 2
        ff = self.decay_factor(move_count)
        iq, jq = self.quadrant()

        scores: Dict[Tile, float] = {}
        for index, state in enumerate(self._cells):
            if state != PieceState.EMPTY:
                continue
            i, j = divmod(index, size)
            mmp = (abs(i - centre) + abs(j - centre)) * ff + rng.next_float()
            mmp += cfg.quadrant_weight * (iq * (i - centre) + jq * (j - centre)) / (move_count + 1)
            mmp -= sum(self.bridge[index])

            pot = self.potential[index]
            black_pair = pot[Edge.TOP] + pot[Edge.BOTTOM]
            white_pair = pot[Edge.LEFT] + pot[Edge.RIGHT]
            if cfg.include_opponent_potential:
                mmp += black_pair + white_pair
            else:
                mmp += black_pair if self.active == Colour.BLACK else white_pair
            if black_pair <= cfg.critical_threshold or white_pair <= cfg.critical_threshold:
                mmp -= cfg.critical_bonus
            scores[Tile.regular(i, j)] = mmp
        return scores

    def get_best_move(self, move_count: int, rng: Rand) -> Tile:
        best: Optional[Tile] = None
        best_score = float("inf")
        for tile, score in self.score_moves(move_count, rng).items():
            if score < best_score:
                best_score = score
                best = tile
        if best is None:
            raise RuntimeError("No empty cell left to play.")
        logger.debug("Best move for %s: %s (score %.2f)", self.active, best, best_score)
        return best

    # ------------------------------------------------------------------
    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Potential and bridge tables as ``(size * size, 4)`` arrays indexed by :class:`Edge`."""
        potential = np.array(self.potential, dtype=np.int32)
        bridge = np.array(self.bridge, dtype=np.float32)
        return potential, bridge
