from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from pincerhex.bot import HexBot
from pincerhex.core import Colour, NumpyRand, PieceState, Winner
from pincerhex.potential import EvaluatorConfig


class HexEnv(gym.Env):
    """Hex against the potential-field bot.

    The agent plays ``player_colour``; the bot answers every move with the
    opposite colour. Black moves first, so when the agent plays White the
    bot's opening stone is already on the board after :meth:`reset`.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        size: int = 7,
        player_colour: Colour = Colour.BLACK,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
        opponent_config: Optional[EvaluatorConfig] = None,
    ) -> None:
        super().__init__()
        self.size = size
        self.player_colour = player_colour
        self._enforce_legal = enforce_legal_actions
        self._opponent_config = opponent_config
        self.render_mode = render_mode

        self.observation_space = spaces.Box(low=0.0, high=1.0, shape=(2, size, size), dtype=np.float32)
        self.action_space = spaces.Discrete(size * size)

        self._bot = self._new_bot()

    def _new_bot(self) -> HexBot:
        bot = HexBot(
            self.player_colour.opponent(),
            rng=NumpyRand(self.np_random),
            swap_rule=False,
            config=self._opponent_config,
        )
        bot.init_board(self.size)
        return bot

    @property
    def bot(self) -> HexBot:
        return self._bot

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._bot = self._new_bot()
        if self._bot.colour == Colour.BLACK:
            self._bot.make_move()
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        action_index = int(action_index)
        board = self._bot.state.get_board()
        tile = board.index_to_tile(action_index)
        if board.get_tile(tile) != PieceState.EMPTY:
            if self._enforce_legal:
                raise ValueError("Illegal action provided and enforce_legal_actions=True.")
            # Occupied cell: the move is forfeited and the bot plays on.
        else:
            self._bot.state.place_piece(tile, PieceState.of(self.player_colour))

        reward, terminated = self._outcome()
        if not terminated:
            self._bot.make_move()
            reward, terminated = self._outcome()

        return self._build_observation(), reward, terminated, False, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        return (self._bot.state.get_board().cells == PieceState.EMPTY).astype(np.int8)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._bot.get_pretty()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _outcome(self):
        winner = self._bot.check_win()
        if winner == Winner.OPPONENT:
            return 1.0, True
        if winner == Winner.BOT:
            return -1.0, True
        return 0.0, not self.legal_action_mask().any()

    def _build_observation(self) -> np.ndarray:
        cells = self._bot.state.get_board().cells.reshape(self.size, self.size)
        observation = np.zeros((2, self.size, self.size), dtype=np.float32)
        observation[0] = cells == PieceState.BLACK
        observation[1] = cells == PieceState.WHITE
        return observation

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}
