"""Pincerhex: a potential-field Hex bot."""

from . import bot, core, env, evaluation, potential
from .bot import HexBot, SwapRole, compute_move
from .config import evaluator_config_from_dict, load_yaml_config
from .core import (
    Board,
    Colour,
    Move,
    NumpyRand,
    PieceState,
    PincerhexError,
    Rand,
    State,
    Tile,
    UnionFind,
    Winner,
)
from .env import HexEnv
from .evaluation import BotPlayer, EvaluationResult, RandomPlayer, evaluate_players, play_game
from .potential import EvaluatorConfig, PotentialEvaluator

__all__ = [
    "bot",
    "core",
    "env",
    "evaluation",
    "potential",
    "Board",
    "Colour",
    "Move",
    "PieceState",
    "Tile",
    "UnionFind",
    "State",
    "Winner",
    "Rand",
    "NumpyRand",
    "PincerhexError",
    "EvaluatorConfig",
    "PotentialEvaluator",
    "HexBot",
    "SwapRole",
    "compute_move",
    "HexEnv",
    "BotPlayer",
    "RandomPlayer",
    "EvaluationResult",
    "evaluate_players",
    "play_game",
    "load_yaml_config",
    "evaluator_config_from_dict",
]
