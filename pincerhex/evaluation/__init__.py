"""Evaluation helpers for Pincerhex players."""

from .match import (
    BotPlayer,
    EvaluationResult,
    GameRecord,
    Player,
    RandomPlayer,
    evaluate_players,
    play_game,
)

__all__ = [
    "BotPlayer",
    "EvaluationResult",
    "GameRecord",
    "Player",
    "RandomPlayer",
    "evaluate_players",
    "play_game",
]
