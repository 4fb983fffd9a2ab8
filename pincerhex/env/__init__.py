"""Gymnasium environment wrapping a game against the bot."""

from .gym_env import HexEnv

__all__ = ["HexEnv"]
