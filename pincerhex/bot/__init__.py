"""Hex-playing agent and the stateless move entry point."""

from .agent import HexBot, SwapRole
from .stateless import compute_move, pack_tile, unpack_player_move

__all__ = ["HexBot", "SwapRole", "compute_move", "pack_tile", "unpack_player_move"]
