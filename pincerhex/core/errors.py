from __future__ import annotations

from typing import Optional


class PincerhexError(ValueError):
    """Base class for recoverable errors reported back to callers."""

    message = "pincerhex error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class TileError(PincerhexError):
    message = "invalid tile notation"


class InvalidRowError(TileError):
    message = "invalid row"


class InvalidColError(TileError):
    message = "invalid col"


class InvalidColourError(TileError):
    message = "invalid colour"


class BoardError(PincerhexError):
    message = "board error"


class NotInRangeError(BoardError):
    message = "not in range"


class StateError(PincerhexError):
    message = "state error"


class InvalidTileError(StateError):
    message = "invalid tile"


class TileNotEmptyError(StateError):
    message = "tile not empty"


class BotError(PincerhexError):
    message = "bot error"


class EmptyMoveError(BotError):
    message = "empty move"


class BoardFullError(BotError):
    message = "board full"
