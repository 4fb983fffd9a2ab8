"""Line-oriented command protocol for driving a :class:`HexBot` over stdin/stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from pincerhex.bot import HexBot
from pincerhex.config import evaluator_config_from_dict, load_yaml_config
from pincerhex.core import (
    MAX_BOARD_SIZE,
    Colour,
    InvalidColourError,
    NumpyRand,
    PieceState,
    PincerhexError,
    Winner,
)


class ReplError(ValueError):
    pass


def _init_board(bot: HexBot, args: Sequence[str]) -> Optional[str]:
    try:
        size = int(args[0])
    except (IndexError, ValueError) as exc:
        raise ReplError("usage: init_board <size>") from exc
    if not 1 <= size <= MAX_BOARD_SIZE:
        raise ReplError("usage: init_board <size>")
    bot.init_board(size)
    return None


def _make_move(bot: HexBot, args: Sequence[str]) -> Optional[str]:
    return str(bot.make_move())


def _set_opponent(bot: HexBot, args: Sequence[str]) -> Optional[str]:
    bot.set_tile(args[0] if args else None, PieceState.of(bot.colour.opponent()))
    return None


def _set_own(bot: HexBot, args: Sequence[str]) -> Optional[str]:
    bot.set_tile(args[0] if args else None, PieceState.of(bot.colour))
    return None


def _unset(bot: HexBot, args: Sequence[str]) -> Optional[str]:
    bot.set_tile(args[0] if args else None, PieceState.EMPTY)
    return None


def _swap(bot: HexBot, args: Sequence[str]) -> Optional[str]:
    bot.swap()
    return None


def _check_win(bot: HexBot, args: Sequence[str]) -> Optional[str]:
    winner = bot.check_win()
    if winner == Winner.BOT:
        return "1"
    if winner == Winner.OPPONENT:
        return "-1"
    return "0"


Command = Callable[[HexBot, Sequence[str]], Optional[str]]

COMMANDS: Dict[str, Command] = {
    "i": _init_board,
    "init_board": _init_board,
    "b": lambda bot, args: bot.get_compressed(),
    "show_board": lambda bot, args: bot.get_compressed(),
    "p": lambda bot, args: bot.get_pretty(),
    "pretty_board": lambda bot, args: bot.get_pretty(),
    "v": _make_move,
    "make_move": _make_move,
    "o": _set_opponent,
    "seto": _set_opponent,
    "y": _set_own,
    "sety": _set_own,
    "unset": _unset,
    "swap": _swap,
    "c": _check_win,
    "check_win": _check_win,
}


def process_line(bot: HexBot, line: str) -> Optional[str]:
    """Run one command. Returns the text to print, or ``None`` when there is nothing to show."""
    words: List[str] = line.split()
    if not words:
        return None
    command = COMMANDS.get(words[0])
    if command is None:
        raise ReplError("invalid command")
    return command(bot, words[1:])


def run(bot: HexBot, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    for line in stdin:
        try:
            output = process_line(bot, line)
        except (ReplError, PincerhexError) as exc:
            print(exc, file=stderr)
            continue
        if output is not None:
            print(output, file=stdout, flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Pincerhex text protocol on stdin/stdout.")
    parser.add_argument("colour", help="Colour the bot starts as: black/b or white/w")
    parser.add_argument("--config", type=str, help="YAML file with evaluator settings")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-swap", action="store_true", help="Disable the pie rule")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), stream=sys.stderr)

    try:
        colour = Colour.parse(args.colour)
    except InvalidColourError:
        parser.error(f"usage: {parser.prog} <colour>")

    cfg = load_yaml_config(Path(args.config)) if args.config else {}
    bot = HexBot(
        colour,
        rng=NumpyRand.from_seed(args.seed),
        swap_rule=not args.no_swap,
        config=evaluator_config_from_dict(cfg.get("evaluator", {})),
    )
    try:
        run(bot, sys.stdin, sys.stdout, sys.stderr)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
