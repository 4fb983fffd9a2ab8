"""Play the potential-field bot against a baseline and report results as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from pincerhex.config import evaluator_config_from_dict, load_yaml_config
from pincerhex.core import MAX_BOARD_SIZE

from .match import BotPlayer, RandomPlayer, evaluate_players


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=str, help="YAML file with evaluator/evaluation sections")
    parser.add_argument("--episodes", type=int, default=None)
    parser.add_argument("--size", type=int, default=None)
    parser.add_argument("--baseline", choices=["random", "bot"], default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), stream=sys.stderr)

    cfg = load_yaml_config(Path(args.config)) if args.config else {}
    eval_cfg = cfg.get("evaluation", {})
    episodes = args.episodes if args.episodes is not None else int(eval_cfg.get("episodes", 20))
    size = args.size if args.size is not None else int(eval_cfg.get("size", 7))
    baseline = args.baseline or eval_cfg.get("baseline", "random")
    seed = args.seed if args.seed is not None else eval_cfg.get("seed")

    if not 1 <= size <= MAX_BOARD_SIZE:
        parser.error(f"--size must be between 1 and {MAX_BOARD_SIZE}")
    if baseline not in ("random", "bot"):
        parser.error(f"unknown baseline {baseline!r}")

    rng = np.random.default_rng(seed)
    evaluator_config = evaluator_config_from_dict(cfg.get("evaluator", {}))
    bot = BotPlayer(rng=rng, config=evaluator_config)
    if baseline == "random":
        opponent = RandomPlayer(rng=rng)
    else:
        opponent = BotPlayer(rng=rng, config=evaluator_config)

    result = evaluate_players(bot, opponent, episodes=episodes, size=size)

    output = {
        "games": result.games_played,
        "bot_wins": result.player_a_wins,
        "baseline_wins": result.player_b_wins,
        "black_wins": result.black_wins,
        "white_wins": result.white_wins,
        "average_length": result.average_length,
        "bot_winrate": result.winrate_player_a(),
    }
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
