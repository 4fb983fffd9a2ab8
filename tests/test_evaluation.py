import json

import numpy as np

from pincerhex.core import Colour
from pincerhex.evaluation import BotPlayer, RandomPlayer, evaluate_players, play_game
from pincerhex.evaluation.cli import main


def test_random_game_ends_with_a_winner() -> None:
    rng = np.random.default_rng(0)
    record = play_game(RandomPlayer(rng), RandomPlayer(rng), size=4)

    assert record.winner in (Colour.BLACK, Colour.WHITE)
    assert 4 <= len(record.moves) <= 16
    assert len(set(record.moves)) == len(record.moves)


def test_evaluate_random_vs_random_small() -> None:
    player_a = RandomPlayer(np.random.default_rng(0))
    player_b = RandomPlayer(np.random.default_rng(1))
    result = evaluate_players(player_a, player_b, episodes=4, size=4)

    assert result.games_played == 4
    assert result.player_a_wins + result.player_b_wins == 4
    assert result.black_wins + result.white_wins == 4
    assert result.average_length >= 4
    assert 0.0 <= result.winrate_player_a() <= 1.0


def test_bot_player_against_random() -> None:
    bot = BotPlayer(np.random.default_rng(2))
    baseline = RandomPlayer(np.random.default_rng(3))
    result = evaluate_players(bot, baseline, episodes=2, size=4)
    assert result.games_played == 2
    assert result.winrate_player_a() + result.winrate_player_b() == 1.0


def test_cli_prints_json(capsys) -> None:
    assert main(["--episodes", "2", "--size", "3", "--seed", "0", "--log-level", "WARNING"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["games"] == 2
    assert output["bot_wins"] + output["baseline_wins"] == 2
