import io
import sys

import pytest

from pincerhex.bot import HexBot
from pincerhex.core import Colour, NumpyRand
from pincerhex.repl import ReplError, main, process_line, run


def make_bot(colour: Colour = Colour.BLACK) -> HexBot:
    return HexBot(colour, rng=NumpyRand.from_seed(0))


def test_init_and_show_board() -> None:
    bot = make_bot()
    assert process_line(bot, "i 4") is None
    assert process_line(bot, "b") == "....|....|....|....|"
    assert process_line(bot, "show_board") == "....|....|....|....|"
    assert process_line(bot, "p").endswith("------------------")
    assert process_line(bot, "   ") is None


def test_init_board_usage() -> None:
    bot = make_bot()
    for line in ("i", "i x", "init_board 0", "i 500"):
        with pytest.raises(ReplError) as excinfo:
            process_line(bot, line)
        assert str(excinfo.value) == "usage: init_board <size>"


def test_unknown_command() -> None:
    with pytest.raises(ReplError, match="invalid command"):
        process_line(make_bot(), "hello")


def test_set_and_unset_stones() -> None:
    bot = make_bot()
    process_line(bot, "i 3")
    process_line(bot, "o a1")
    process_line(bot, "y c3")
    assert process_line(bot, "b") == "W..|...|..B|"
    process_line(bot, "unset a1")
    assert process_line(bot, "b") == "...|...|..B|"


def test_check_win_codes() -> None:
    bot = make_bot()
    process_line(bot, "i 3")
    assert process_line(bot, "c") == "0"
    for notation in ("a1", "a2", "a3"):
        process_line(bot, f"seto {notation}")
    assert process_line(bot, "check_win") == "-1"
    process_line(bot, "swap")
    assert bot.colour == Colour.WHITE
    assert process_line(bot, "c") == "1"


def test_make_move_prints_notation() -> None:
    bot = make_bot()
    process_line(bot, "i 5")
    output = process_line(bot, "v")
    assert output is not None
    assert output[0] in "abcde"
    assert bot.state.get_board().stone_count() == 1


def test_run_reports_errors_on_stderr() -> None:
    stdin = io.StringIO("i 3\nfoo\no\no a9\nb\n")
    stdout = io.StringIO()
    stderr = io.StringIO()
    run(make_bot(), stdin, stdout, stderr)

    assert stdout.getvalue() == "...|...|...|\n"
    assert stderr.getvalue() == "invalid command\nempty move\ninvalid tile\n"


def test_main_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("i 3\nb\n"))
    assert main(["white", "--seed", "1"]) == 0
    assert capsys.readouterr().out == "...|...|...|\n"


def test_main_rejects_bad_colour() -> None:
    with pytest.raises(SystemExit):
        main(["purple"])


def test_make_move_on_full_board_reports_error() -> None:
    stdin = io.StringIO("i 1\ny a1\nv\nb\n")
    stdout = io.StringIO()
    stderr = io.StringIO()
    run(make_bot(), stdin, stdout, stderr)

    assert stderr.getvalue() == "board full\n"
    assert stdout.getvalue() == "B|\n"
