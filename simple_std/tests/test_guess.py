# Copyright (C) 2023 simple_std contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Test the guess-the-number game end to end, with scripted stdin
"""

import argparse
import io
import sys

from simple_std.common.logger import logger
from simple_std.guess import core

from simple_std.tests.helper import FixedGenerator


def game_config(**kwargs):
    config = argparse.Namespace(low=0, high=100, max_tries=None,
                                verbose=False, quiet=False, debug=False,
                                log=False, log_file=None)
    for key, value in kwargs.items():
        setattr(config, key, value)
    return config


def test_win(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("50\n10\n41\n"))

    assert(0 == core.start(game_config(), generator=FixedGenerator(41)))

    out = capsys.readouterr().out
    assert("Guess a number between 0 and 99!" in out)
    assert(out.index("Too Big") < out.index("Too Small") < out.index("You win! (3 tries)"))

def test_offset_range(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n"))

    # offset 2 into [1, 7) is the number 3
    assert(0 == core.start(game_config(low=1, high=7), generator=FixedGenerator(2)))
    assert("You win! (1 tries)" in capsys.readouterr().out)

def test_not_a_number(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\n\n 7 \n"))

    assert(0 == core.start(game_config(max_tries=1), generator=FixedGenerator(7)))

    captured = capsys.readouterr()
    assert("Not a number: 'abc'" in captured.err)
    assert("Not a number: ''" in captured.err)
    assert("You win!" in captured.out)

def test_quiet_hides_warnings(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\n7\n"))

    assert(0 == core.start(game_config(quiet=True), generator=FixedGenerator(7)))
    assert("Not a number" not in capsys.readouterr().err)

def test_input_closed(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n"))

    assert(1 == core.start(game_config(), generator=FixedGenerator(41)))
    assert("Goodbye. The number was 41." in capsys.readouterr().out)

def test_out_of_tries(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n2\n3\n"))

    assert(1 == core.start(game_config(max_tries=2), generator=FixedGenerator(41)))

    out = capsys.readouterr().out
    assert(out.count("Too Small") == 2)
    assert("Out of tries. The number was 41." in out)

def test_empty_range_rejected(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n"))

    assert(-1 == core.start(game_config(low=5, high=5), generator=FixedGenerator(0)))
    assert("Empty game range" in capsys.readouterr().err)

def test_log_file(monkeypatch, capsys, tmp_path):
    log_file = tmp_path / "game.log"
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\n7\n"))

    config = game_config(log=True, debug=True, log_file=str(log_file))
    assert(0 == core.start(config, generator=FixedGenerator(7)))
    assert(logger.log_file is None), "log file left open"

    content = log_file.read_text()
    assert("Secret number drawn from [0, 100)" in content)
    assert("[WARN] Not a number: 'x'" in content)

def test_bad_options_rejected(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("41\n"))

    for options in [dict(max_tries=0), dict(low=1.5), dict(high="100")]:
        assert(-1 == core.start(game_config(**options), generator=FixedGenerator(41)))
        captured = capsys.readouterr()
        assert("[ERROR] Game option" in captured.err)
        assert(captured.out == ""), "game started despite bad options"

def test_verbose_logs_stay_off_stdout(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))

    assert(1 == core.start(game_config(verbose=True), generator=FixedGenerator(41)))

    captured = capsys.readouterr()
    assert("Secret number drawn from [0, 100)" in captured.err)
    assert("End of stdin reached" in captured.err)
    assert("Input closed, giving up." in captured.err)
    assert(captured.out == "Guess a number between 0 and 99!\nGuess: \nGoodbye. The number was 41.\n")
