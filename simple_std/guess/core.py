# Copyright (C) 2023 simple_std contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Guess-the-number game, built from the simple_std helpers.
"""

import sys
import time

import simple_std.common.color as color
from simple_std.common.logger import init_logger, logger
from simple_std.common.rand import random_int_range
from simple_std.common.self_check import post_self_check
from simple_std.console import InputUnavailable, read_line


def play(low, high, max_tries=None, generator=None):

    number = random_int_range(low, high, generator=generator)
    logger.debug("Secret number drawn from [%d, %d)" % (low, high))

    print("Guess a number between %d and %d!" % (low, high - 1))

    tries = 0
    while max_tries is None or tries < max_tries:
        try:
            text = read_line("Guess: ")
        except InputUnavailable:
            print()
            logger.info("Input closed, giving up.")
            print("Goodbye. The number was %d." % number)
            return 1

        try:
            guess = int(text.strip())
        except ValueError:
            logger.warn("Not a number: %r" % text)
            continue

        tries += 1
        if guess < number:
            print("Too Small")
        elif guess > number:
            print("Too Big")
        else:
            print(color.paint("You win! (%d tries)" % tries, color.OKGREEN, sys.stdout))
            return 0

    print("Out of tries. The number was %d." % number)
    return 1


def start(config, generator=None):

    if not post_self_check(config):
        return -1

    init_logger(config)

    start_time = time.time()
    ret = 1
    with logger:
        try:
            ret = play(config.low, config.high, config.max_tries, generator=generator)
        except KeyboardInterrupt:
            print()
            logger.info("Received Ctrl-C, aborting...")
        logger.debug("Game took %.1fs" % (time.time() - start_time))

    return ret
