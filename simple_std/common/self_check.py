# Copyright (C) 2023 simple_std contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import sys

from simple_std.common.logger import logger


def check_version():
    if sys.version_info < (3, 6, 0):
        logger.error("This script requires python 3.6 or newer!")
        return False
    return True


def check_packages():

    deps = [
            'fastrand',
            'confuse',
            'flatdict',
            ]

    for pkg in deps:
        try:
            importlib.import_module(pkg)
        except (ImportError):
            logger.error("Failed to import package %s - check dependencies!" % pkg)
            return False

    return True

def check_game_options(config):
    for name in ("low", "high"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int):
            logger.error("Game option %s must be an integer, got %r." % (name, value))
            return False
    max_tries = config.max_tries
    if max_tries is not None and (isinstance(max_tries, bool) or not isinstance(max_tries, int) or max_tries <= 0):
        logger.error("Game option max_tries must be a number larger than zero, got %r." % (max_tries,))
        return False
    return True

def check_game_range(config):
    if config.low >= config.high:
        logger.error("Empty game range [%d, %d) - --low must be less than --high." % (config.low, config.high))
        return False
    return True

def self_check():
    if not check_version():
        return False
    if not check_packages():
        return False
    return True


def post_self_check(config):
    if not check_game_options(config):
        return False
    if not check_game_range(config):
        return False
    return True
