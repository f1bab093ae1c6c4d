#!/usr/bin/env python3
#
# Copyright (C) 2023 simple_std contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Play guess-the-number on the console, using the simple_std helpers.
"""

import sys

from simple_std.common.self_check import self_check
from simple_std.common.config import ConfigArgsParser
from simple_std.guess import core

def main():

    if not self_check():
        return 1

    parser = ConfigArgsParser()
    config = parser.parse_guess_options()

    return core.start(config)


if __name__ == "__main__":
    sys.exit(main())
