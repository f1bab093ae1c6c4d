# Copyright (C) 2023 simple_std contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Line-based console input, similar to Python's builtin input()
"""

import sys

from simple_std.common.logger import logger


class InputUnavailable(EOFError):
    """Raised when standard input is closed before a line could be read."""


def read_line(prompt=None):
    """
    Read a single line from stdin and return it without the line terminator.

    If prompt is given it is written to stdout first, without a line break,
    and flushed so it shows up before we block on input. An empty line
    returns "", a closed stdin raises InputUnavailable.
    """
    if prompt is not None:
        sys.stdout.write(prompt)
        sys.stdout.flush()

    if sys.stdin is None:
        logger.debug("No stdin attached to this process")
        raise InputUnavailable("standard input is not available")

    line = sys.stdin.readline()
    if not line:
        logger.debug("End of stdin reached")
        raise InputUnavailable("standard input is closed")

    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    # last line of the stream, no terminator
    return line


def prompt(message):
    """Read a single line of input, with message on the same line."""
    return read_line(message)
