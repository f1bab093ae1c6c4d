# Copyright (C) 2023 simple_std contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

OKGREEN =    '\033[92m'
WARNING =    '\033[0;33m'
FAIL =       '\033[91m'
ENDC =       '\033[0m'

WARNING_PREFIX =  "[WARN] "
ERROR_PREFIX =    "[ERROR] "


def paint(msg, code, stream):
    """Wrap msg in an ANSI color code, but only when stream is a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty and isatty():
        return code + msg + ENDC
    return msg
