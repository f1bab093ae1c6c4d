# Copyright (C) 2023 simple_std contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import sys
import time

from datetime import timedelta

import simple_std.common.color as color

LOG_LEVEL = {
    "DEBUG": 1, # verbose/debug - enable with --verbose or --debug
    "INFO":  2, # normal reporting
    "WARN":  3, # minor/correctable issues, default console level
    "ERROR": 4, # major/fatal issues
}

# Console output always goes to stderr. stdout belongs to the caller's
# prompts and answers.
#
# --quiet - only errors on the console
# --verbose - enable logger.debug() on the console
# --debug - max verbosity, also for the log file
# --log - log outputs to file, combine with --debug for max verbosity


class Logger():
    def __init__(self):
        self.init_time = time.time()
        self.console_level = LOG_LEVEL["WARN"]
        self.file_level = None
        self.log_file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return

    def init(self, console_level="WARN", file_level=None, log_file=None):
        self.close()
        self.console_level = LOG_LEVEL[console_level]
        self.file_level = None
        if file_level and log_file:
            self.file_level = LOG_LEVEL[file_level]
            self.log_file = open(log_file, "a")

    def close(self):
        if self.log_file:
            self.log_file.close()
            self.log_file = None
        self.file_level = None

    def file_log(self, msg_level, msg):
        if self.file_level and self.file_level <= LOG_LEVEL[msg_level]:
            self.log_file.write(str(timedelta(seconds=time.time() - self.init_time)) + " " + msg + "\n")
            self.log_file.flush()

    def console_log(self, msg_level, msg, code=None):
        if self.console_level > LOG_LEVEL[msg_level]:
            return
        if code:
            msg = color.paint(msg, code, sys.stderr)
        print(msg, file=sys.stderr, flush=True)

    def debug(self, msg):
        self.file_log("DEBUG", msg)
        self.console_log("DEBUG", msg)

    def info(self, msg):
        self.file_log("INFO", msg)
        self.console_log("INFO", msg)

    def warn(self, msg):
        self.file_log("WARN", color.WARNING_PREFIX + msg)
        self.console_log("WARN", msg, color.WARNING)

    def error(self, msg):
        self.file_log("ERROR", color.ERROR_PREFIX + msg)
        self.console_log("ERROR", color.ERROR_PREFIX + msg, color.FAIL)

logger = Logger()

def init_logger(config):
    global logger

    # Default is WARN level to console, and no file logging.
    # Useful modifiers:
    #  -v / -q to increase/decrease console logging
    #  -l / --log to enable file logging at standard level
    #  --debug to log everything, to console and file
    #
    # We allow some sensible combinations, e.g. --quiet --log [--debug]
    if config.quiet:
        console_level = "ERROR"
    elif config.verbose or config.debug:
        console_level = "DEBUG"
    else:
        console_level = "WARN"

    if config.log:
        if config.debug:
            file_level = "DEBUG"
        else:
            file_level = "INFO"
    else:
        file_level = None

    logger.init(console_level, file_level, config.log_file)
