# Copyright (C) 2023 simple_std contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import argparse
import os
import re

import confuse
from flatdict import FlatDict

from simple_std.common.logger import logger


class FullPath(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, os.path.abspath(os.path.expanduser(values)))


def parse_range(string):
    m = re.match(r"(-?\d+)-(-?\d+)$", string.strip())
    if not m:
        raise argparse.ArgumentTypeError("'" + string + "' is not a range of numbers.")
    low = int(m.group(1))
    high = int(m.group(2))
    if low >= high:
        raise argparse.ArgumentTypeError("Empty range '%s' - low must be less than high." % string)
    return low, high


def parse_positive(string):
    try:
        value = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError("'" + string + "' is not a number.")
    if value <= 0:
        raise argparse.ArgumentTypeError("'" + string + "' must be larger than zero.")
    return value


def debug_enabled():
    return 'SIMPLE_STD_CONFIG_DEBUG' in os.environ


# General startup options
def add_args_general(parser):
    parser.add_argument('-h', '--help', action='help',
                        help='show this help message and exit')
    parser.add_argument('-v', '--verbose', required=False, action='store_true', default=False,
                        help='enable verbose output')
    parser.add_argument('-q', '--quiet', help='only print errors to console',
                        required=False, action='store_true', default=False)
    parser.add_argument('-l', '--log', help='enable logging to --log-file',
                        action='store_true', default=False)
    parser.add_argument('--log-file', metavar='<file>', action=FullPath, type=str,
                        help='path to the log file (default: simple_std.log)',
                        default='simple_std.log')
    parser.add_argument('--debug', help='enable max logging verbosity',
                        action='store_true', default=False)

# Guessing game options
def add_args_game(parser):
    parser.add_argument('--low', metavar='<n>', type=int, default=0,
                        help='smallest possible number (default: 0)')
    parser.add_argument('--high', metavar='<n>', type=int, default=100,
                        help='upper bound, never drawn itself (default: 100)')
    parser.add_argument('--range', metavar='<low-high>', type=parse_range, default=None,
                        help='shorthand for --low and --high, e.g. 1-7')
    parser.add_argument('--max-tries', metavar='<n>', type=parse_positive, default=None,
                        help='give up after <n> guesses (default: unlimited)')


class ConfigArgsParser():

    def _base_parser(self):
        short_usage = '%(prog)s [general options] [game options]'
        return argparse.ArgumentParser(usage=short_usage, add_help=False, fromfile_prefix_chars='@')

    def _load_config(self):

        config = confuse.Configuration('simple_std', modname='simple_std', read=False)

        # check default config search paths
        config.read(defaults=True, user=True)

        # local / workdir config
        workdir_config = os.path.join(os.getcwd(), 'simple_std.yaml')
        if os.path.exists(workdir_config):
            config.set_file(workdir_config, base_for_paths=True)

        # ENV based config
        if 'SIMPLE_STD_CONFIG' in os.environ:
            config.set_file(os.environ['SIMPLE_STD_CONFIG'], base_for_paths=True)

        return config

    def _parse_with_config(self, parser, argv=None):

        config = self._load_config()

        # merge all configs into a flat dictionary, delimiter = ':'
        config_values = FlatDict(config.flatten())
        if debug_enabled():
            print("Options picked up from config: %s" % str(config_values))

        # adopt defaults into parser, fixup 'required' and file/path fields
        for action in parser._actions:
            if action.dest in config_values:
                if isinstance(action, FullPath):
                    action.default = config[action.dest].as_filename()
                else:
                    action.default = config[action.dest].get()
                action.required = False

        # options not defined in argparse are ignored
        known = [action.dest for action in parser._actions]
        for option in config_values.keys():
            if option not in known and debug_enabled():
                logger.warn("Dropping unrecognized option '%s'." % option)

        args = parser.parse_args(argv)

        if debug_enabled():
            print("Final parsed args: %s" % repr(args))
        return args

    def parse_guess_options(self, argv=None):

        parser = self._base_parser()

        general = parser.add_argument_group('General options')
        add_args_general(general)

        game = parser.add_argument_group('Game options')
        add_args_game(game)

        args = self._parse_with_config(parser, argv)

        # --range wins over --low/--high
        if args.range:
            args.low, args.high = args.range
        return args
