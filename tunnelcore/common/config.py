# Copyright 2017-2019 Sergej Schumilo, Cornelius Aschermann, Tim Blazytko
# Copyright 2019-2020 Intel Corporation
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import argparse
import os

import confuse
from flatdict import FlatDict

from tunnelcore.common.logger import logger


class FullPath(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, os.path.abspath(os.path.expanduser(values)))


def parse_is_file(filename):
    if not os.path.isfile(filename):
        msg = "{0} is not a file".format(filename)
        raise argparse.ArgumentTypeError(msg)
    else:
        return filename


def parse_fraction(string):
    try:
        value = float(string)
    except ValueError:
        raise argparse.ArgumentTypeError("'" + string + "' is not a number.")
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError("Value out of range (must be within 0..1).")
    return value


def parse_count(string):
    try:
        value = int(string, 0)
    except ValueError:
        raise argparse.ArgumentTypeError("'" + string + "' is not an integer.")
    if value < 0:
        raise argparse.ArgumentTypeError("Value must not be negative.")
    return value


def hidden(msg, unmask=False):
    if unmask or 'TUNNELCORE_CONFIG_DEBUG' in os.environ:
        return msg
    return argparse.SUPPRESS


# General startup options
def add_args_general(parser):
    parser.add_argument('-h', '--help', action='help',
                        help='show this help message and exit')
    parser.add_argument('-v', '--verbose', required=False, action='store_true', default=False,
                        help='enable verbose output')
    parser.add_argument('-q', '--quiet', help='only print warnings and errors to console',
                        required=False, action='store_true', default=False)
    parser.add_argument('-l', '--log', help='enable logging to --log-file',
                        action='store_true', default=False)
    parser.add_argument('--log-file', metavar='<file>', action=FullPath, type=str, default='tunnelcore.log',
                        help='log file used with --log (default: tunnelcore.log)')
    parser.add_argument('--debug', help='max logging verbosity',
                        action='store_true', default=False)


# One sub-command per helper
def add_args_commands(parser):
    commands = parser.add_subparsers(dest='command', metavar='<command>')
    commands.required = True

    cmd = commands.add_parser('perm', help='print a random permutation of 0..n-1')
    cmd.add_argument('n', metavar='<n>', type=parse_count)

    cmd = commands.add_parser('range', help='print a random integer within [min, max]')
    cmd.add_argument('min_value', metavar='<min>', type=int)
    cmd.add_argument('max_value', metavar='<max>', type=int)

    cmd = commands.add_parser('period', help='print a random duration within [min, max] microseconds')
    cmd.add_argument('min_period', metavar='<min>', type=parse_count)
    cmd.add_argument('max_period', metavar='<max>', type=parse_count)

    cmd = commands.add_parser('jitter', help='print <n> with random jitter applied')
    cmd.add_argument('n', metavar='<n>', type=int)
    cmd.add_argument('-f', '--factor', dest='jitter_factor', metavar='<f>', type=parse_fraction, default=0.1,
                     help='max relative deviation (default: 0.1)')

    cmd = commands.add_parser('coin', help='flip a weighted coin')
    cmd.add_argument('-w', '--weight', dest='coin_weight', metavar='<w>', type=parse_fraction, default=0.5,
                     help='probability of heads (default: 0.5)')
    cmd.add_argument('-c', '--count', dest='coin_count', metavar='<n>', type=parse_count, default=1,
                     help='number of flips (default: 1)')

    for name, text in [('compress', 'compress <input> to <output>'),
                       ('decompress', 'decompress <input> to <output>')]:
        cmd = commands.add_parser(name, help=text)
        cmd.add_argument('input', metavar='<input>', action=FullPath, type=parse_is_file)
        cmd.add_argument('output', metavar='<output>', action=FullPath, type=str)
        cmd.add_argument('--level', dest='compression_level', metavar='<n>', type=int, default=0,
                         help=hidden('lz4 compression level (default: 0)'))

    cmd = commands.add_parser('bytes', help='format a byte count')
    cmd.add_argument('n', metavar='<n>', type=parse_count)


def iter_actions(parser):
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            for subparser in action.choices.values():
                yield from iter_actions(subparser)
        else:
            yield action


class ConfigArgsParser():

    def _base_parser(self):
        short_usage = '%(prog)s [options] <command> [command options]'
        return argparse.ArgumentParser(usage=short_usage, add_help=False, fromfile_prefix_chars='@')

    def _parse_with_config(self, parser, argv=None):

        config = confuse.Configuration('tunnelcore', modname='tunnelcore')

        # check default config search paths
        config.read(defaults=True, user=True)

        # local / workdir config
        workdir_config = os.path.join(os.getcwd(), 'tunnelcore.yaml')
        if os.path.exists(workdir_config):
            config.set_file(workdir_config, base_for_paths=True)

        # ENV based config
        if 'TUNNELCORE_CONFIG' in os.environ:
            config.set_file(os.environ['TUNNELCORE_CONFIG'], base_for_paths=True)

        # merge all configs into a flat dictionary, delimiter = ':'
        config_values = FlatDict(config.flatten())
        if 'TUNNELCORE_CONFIG_DEBUG' in os.environ:
            print("Options picked up from config: %s" % str(config_values))

        # adopt defaults into parser, fixup 'required' and file/path fields
        for action in iter_actions(parser):
            if action.dest in config_values:
                if isinstance(action, FullPath):
                    action.default = config[action.dest].as_filename()
                else:
                    action.default = config[action.dest].get()
                action.required = False

        # warn about options not defined in argparse
        known = set(action.dest for action in iter_actions(parser))
        for option in config_values:
            if option not in known:
                logger.warn("Dropping unrecognized config option '%s'." % option)

        args = parser.parse_args(argv)

        if 'TUNNELCORE_CONFIG_DEBUG' in os.environ:
            print("Final parsed args: %s" % repr(args))
        return args

    def parse_util_options(self, argv=None):

        parser = self._base_parser()

        general = parser.add_argument_group('General options')
        add_args_general(general)

        add_args_commands(parser)

        return self._parse_with_config(parser, argv)
