# Copyright 2017-2019 Sergej Schumilo, Cornelius Aschermann, Tim Blazytko
# Copyright 2019-2020 Intel Corporation
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Command line front end for the tunnelcore helpers.

Each sub-command maps to one helper and prints its result on stdout, so the
output can be piped into other tools. Diagnostics go to stderr via the logger.
"""

from datetime import timedelta

from tunnelcore.common.compress import compress, decompress
from tunnelcore.common.errors import TunnelCoreError
from tunnelcore.common.logger import init_logger, logger
from tunnelcore.common.randutil import (flip_weighted_coin, jitter,
                                        make_secure_random_perm,
                                        make_secure_random_period,
                                        make_secure_random_range)
from tunnelcore.common.util import atomic_write, format_byte_count, read_binary_file


def cmd_perm(config):
    print(" ".join(str(i) for i in make_secure_random_perm(config.n)))


def cmd_range(config):
    print(make_secure_random_range(config.min_value, config.max_value))


def cmd_period(config):
    period = make_secure_random_period(timedelta(microseconds=config.min_period),
                                       timedelta(microseconds=config.max_period))
    print("%dus" % (period // timedelta(microseconds=1)))


def cmd_jitter(config):
    print(jitter(config.n, config.jitter_factor))


def cmd_coin(config):
    heads = 0
    for _ in range(config.coin_count):
        if flip_weighted_coin(config.coin_weight):
            heads += 1
    if config.coin_count == 1:
        print("heads" if heads else "tails")
    else:
        print("%d/%d heads" % (heads, config.coin_count))


def cmd_compress(config):
    data = read_binary_file(config.input)
    blob = compress(data, level=config.compression_level)
    atomic_write(config.output, blob)
    logger.info("Compressed %s to %s" % (format_byte_count(len(data)), format_byte_count(len(blob))))


def cmd_decompress(config):
    blob = read_binary_file(config.input)
    data = decompress(blob)
    atomic_write(config.output, data)
    logger.info("Decompressed %s to %s" % (format_byte_count(len(blob)), format_byte_count(len(data))))


def cmd_bytes(config):
    print(format_byte_count(config.n))


COMMANDS = {
    "perm": cmd_perm,
    "range": cmd_range,
    "period": cmd_period,
    "jitter": cmd_jitter,
    "coin": cmd_coin,
    "compress": cmd_compress,
    "decompress": cmd_decompress,
    "bytes": cmd_bytes,
}


def start(config):

    init_logger(config)
    logger.debug("Running '%s'" % config.command)

    try:
        COMMANDS[config.command](config)
    except TunnelCoreError as e:
        logger.error("%s failed: %s" % (config.command, e))
        return 1
    finally:
        logger.close()

    return 0
