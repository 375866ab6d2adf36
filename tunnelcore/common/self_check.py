# Copyright 2017-2019 Sergej Schumilo, Cornelius Aschermann, Tim Blazytko
# Copyright 2019-2020 Intel Corporation
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import sys

from tunnelcore.common.errors import EntropyUnavailable
from tunnelcore.common.logger import logger
from tunnelcore.common.rand import rand


def check_version():
    if sys.version_info < (3, 6, 0):
        logger.error("This script requires python 3.6 or later!")
        return False
    return True


def check_packages():

    deps = [
            'lz4.frame',
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


def check_entropy():
    try:
        rand.bytes(16)
    except EntropyUnavailable as e:
        logger.error("Cannot read from OS entropy source: %s" % e)
        return False
    return True


def self_check():
    if not check_version():
        return False
    if not check_packages():
        return False
    if not check_entropy():
        return False
    return True
