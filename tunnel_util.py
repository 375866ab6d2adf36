#!/usr/bin/env python3
#
# Copyright (C) 2017-2019 Sergej Schumilo, Cornelius Aschermann, Tim Blazytko
# Copyright (C) 2019-2020 Intel Corporation
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Launcher for the tunnelcore helpers. Check tunnelcore/tool/core.py for more.
"""

import sys

from tunnelcore.common.self_check import self_check
from tunnelcore.common.config import ConfigArgsParser

from tunnelcore.tool import core

def main():

    if not self_check():
        return 1

    parser = ConfigArgsParser()
    config = parser.parse_util_options()

    return core.start(config)


if __name__ == "__main__":
    sys.exit(main())
