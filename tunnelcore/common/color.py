# Copyright 2017-2019 Sergej Schumilo, Cornelius Aschermann, Tim Blazytko
# Copyright 2019-2020 Intel Corporation
#
# SPDX-License-Identifier: AGPL-3.0-or-later

WARNING =    '\033[0;33m'
FAIL =       '\033[91m'
ENDC =       '\033[0m'


def colorize(msg, code, enabled=True):
    if not enabled:
        return msg
    return code + msg + ENDC
