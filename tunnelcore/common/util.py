# Copyright 2017-2019 Sergej Schumilo, Cornelius Aschermann, Tim Blazytko
# Copyright 2019-2020 Intel Corporation
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import os
import tempfile

BYTE_UNITS = ["B", "K", "M", "G"]


def format_byte_count(num):
    """
    Render a byte count with binary units: 500B, 1.0K, 9.8K, 100.1M.

    G is the largest unit, larger counts are shown as e.g. 2048.0G.
    """
    if num < 0:
        raise ValueError("byte count must be non-negative")
    unit = 0
    value = num
    while value >= 1024 and unit < len(BYTE_UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return "%dB" % value
    return "%.1f%s" % (value, BYTE_UNITS[unit])


# return a list of str for a decoded JSON/msgpack array of strings, None otherwise
def get_string_slice(value):
    if not isinstance(value, (list, tuple)):
        return None
    for element in value:
        if not isinstance(element, str):
            return None
    return list(value)


def atomic_write(filename, data):
    # rename() is atomic only on same filesystem so the tempfile must be in same directory
    with tempfile.NamedTemporaryFile(dir=os.path.dirname(os.path.abspath(filename)), delete=False) as f:
        f.write(data)
    os.chmod(f.name, 0o644)
    os.rename(f.name, filename)


def read_binary_file(filename):
    with open(filename, 'rb') as f:
        return f.read()