# Copyright (C) 2020 Intel Corporation
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Helper functions for tunnelcore tests
"""


class SequenceRand:
    """
    Deterministic stand-in for SecureRand, replays a fixed list of draws.
    """

    def __init__(self, values):
        self.values = list(values)
        self.limits = []

    def int(self, limit):
        self.limits.append(limit)
        value = self.values.pop(0)
        assert(0 <= value < max(limit, 1)), "scripted draw %d outside limit %d" % (value, limit)
        return value


def failing_urandom(num):
    raise OSError("entropy pool unavailable")


def get_bitmap(func, elements, samples):
    bitmap = [0 for _ in range(elements)]
    for _ in range(samples*elements):
        bitmap[func()] += 1
    return bitmap
