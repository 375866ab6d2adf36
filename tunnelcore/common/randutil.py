# Copyright (C) 2019-2020 Intel Corporation
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Randomized helpers for ordering, timing and probabilistic gating

All helpers draw from the secure source in tunnelcore.common.rand and take an
optional `source` argument to substitute it. Entropy failures are never
masked: EntropyUnavailable propagates from every function here, including
jitter() and the coin flips.
"""

import math
from datetime import timedelta
from fractions import Fraction

from tunnelcore.common.errors import InvalidRange
from tunnelcore.common.rand import rand

ONE_MICROSECOND = timedelta(microseconds=1)

# mantissa bits of a double, resolution of flip_weighted_coin()
COIN_BITS = 53


def _source(source):
    if source is None:
        return rand
    return source


def _check_factor(factor):
    if not 0.0 <= factor <= 1.0:
        raise ValueError("factor must be within [0, 1], got %r" % factor)


def secure_shuffle(seq, source=None):
    """
    Fisher-Yates shuffle of a mutable sequence, in place.
    """
    source = _source(source)
    for i in range(len(seq) - 1, 0, -1):
        j = source.int(i + 1)
        seq[i], seq[j] = seq[j], seq[i]


def make_secure_random_perm(n, source=None):
    """
    Return a uniformly random permutation of range(n) as a list.
    """
    if n < 0:
        raise ValueError("permutation size must be non-negative")
    perm = list(range(n))
    secure_shuffle(perm, source=source)
    return perm


def make_secure_random_range(min_value, max_value, source=None):
    """
    Return a uniformly random integer N with min_value <= N <= max_value.
    """
    if min_value > max_value:
        raise InvalidRange(min_value, max_value)
    return min_value + _source(source).int(max_value - min_value + 1)


def make_secure_random_period(min_period, max_period, source=None):
    """
    Return a uniformly random timedelta within [min_period, max_period],
    at microsecond resolution.
    """
    if min_period > max_period:
        raise InvalidRange(min_period, max_period)
    micros = make_secure_random_range(min_period // ONE_MICROSECOND,
                                      max_period // ONE_MICROSECOND,
                                      source=source)
    return timedelta(microseconds=micros)


def jitter(n, factor, source=None):
    """
    Return n scaled by a random factor within [1-factor, 1+factor].

    The result is an integer within [n - a, n + a] where a = ceil(|n|*factor),
    both bounds included. The deviation is computed on the decimal value of
    factor, since float products round past the integer
    (100*1.1 == 110.00000000000001, 100*0.07 == 7.000000000000001).
    """
    _check_factor(factor)
    a = math.ceil(abs(n) * Fraction(str(factor)))
    return make_secure_random_range(n - a, n + a, source=source)


def jitter_duration(period, factor, source=None):
    """
    jitter() for timedelta values, at microsecond resolution.
    """
    micros = jitter(period // ONE_MICROSECOND, factor, source=source)
    return timedelta(microseconds=micros)


def flip_weighted_coin(weight, source=None):
    """
    Return True with probability `weight`.

    Compares a uniform draw x/2**53 in [0, 1) against weight, so weight 0.0
    never and weight 1.0 always returns True.
    """
    if not 0.0 <= weight <= 1.0:
        raise ValueError("weight must be within [0, 1], got %r" % weight)
    return _source(source).int(1 << COIN_BITS) < weight * (1 << COIN_BITS)


def flip_coin(source=None):
    return _source(source).int(2) == 1
