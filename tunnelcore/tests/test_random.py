# Copyright (C) 2019-2020 Intel Corporation
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Test SecureRand wrapper / coin toss
"""

import os

import pytest

from tunnelcore.common.errors import EntropyUnavailable
from tunnelcore.common.rand import SecureRand, make_secure_random_bytes, rand
from tunnelcore.common.self_check import self_check
from tunnelcore.tests.helper import failing_urandom, get_bitmap


def test_rand_int():

    limits = [1, 2, 3, 7, 13, 17, 20, 50, 100, 255, 257]
    samples = 2000

    for limit in limits:
        bitmap = get_bitmap(lambda: rand.int(limit), limit, samples)

        assert(bitmap[0] != 0), "rand.int() not spanning complete range?"
        assert(bitmap[-1] != 0), "rand.int() not spanning complete range?"

        for idx in range(len(bitmap)):
            bias = abs(1-bitmap[idx]/samples)
            assert(bias < 0.15), "rand.int() detected bias at bitmap[%d]=%f - need more samples?" % (idx,bias)


def test_rand_int_modulo_bias():

    # naive byte % 192 hits 0..63 twice as often as 64..191
    limit = 192
    samples = 1000
    bitmap = get_bitmap(lambda: rand.int(limit), limit, samples)

    low = sum(bitmap[:64]) / 64
    high = sum(bitmap[64:]) / 128

    assert(abs(1 - low/high) < 0.05), "rand.int() favours low values: %f vs %f" % (low, high)


def test_rand_int_limits():

    assert(rand.int(0) == 0), "rand.int(0) must return 0"
    assert(rand.int(1) == 0), "rand.int(1) must return 0"

    big = 1 << 100
    for _ in range(100):
        assert(0 <= rand.int(big) < big), "rand.int() out of range for large limit"

    with pytest.raises(ValueError):
        rand.int(-1)


def test_coin_semantics():

    samples = 1000

    check = 0
    for _ in range(samples):
        if rand.int(2) == 0: # chance 1 out of 2
            check += 1

    assert(abs(check/samples - 1/2) < 0.1), "Coin toss bias - semantics mismatch?"

    check = 0
    for _ in range(samples):
        if rand.int(100) < 20: # 20%
            check += 1

    assert(abs(check/samples - 0.2) < 0.1), "Coin toss bias - semantics mismatch?"


def test_rand_bytes():

    for length in [0, 1, 3, 17, 32, 64]:
        assert(len(make_secure_random_bytes(length)) == length), "rand.bytes() returned unexpected length"

    # two 32 byte draws colliding is not going to happen
    assert(rand.bytes(32) != rand.bytes(32)), "rand.bytes() repeated itself"

    with pytest.raises(ValueError):
        rand.bytes(-1)


def test_entropy_failure(monkeypatch):

    monkeypatch.setattr(os, "urandom", failing_urandom)

    source = SecureRand()
    with pytest.raises(EntropyUnavailable):
        source.bytes(8)
    with pytest.raises(EntropyUnavailable):
        source.int(10)

    # trivial limits need no entropy
    assert(source.int(1) == 0)


def test_self_check(monkeypatch):

    assert(self_check()), "self check failed on a healthy system"

    monkeypatch.setattr(os, "urandom", failing_urandom)
    assert(not self_check()), "self check missed unreadable entropy source"
