# Copyright (C) 2017-2019 Sergej Schumilo, Cornelius Aschermann, Tim Blazytko
# Copyright (C) 2019-2020 Intel Corporation
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Wrapper for the OS entropy source

All randomized helpers in tunnelcore draw from a SecureRand instance. The
module-level `rand` is the process-wide default; tests may pass any object
offering the same int(limit) capability instead.
"""

import os

from tunnelcore.common.errors import EntropyUnavailable
from tunnelcore.common.logger import logger


class SecureRand:

    def bytes(self, num):
        if num < 0:
            raise ValueError("byte count must be non-negative")
        try:
            return os.urandom(num)
        except (OSError, NotImplementedError) as e:
            logger.debug("Failed to read %d bytes from OS entropy source: %s" % (num, e))
            raise EntropyUnavailable("OS entropy source unavailable: %s" % e) from e

    # return integer N := 0 <= n < limit
    # Intended semantics:
    #   if rand.int(100) < 50 # execute with p(0.5)
    #   if rand.int(2)        # execute with p(0.5)
    # a[rand.int(len(a)) = 5  # never out of bounds
    def int(self, limit):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if limit <= 1:
            return 0

        # rejection sampling on the smallest covering power of two,
        # at most 2 draws expected
        bits = (limit - 1).bit_length()
        num_bytes = (bits + 7) // 8
        excess = num_bytes * 8 - bits
        while True:
            value = int.from_bytes(self.bytes(num_bytes), "big") >> excess
            if value < limit:
                return value


rand = SecureRand()


def make_secure_random_bytes(num, source=None):
    if source is None:
        source = rand
    return source.bytes(num)
