# Copyright (C) 2019-2020 Intel Corporation
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Exceptions raised by the tunnelcore helpers.

None of these are retried internally. Callers decide whether a failure is
fatal; EntropyUnavailable in particular should be, since carrying on with weak
randomness defeats the purpose of randomizing in the first place.
"""


class TunnelCoreError(Exception):
    pass


class EntropyUnavailable(TunnelCoreError):
    """The OS entropy source could not be read."""


class InvalidRange(TunnelCoreError, ValueError):
    """Lower bound exceeds upper bound."""

    def __init__(self, min_value, max_value):
        super().__init__("invalid range: min %s > max %s" % (min_value, max_value))
        self.min_value = min_value
        self.max_value = max_value


class CorruptBlob(TunnelCoreError, ValueError):
    """Input to decompress() is not a valid compressed blob."""
