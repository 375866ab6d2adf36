# Copyright (C) 2019-2020 Intel Corporation
# SPDX-License-Identifier: AGPL-3.0-or-later

from tunnelcore.common.compress import compress, decompress
from tunnelcore.common.errors import (CorruptBlob, EntropyUnavailable,
                                      InvalidRange, TunnelCoreError)
from tunnelcore.common.rand import SecureRand, make_secure_random_bytes, rand
from tunnelcore.common.randutil import (flip_coin, flip_weighted_coin, jitter,
                                        jitter_duration, make_secure_random_perm,
                                        make_secure_random_period,
                                        make_secure_random_range, secure_shuffle)
from tunnelcore.common.util import format_byte_count, get_string_slice
