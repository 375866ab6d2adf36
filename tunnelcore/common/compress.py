# Copyright (C) 2019-2020 Intel Corporation
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Payload compression

Blobs are LZ4 frames carrying the content size and a content checksum, so
decompress() can tell a damaged or truncated blob from a valid one.
"""

import lz4.frame

from tunnelcore.common.errors import CorruptBlob
from tunnelcore.common.logger import logger

LZ4_FRAME_MAGIC = b'\x04\x22\x4d\x18'

# magic, FLG, BD, header checksum, end mark
LZ4_FRAME_MIN_SIZE = 11

COMPRESSION_LEVEL = lz4.frame.COMPRESSIONLEVEL_MIN


def compress(data, level=COMPRESSION_LEVEL):
    return lz4.frame.compress(bytes(data),
                              compression_level=level,
                              store_size=True,
                              content_checksum=True)


def decompress(blob):
    blob = bytes(blob)
    if len(blob) < LZ4_FRAME_MIN_SIZE or not blob.startswith(LZ4_FRAME_MAGIC):
        raise CorruptBlob("not an LZ4 frame (%d bytes)" % len(blob))

    try:
        info = lz4.frame.get_frame_info(blob)
        decompressor = lz4.frame.LZ4FrameDecompressor()
        data = decompressor.decompress(blob)
    except (RuntimeError, ValueError) as e:
        logger.debug("Failed to decompress blob of %d bytes: %s" % (len(blob), e))
        raise CorruptBlob("failed to decompress: %s" % e) from e

    # exactly one complete frame, nothing after it
    if not decompressor.eof:
        raise CorruptBlob("frame incomplete")
    if decompressor.unused_data:
        raise CorruptBlob("%d trailing bytes after frame" % len(decompressor.unused_data))

    # content_size 0 means the frame did not record it
    if info["content_size"] and len(data) != info["content_size"]:
        raise CorruptBlob("size mismatch: got %d bytes, frame says %d" % (len(data), info["content_size"]))
    return data
