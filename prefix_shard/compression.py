# ==================================================
# prefix_shard/compression.py
# ==================================================
from typing import BinaryIO

import zstandard as zstd

from .const import ZSTD_LEVEL

SUFFIX = ".zst"

cctx = zstd.ZstdCompressor(level=ZSTD_LEVEL)


def shard_stream(f: BinaryIO, size: int = -1):
    """Compress writes into the already open shard file ``f``.

    ``size`` is stored in the frame header so a reader can decompress the
    shard in one call. ``f`` stays open when the stream is closed.
    """
    return cctx.stream_writer(f, size=size, closefd=False)
