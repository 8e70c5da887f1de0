# ==================================================
# prefix_shard/writer.py
# ==================================================
"""
Streaming partition of a sorted fixed-width record stream.

One buffer of ``hash_size * buffer_size`` bytes is filled from the input; the
leading run of records sharing record 0's prefix is written to the file named
by that prefix, the rest is slid to the front and the freed space refilled.
"""
import bisect
import logging
import os
from dataclasses import dataclass, field
from typing import BinaryIO

import numpy as np

from .compression import SUFFIX, shard_stream
from .config import ShardSettings
from .const import WILDCARD
from .errors import BufferTooSmallError, ShardIOError
from .log import ProgressLine

logger = logging.getLogger(__name__)

_WILD = os.fsencode(WILDCARD)[0]


def prefix_path(prefix: bytes, path_format: str) -> str:
    """Substitute each wildcard in ``path_format`` with one raw prefix byte."""
    rv = bytearray(os.fsencode(path_format))
    pos = 0
    for b in prefix:
        pos = rv.index(_WILD, pos)
        rv[pos] = b
        pos += 1
    return os.fsdecode(bytes(rv))


@dataclass
class ShardStats:
    files:     list[str] = field(default_factory=list)
    records:   int = 0
    bytes_in:  int = 0
    bytes_out: int = 0
    dropped:   int = 0


class ShardWriter:
    """Split a sorted record stream into one file per contiguous prefix run."""
    def __init__(self, settings: ShardSettings, status: ProgressLine | None = None):
        self.settings = settings
        self.status   = status if status is not None else ProgressLine(enabled=settings.progress)

    # ------------------------------------------------------------------
    def run(self, stream: BinaryIO, name: str = "input") -> ShardStats:
        s = self.settings
        h, p = s.hash_size, s.prefix_length
        buf = bytearray(s.capacity)
        mv = memoryview(buf)
        stats = ShardStats()

        length = self._fill(stream, mv, 0, name)
        stats.bytes_in += length
        try:
            while length > 0:
                if length % h != 0:
                    logger.warning("buffer not divisible by %d", h)
                n = length // h
                if n == 0:
                    logger.warning("dropping %d trailing bytes that do not form "
                                   "a %d-byte record", length, h)
                    stats.dropped += length
                    break

                first = bytes(mv[:p])
                self.status.update(first)
                i = self._run_length(mv, n, first)
                if i == s.buffer_size:
                    raise BufferTooSmallError(first, s.buffer_size)

                path, size = self._write(prefix_path(first, s.path_format), buf, i)
                stats.files.append(path)
                stats.bytes_out += size
                stats.records += i

                consumed = i * h
                buf[:length - consumed] = buf[consumed:length]
                length -= consumed
                got = self._fill(stream, mv, length, name)
                stats.bytes_in += got
                length += got
        finally:
            self.status.close()

        logger.info("wrote %d files, %d records (%d bytes in, %d bytes out)",
                    len(stats.files), stats.records, stats.bytes_in, stats.bytes_out)
        return stats

    # ------------------------------------------------------------------
    def _run_length(self, mv: memoryview, n: int, first: bytes) -> int:
        """Index of the first of ``n`` records whose prefix differs from ``first``."""
        h, p = self.settings.hash_size, self.settings.prefix_length
        return bisect.bisect_right(range(n), first,
                                   key=lambda k: bytes(mv[k*h:k*h + p]))

    def _fill(self, stream: BinaryIO, mv: memoryview, start: int, name: str) -> int:
        """Read until ``mv[start:]`` is full or the stream ends; return bytes read."""
        pos = start
        end = len(mv)
        while pos < end:
            try:
                got = stream.readinto(mv[pos:])
            except OSError as e:
                raise ShardIOError("read", name, e) from e
            if not got:
                break
            pos += got
        return pos - start

    def _records(self, buf: bytearray, i: int) -> bytes:
        s = self.settings
        if not s.strip_prefix:
            return bytes(buf[:i * s.hash_size])
        view = np.frombuffer(buf, dtype=np.uint8, count=i * s.hash_size)
        return view.reshape(i, s.hash_size)[:, s.prefix_length:].tobytes()

    def _write(self, path: str, buf: bytearray, i: int) -> tuple[str, int]:
        data = self._records(buf, i)
        if self.settings.compress:
            path += SUFFIX
        try:
            with open(path, "wb") as f:
                if self.settings.compress:
                    with shard_stream(f, size=len(data)) as z:
                        z.write(data)
                else:
                    f.write(data)
                size = f.tell()
        # ValueError: a NUL prefix byte makes an invalid path
        except (OSError, ValueError) as e:
            raise ShardIOError("write file", path, e) from e
        logger.debug("wrote %s (%d records, %d bytes)", path, i, size)
        return path, size
