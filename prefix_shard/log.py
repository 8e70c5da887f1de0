# ==================================================
# prefix_shard/log.py
# ==================================================
import logging
import sys
from typing import TextIO

from .const import LOG_LEVEL
from .errors import SettingsError

FORMAT = "prefix-shard: %(levelname)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL, stream: TextIO | None = None) -> logging.Logger:
    """Route the ``prefix_shard`` logger hierarchy to stderr.

    Safe to call more than once: the previous handler is replaced, not stacked.
    """
    levelno = logging.getLevelName(level.upper())
    if not isinstance(levelno, int):
        raise SettingsError(f"unknown log level {level!r}")

    logger = logging.getLogger("prefix_shard")
    logger.setLevel(levelno)
    logger.propagate = False
    for h in list(logger.handlers):
        if getattr(h, "_prefix_shard", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    handler._prefix_shard = True
    logger.addHandler(handler)
    return logger


class ProgressLine:
    """Single transient status line, rewritten in place with ``\\r``."""
    def __init__(self, stream: TextIO | None = None, enabled: bool = True):
        self.stream  = stream if stream is not None else sys.stderr
        self.enabled = enabled
        self._shown  = False

    def update(self, prefix: bytes):
        if not self.enabled:
            return
        self.stream.write("\r" + prefix.decode("ascii", "backslashreplace"))
        self.stream.flush()
        self._shown = True

    def close(self):
        if self._shown:
            self.stream.write("\n")
            self.stream.flush()
            self._shown = False
