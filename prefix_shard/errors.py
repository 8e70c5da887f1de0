# ==================================================
# prefix_shard/errors.py
# ==================================================


class ShardError(Exception):
    """Base class for everything the shard writer raises."""


class SettingsError(ShardError, ValueError):
    """Invalid sizes or path template."""


class ShardIOError(ShardError):
    """Reading the input or writing a shard failed."""
    def __init__(self, action: str, target: str, cause: OSError | ValueError):
        super().__init__(f"failed to {action} {target}: {cause}")
        self.cause = cause


class BufferTooSmallError(ShardError):
    """A single prefix run does not fit in the working buffer."""
    def __init__(self, prefix: bytes, buffer_size: int):
        super().__init__(f"buffer too small: prefix {prefix!r} fills all "
                         f"{buffer_size} records")
        self.prefix = prefix
        self.buffer_size = buffer_size
