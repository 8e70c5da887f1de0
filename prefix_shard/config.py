# ==================================================
# prefix_shard/config.py
# ==================================================
from dataclasses import dataclass

from .const import BUFFER_SIZE, HASH_SIZE, PATH_FORMAT, WILDCARD
from .errors import SettingsError


@dataclass(frozen=True)
class ShardSettings:
    """Immutable run configuration handed to :class:`ShardWriter`."""
    hash_size:    int  = HASH_SIZE
    buffer_size:  int  = BUFFER_SIZE
    path_format:  str  = PATH_FORMAT
    strip_prefix: bool = True
    progress:     bool = False
    compress:     bool = False

    def __post_init__(self):
        if self.hash_size <= 0:
            raise SettingsError(f"hash size must be positive, got {self.hash_size}")
        if self.buffer_size <= 0:
            raise SettingsError(f"buffer size must be positive, got {self.buffer_size}")
        if self.prefix_length == 0:
            raise SettingsError(f"path template {self.path_format!r} has no "
                                f"'{WILDCARD}' wildcard")
        if self.prefix_length >= self.hash_size:
            raise SettingsError(f"prefix length {self.prefix_length} must be "
                                f"smaller than hash size {self.hash_size}")

    # ------------------------------------------------------------------
    @property
    def prefix_length(self) -> int:
        return self.path_format.count(WILDCARD)

    @property
    def record_size_out(self) -> int:
        """Bytes written per record."""
        if self.strip_prefix:
            return self.hash_size - self.prefix_length
        return self.hash_size

    @property
    def capacity(self) -> int:
        """Working buffer size in bytes."""
        return self.hash_size * self.buffer_size
