__version__ = "0.1.0"

from .config import ShardSettings
from .errors import BufferTooSmallError, SettingsError, ShardError, ShardIOError
from .writer import ShardStats, ShardWriter, prefix_path

__all__ = ["ShardWriter", "ShardSettings", "ShardStats", "prefix_path",
           "ShardError", "SettingsError", "ShardIOError", "BufferTooSmallError"]
