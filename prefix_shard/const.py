# ==================================================
# prefix_shard/const.py
# ==================================================
import os

WILDCARD = "%"                     # replaced, left to right, by prefix bytes

PATH_FORMAT = os.path.join("%%", "%%%")
HASH_SIZE   = 63                   # bytes per record
BUFFER_SIZE = 1024                 # records per fill
LOG_LEVEL   = "INFO"
LOG_LEVELS  = ("DEBUG", "INFO", "WARNING", "ERROR")

# CLI defaults may be overridden from the environment; values stay strings
# until argparse converts them, so a bad value is a usage error
ENV_PATH_FORMAT = "PREFIX_SHARD_PATH"
ENV_HASH_SIZE   = "PREFIX_SHARD_HASH_SIZE"
ENV_BUFFER_SIZE = "PREFIX_SHARD_BUFFER_SIZE"
ENV_LOG_LEVEL   = "PREFIX_SHARD_LOG_LEVEL"

ZSTD_LEVEL  = 3
