# ==================================================
# prefix_shard/cli.py
# ==================================================
import argparse
import logging
import os
import sys

from . import __version__
from .config import ShardSettings
from .const import (BUFFER_SIZE, ENV_BUFFER_SIZE, ENV_HASH_SIZE, ENV_LOG_LEVEL,
                    ENV_PATH_FORMAT, HASH_SIZE, LOG_LEVEL, LOG_LEVELS, PATH_FORMAT)
from .errors import SettingsError, ShardError, ShardIOError
from .log import setup_logging
from .writer import ShardWriter

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Splits a sorted file of fixed-width records (e.g. a Pwned Passwords list)
into smaller files, one per record prefix. This might be useful for
k-anonymous access. Expects hash-ordered input.
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="prefix-shard", description=DESCRIPTION,
                                usage="%(prog)s [options] [<file>]")
    p.add_argument("files", nargs="*", metavar="file",
                   help="sorted input file; stdin when omitted or '-'")
    p.add_argument("--path", default=os.getenv(ENV_PATH_FORMAT, PATH_FORMAT),
                   help="path to store, with '%%' as the wildcard (default: %(default)s)")
    p.add_argument("--hash-size", type=int, default=os.getenv(ENV_HASH_SIZE, str(HASH_SIZE)),
                   help="line length of the input (default: %(default)s)")
    p.add_argument("--buffer-size", type=int, default=os.getenv(ENV_BUFFER_SIZE, str(BUFFER_SIZE)),
                   help="number of hashes to read at once (default: %(default)s)")
    p.add_argument("--progress", action="store_true", help="show progress")
    p.add_argument("--strip-prefix", action=argparse.BooleanOptionalAction, default=True,
                   help="strip the prefix from each line")
    p.add_argument("--compress", action="store_true",
                   help="zstd-compress each shard and add a .zst suffix")
    p.add_argument("--log-level", default=os.getenv(ENV_LOG_LEVEL, LOG_LEVEL),
                   choices=LOG_LEVELS, type=str.upper)
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.files) > 1:
        parser.print_usage(sys.stderr)
        parser.exit(2, f"{parser.prog}: error: expected at most one input file\n")

    # argparse does not check choices against defaults taken from the environment
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (from ${ENV_LOG_LEVEL})")

    setup_logging(args.log_level)
    try:
        settings = ShardSettings(hash_size=args.hash_size,
                                 buffer_size=args.buffer_size,
                                 path_format=args.path,
                                 strip_prefix=args.strip_prefix,
                                 progress=args.progress,
                                 compress=args.compress)
    except SettingsError as e:
        parser.error(str(e))

    writer = ShardWriter(settings)
    source = args.files[0] if args.files else "-"
    try:
        if source == "-":
            writer.run(sys.stdin.buffer, name="stdin")
        else:
            try:
                f = open(source, "rb")
            except OSError as e:
                raise ShardIOError("open file", source, e) from e
            with f:
                writer.run(f, name=source)
    except ShardError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
