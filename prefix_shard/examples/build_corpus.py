# ==================================================
# prefix_shard/examples/build_corpus.py
# ==================================================
import argparse, hashlib, random
from pathlib import Path

from prefix_shard.const import HASH_SIZE

def records(count: int, hash_size: int = HASH_SIZE, seed: int | None = None) -> list[bytes]:
    """Sorted ``HASH:count`` lines, space padded to exactly ``hash_size`` bytes."""
    rng = random.Random(seed)
    out = []
    for i in range(count):
        digest = hashlib.sha1(f"password{i}".encode()).hexdigest().upper()
        line = f"{digest}:{rng.randint(1, 100000)}".ljust(hash_size - 1)
        if len(line) != hash_size - 1:
            raise ValueError(f"hash size {hash_size} too small for {line!r}")
        out.append(line.encode("ascii") + b"\n")
    out.sort()
    return out

def build_corpus(path: str | Path, count: int, hash_size: int = HASH_SIZE,
                 seed: int | None = None) -> Path:
    path = Path(path)
    with open(path, "wb") as f:
        f.writelines(records(count, hash_size, seed))
    return path

def main():
    p = argparse.ArgumentParser()
    p.add_argument("corpus", help="path of the sorted corpus to write")
    p.add_argument("count", type=int)
    p.add_argument("--hash-size", type=int, default=HASH_SIZE)
    p.add_argument("--seed", type=int)
    args = p.parse_args()
    build_corpus(args.corpus, args.count, args.hash_size, args.seed)

if __name__ == "__main__":
    main()
