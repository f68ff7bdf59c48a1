"""Chained SHA-256 over fixed-size blocks, hashed from the last block backwards."""

from __future__ import annotations

import argparse
import hashlib
from collections.abc import Sequence
from pathlib import Path

DEFAULT_BLOCK_SIZE = 1024


def chained_sha256(data: bytes, block_size: int = DEFAULT_BLOCK_SIZE) -> str:
    """Return the hex digest h0 of ``data`` split into ``block_size`` blocks.

    Each block is hashed together with the digest of the block after it,
    starting from the last block. Empty data yields an empty string.
    """
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    offsets = range(0, len(data), block_size)
    digest = b""
    for start in reversed(offsets):
        digest = hashlib.sha256(data[start : start + block_size] + digest).digest()
    return digest.hex()


def file_hash(path: str | Path) -> str:
    """Return the chained SHA-256 digest h0 of the file at ``path``."""
    return chained_sha256(Path(path).read_bytes())


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chained hash of a file, optionally checking it against a value."""
    parser = argparse.ArgumentParser(
        description="Compute the chained SHA-256 digest h0 of a file."
    )
    parser.add_argument("path", type=Path, help="file to hash")
    parser.add_argument("--expect", metavar="HASH", help="expected hex digest")
    args = parser.parse_args(argv)

    digest = file_hash(args.path)
    if args.expect is None:
        print(f"Hash h0 for {args.path.name}: {digest}")
        return 0
    if digest != args.expect.lower():
        print(f"Hash mismatch! Expected: {args.expect}, Got: {digest}")
        return 1
    print(f"Hash matches: {digest}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())