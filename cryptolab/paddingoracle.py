"""Decrypt AES-CBC ciphertext byte by byte through a padding oracle."""

from __future__ import annotations

import argparse
import urllib.request
from collections.abc import Callable, Iterator, Sequence
from itertools import chain
from urllib.error import HTTPError

BLOCK_SIZE = 16
DEFAULT_URL = "http://crypto-class.appspot.com/po?er="
DEFAULT_CIPHERTEXT = (
    "f20bdba6ff29eed7b046d1df9fb7000058b1ffb4210a580f748b4ac714c001bd"
    "4a61044426fb515dad3f21f18aa577c0bdf302936266926ff37dbf7035d5eeb4"
)
_BAD_PADDING_STATUS = 403

Oracle = Callable[[bytes, bytes], bool]


class PaddingOracleError(RuntimeError):
    """Raised when no candidate byte produces valid padding."""


def guess_candidates() -> Iterator[int]:
    """Yield candidate plaintext bytes: padding values, space, then letters."""
    yield from chain(
        range(1, 17),  # padding
        (ord(" "),),
        range(ord("a"), ord("z") + 1),
        range(ord("A"), ord("Z") + 1),
    )


def decrypt_block(iv: bytes, ciphertext: bytes, oracle: Oracle) -> bytes:
    """Recover the plaintext of one ``ciphertext`` block chained to ``iv``.

    ``oracle(iv, block)`` must return True when the forged IV makes the
    block decrypt to validly padded data.
    """
    if len(iv) != BLOCK_SIZE or len(ciphertext) != BLOCK_SIZE:
        raise ValueError(f"IV and ciphertext block must be {BLOCK_SIZE} bytes")
    forged = bytearray(iv)
    recovered: list[int] = []
    for i in range(BLOCK_SIZE):
        pad = i + 1
        mask = pad ^ (pad - 1)
        forged = bytearray(byte ^ mask for byte in forged)
        position = BLOCK_SIZE - 1 - i
        for guess in guess_candidates():
            forged[position] ^= guess
            if oracle(bytes(forged), ciphertext):
                recovered.append(guess)
                break
            forged[position] ^= guess
        else:
            raise PaddingOracleError(f"no candidate accepted at byte {position}")
    return bytes(reversed(recovered))


def padding_oracle_decrypt(ciphertext_hex: str, oracle: Oracle) -> str:
    """Decrypt IV-prefixed hex CBC ciphertext; padding bytes are kept."""
    data = bytes.fromhex(ciphertext_hex)
    if len(data) < 2 * BLOCK_SIZE or len(data) % BLOCK_SIZE:
        raise ValueError(
            "ciphertext must be an IV plus at least one whole 16-byte block"
        )
    blocks = [data[start : start + BLOCK_SIZE] for start in range(0, len(data), BLOCK_SIZE)]
    message = b"".join(
        decrypt_block(previous, block, oracle)
        for previous, block in zip(blocks, blocks[1:])
    )
    return message.decode("utf-8")


def http_oracle(base_url: str = DEFAULT_URL) -> Oracle:
    """Return an oracle that asks a web server; status 403 means bad padding."""

    def ask(iv: bytes, ciphertext: bytes) -> bool:
        url = f"{base_url}{iv.hex()}{ciphertext.hex()}"
        try:
            with urllib.request.urlopen(url) as response:
                status = response.status
        except HTTPError as exc:
            status = exc.code
        return status != _BAD_PADDING_STATUS

    return ask


def main(argv: Sequence[str] | None = None) -> int:
    """Decrypt a ciphertext by querying a remote padding oracle."""
    parser = argparse.ArgumentParser(
        description="Decrypt AES-CBC ciphertext through a web padding oracle."
    )
    parser.add_argument(
        "ciphertext", nargs="?", default=DEFAULT_CIPHERTEXT, help="hex ciphertext"
    )
    parser.add_argument("--url", default=DEFAULT_URL, help="oracle URL prefix")
    args = parser.parse_args(argv)

    print("Hello, Week 4 Assignment!\n")
    print(padding_oracle_decrypt(args.ciphertext, http_oracle(args.url)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())