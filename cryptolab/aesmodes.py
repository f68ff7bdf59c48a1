"""AES-128 decryption in CBC and CTR modes with the IV prepended to the data."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16
KEY_SIZE = 16

_QUESTIONS = (
    (
        "Question 1: Decrypted plain text using CBC mode",
        "cbc",
        "140b41b22a29beb4061bda66b6747e14",
        "4ca00ff4c898d61e1edbf1800618fb2828a226d160dad07883d04e008a7897ee2e4b7465d5290d0c0e6c6822236e1daafb94ffe0c5da05d9476be028ad7c1d81",
    ),
    (
        "Question 2: Decrypted plain text using CBC mode",
        "cbc",
        "140b41b22a29beb4061bda66b6747e14",
        "5b68629feb8606f9a6667670b75b38a5b4832d0f26e1ab7da33249de7d4afc48e713ac646ace36e872ad5fb8a512428a6e21364b0c374df45503473c5242a253",
    ),
    (
        "Question 3: Decrypted plain text using ctr mode",
        "ctr",
        "36f18357be4dbd77f050515c73fcf9f2",
        "69dda8455c7dd4254bf353b773304eec0ec7702330098ce7f7520d1cbbb20fc388d1b0adb5054dbd7370849dbf0b88d393f252e764f1f5f7ad97ef79d59ce29f5f51eeca32eabedd9afa9329",
    ),
    (
        "Question 4: Decrypted plain text using ctr mode",
        "ctr",
        "36f18357be4dbd77f050515c73fcf9f2",
        "770b80259ec33beb2561358a9f2dc617e46218c0a53cbeca695ae45faa8952aa0e311bde9d4e01726d3184c34451",
    ),
)


class DecryptionError(ValueError):
    """Raised when decrypted data cannot be turned into a message."""


def _check_key(key: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"AES-128 key must be {KEY_SIZE} bytes, got {len(key)}")


def _to_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecryptionError("Decryption failed") from exc


def decrypt_cbc(key: bytes, ciphertext: bytes) -> str:
    """Decrypt IV-prefixed CBC ``ciphertext`` and strip its padding.

    The padding length is read from the last byte only; its contents are
    not checked.
    """
    _check_key(key)
    if len(ciphertext) < 2 * BLOCK_SIZE or len(ciphertext) % BLOCK_SIZE:
        raise ValueError(
            "CBC ciphertext must be an IV plus at least one whole 16-byte block"
        )
    iv, body = ciphertext[:BLOCK_SIZE], ciphertext[BLOCK_SIZE:]
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(body) + decryptor.finalize()
    pad_length = padded[-1]
    if pad_length > len(padded):
        raise DecryptionError("padding length exceeds message length")
    return _to_text(padded[: len(padded) - pad_length])


def decrypt_ctr(key: bytes, ciphertext: bytes) -> str:
    """Decrypt IV-prefixed CTR ``ciphertext``; the IV is the initial counter."""
    _check_key(key)
    if len(ciphertext) < BLOCK_SIZE:
        raise ValueError("CTR ciphertext must start with a 16-byte IV")
    iv, body = ciphertext[:BLOCK_SIZE], ciphertext[BLOCK_SIZE:]
    decryptor = Cipher(algorithms.AES(key), modes.CTR(iv)).decryptor()
    return _to_text(decryptor.update(body) + decryptor.finalize())


def main(argv: Sequence[str] | None = None) -> int:
    """Decrypt and print the built-in CBC and CTR messages."""
    parser = argparse.ArgumentParser(
        description="Decrypt sample AES-128 CBC and CTR messages."
    )
    parser.parse_args(argv)

    decrypt = {"cbc": decrypt_cbc, "ctr": decrypt_ctr}
    print("Hello, Week 2 Assignment!\n")
    for title, mode, key_hex, ciphertext_hex in _QUESTIONS:
        print(title)
        try:
            text = decrypt[mode](bytes.fromhex(key_hex), bytes.fromhex(ciphertext_hex))
        except DecryptionError:
            text = "Decryption failed"
        print(f"{text}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())