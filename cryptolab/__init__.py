"""Cryptanalysis exercises: many-time pad, AES modes, chained hashing, padding oracle, discrete log and weak RSA."""

__version__ = "0.1.0"

__all__ = [
    "aesmodes",
    "chainhash",
    "dlog",
    "manytimepad",
    "paddingoracle",
    "rsabreak",
]