# cryptolab

A set of small cryptanalysis exercises, each usable as a library module and as a
command.

| Module | Command | What it does |
| --- | --- | --- |
| `cryptolab.manytimepad` | `cryptolab-manytimepad` | Guesses the key of an XOR stream cipher reused across several messages (the "space XOR letter" heuristic) and decodes a built-in target ciphertext. |
| `cryptolab.aesmodes` | `cryptolab-aes` | Decrypts IV-prefixed AES-128 ciphertext in CBC and CTR modes. |
| `cryptolab.chainhash` | `cryptolab-chainhash` | Computes the chained SHA-256 digest h0 of data split into 1024-byte blocks, hashed from the last block backwards. |
| `cryptolab.paddingoracle` | `cryptolab-paddingoracle` | Decrypts AES-CBC ciphertext byte by byte through a padding oracle. |
| `cryptolab.dlog` | `cryptolab-dlog` | Solves `g**x == h (mod p)` for `x < 2**40` with a meet-in-the-middle search. |
| `cryptolab.rsabreak` | `cryptolab-rsabreak` | Factors RSA moduli whose primes lie too close together and decrypts a message with the factors. |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from cryptolab.manytimepad import recover_key, decode
from cryptolab.aesmodes import decrypt_cbc, decrypt_ctr
from cryptolab.chainhash import chained_sha256, file_hash
from cryptolab.dlog import solve_dlog
from cryptolab.rsabreak import (
    factor_close_primes,
    factor_near_primes,
    factor_skewed_primes,
    decrypt_with_factors,
)

key = recover_key(ciphertexts, target)      # bytes, zero where nothing was guessed
text = decode(key, target)

text = decrypt_cbc(key16, iv_and_ciphertext)
text = decrypt_ctr(key16, iv_and_ciphertext)

h0 = chained_sha256(b"some data", 1024)     # hex string; "" for empty data
h0 = file_hash("video.mp4")

x = solve_dlog(p, g, h, 20)                 # g**x == h (mod p), x < 2**40, or None

p, q = factor_close_primes(n)               # |p - q| < 2 * n**(1/4)
factors = factor_near_primes(n, 1 << 19)    # tries isqrt(n) + 1 + k, k <= limit; or None
p, q = factor_skewed_primes(n)              # |3p - 2q| < n**(1/4)
text = decrypt_with_factors(c, 65537, p, q)
```

Notes on behaviour:

- `decrypt_cbc` removes as many bytes as the last decrypted byte says; the
  padding bytes themselves are not checked. Both AES functions raise
  `ValueError` for a key that is not 16 bytes or for ciphertext of the wrong
  length, and `aesmodes.DecryptionError` (a `ValueError`) when the result is not
  valid UTF-8 or the padding length is too large.
- `decrypt_with_factors` takes the message as the hex digits after the last
  `00` in the decrypted value and raises `ValueError` if there is none or the
  message is not valid UTF-8.
- `solve_dlog` raises `ValueError` if `g` has no inverse modulo `p`.

### Padding oracle

The attack takes any callable `oracle(iv, block) -> bool` that returns `True`
when the forged IV makes the block decrypt to validly padded data:

```python
from cryptolab.paddingoracle import padding_oracle_decrypt, http_oracle

plaintext = padding_oracle_decrypt(ciphertext_hex, oracle)
plaintext = padding_oracle_decrypt(ciphertext_hex, http_oracle(base_url))
```

`http_oracle(base_url)` sends a GET request to `base_url` followed by the hex of
the IV and block, and treats status 403 as bad padding. Candidate bytes are tried
in the order given by `guess_candidates()`: padding values 1–16, space, lowercase
and then uppercase letters; if none is accepted, `PaddingOracleError` is raised.
The recovered plaintext keeps its padding bytes.

## Commands

```
cryptolab-manytimepad
cryptolab-aes
cryptolab-chainhash FILE [--expect HASH]
cryptolab-paddingoracle [CIPHERTEXT] [--url URL]
cryptolab-dlog [--p P] [--g G] [--h H] [--bits BITS]
cryptolab-rsabreak
```

- `cryptolab-manytimepad`, `cryptolab-aes` and `cryptolab-rsabreak` run on
  built-in challenge data and print the results.
- `cryptolab-chainhash` prints the digest h0 of `FILE`; with `--expect` it
  compares against the given digest and exits with status 1 on a mismatch.
- `cryptolab-paddingoracle` decrypts a built-in ciphertext (or the one given)
  by querying the oracle at `--url`; it needs network access to that service.
- `cryptolab-dlog` solves a built-in instance unless the values are given. It
  builds a table of `2**BITS` entries and may search as many again, so with the
  default of 20 it takes a while.

## What it does not do

No sample files are bundled: `cryptolab-chainhash` hashes only the file you
name. There is no local padding-oracle server; the padding-oracle command works
only against a service reachable at the given URL.