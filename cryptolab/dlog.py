"""Discrete logarithm by meet-in-the-middle for exponents below 2**(2*bits)."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

DEFAULT_BITS = 20

_P = 13407807929942597099574024998205846127479365820592393377723561443721764030073546976801874298166903427690031858186486050853753882811946569946433649006084171
_G = 11717829880366207009516117596335367088558084999998952205599979459063929499736583746670572176471460312928594829675428279466566527115212748467589894601965568
_H = 3239475104050450443565264378728065788649097520952449527834792452971981976143292558073856937958553180532878928001494706097394108577585732452307673444020333


def solve_dlog(p: int, g: int, h: int, bits: int = DEFAULT_BITS) -> int | None:
    """Return x with g**x == h (mod p) and 0 <= x < 2**(2*bits), or None.

    Writes x = x0 * B + x1 with B = 2**bits and matches h / g**x1 against
    (g**B)**x0. Raises ValueError if g is not invertible modulo p.
    """
    if bits < 0:
        raise ValueError("bits must be non-negative")
    base = 1 << bits
    g_inverse = pow(g, -1, p)

    table: dict[int, int] = {}
    value = h % p
    for x1 in range(base):
        table[value] = x1
        value = value * g_inverse % p

    giant = pow(g, base, p)
    current = 1 % p
    for x0 in range(base):
        x1 = table.get(current)
        if x1 is not None:
            return x0 * base + x1
        current = current * giant % p
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Solve a discrete logarithm and print the exponent."""
    parser = argparse.ArgumentParser(
        description="Solve g**x = h (mod p) by meet-in-the-middle."
    )
    parser.add_argument("--p", type=int, default=_P, help="prime modulus")
    parser.add_argument("--g", type=int, default=_G, help="base")
    parser.add_argument("--h", type=int, default=_H, help="target value")
    parser.add_argument(
        "--bits", type=int, default=DEFAULT_BITS, help="half the exponent bit length"
    )
    args = parser.parse_args(argv)

    print("Hello, Week 5 Assignment!\n")
    result = solve_dlog(args.p, args.g, args.h, args.bits)
    if result is None:
        print("No solution found!")
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())