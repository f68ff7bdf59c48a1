"""Factor RSA moduli whose primes lie close together and decrypt with them."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from math import isqrt

DEFAULT_LIMIT = 1 << 19

_N1 = 179769313486231590772930519078902473361797697894230657273430081157732675805505620686985379449212982959585501387537164015710139858647833778606925583497541085196591615128057575940752635007475935288710823649949940771895617054361149474865046711015101563940680527540071584560878577663743040086340742855278549092581
_N2 = 648455842808071669662824265346772278726343720706976263060439070378797308618081116462714015276061417569195587321840254520655424906719892428844841839353281972988531310511738648965962582821502504990264452100885281673303711142296421027840289307657458645233683357077834689715838646088239640236866252211790085787877
_N3 = 720062263747350425279564435525583738338084451473999841826653057981916355690188337790423408664187663938485175264994017897083524079135686877441155132015188279331812309091996246361896836573643119174094961348524639707885238799396839230364676670221627018353299443241192173812729276147530748597302192751375739387929
_CIPHERTEXT = 22096451867410381776306561134883418017410069787892831071731839143676135600120538004282329650473509424343946219751512256465839967942889460764542040581564748988013734864120452325229320176487916666402997509188729971690526083222067771600019329260870009579993724077458967773697817571267229951148662959627934791540
_E = 65537


def factor_close_primes(n: int) -> tuple[int, int]:
    """Factor ``n`` when |p - q| < 2 * n**(1/4), using A = isqrt(n) + 1."""
    a = isqrt(n) + 1
    x = isqrt(a * a - n)
    return a - x, a + x


def factor_near_primes(n: int, limit: int = DEFAULT_LIMIT) -> tuple[int, int] | None:
    """Factor ``n`` by trying A = isqrt(n) + 1 + k for 0 <= k <= ``limit``."""
    a = isqrt(n) + 1
    for _ in range(limit + 1):
        x = isqrt(a * a - n)
        if a * a == x * x + n:
            return a - x, a + x
        a += 1
    return None


def factor_skewed_primes(n: int) -> tuple[int, int]:
    """Factor ``n`` when |3p - 2q| < n**(1/4)."""
    b = isqrt(24 * n) + 1
    y = isqrt(b * b - 24 * n)
    return (b - y) // 6, (b + y) // 4


def decrypt_with_factors(ciphertext: int, e: int, p: int, q: int) -> str:
    """Decrypt a PKCS#1 v1.5-style RSA ciphertext given the factors of n.

    The message is taken as the hex digits after the last "00" in the
    decrypted value. Raises ValueError if that separator is missing, if the
    exponent has no inverse, or if the message is not valid hex or UTF-8.
    """
    phi = (p - 1) * (q - 1)
    d = pow(e, -1, phi)
    text = format(pow(ciphertext, d, p * q), "x")
    if "00" not in text:
        raise ValueError("decrypted value has no 00 separator")
    _, message_hex = text.rsplit("00", 1)
    return bytes.fromhex(message_hex).decode("utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Factor the built-in moduli and decrypt the sample ciphertext."""
    parser = argparse.ArgumentParser(
        description="Factor RSA moduli with close primes and decrypt a message."
    )
    parser.parse_args(argv)

    print("Hello, Week 6 Assignment!\n")
    print("\nQuestion 1:")
    p1, q1 = factor_close_primes(_N1)
    print(f"p: {p1}\nq: {q1}")

    print("\nQuestion 2:")
    factors = factor_near_primes(_N2)
    if factors is None:
        print("No factors found in range")
        return 1
    print(f"p: {factors[0]}\nq: {factors[1]}")

    print("\nQuestion 3:")
    p3, q3 = factor_skewed_primes(_N3)
    print(f"p: {p3}\nq: {q3}")

    print("\nQuestion 4:")
    print(f"Plaintext: {decrypt_with_factors(_CIPHERTEXT, _E, p1, q1)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())