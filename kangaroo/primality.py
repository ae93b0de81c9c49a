"""Probabilistic primality testing and modular-inverse self checks."""

from __future__ import annotations

from typing import Optional

from kangaroo.bigformat import to_base16
from kangaroo.bigint import bit_length, rand_bits
from kangaroo.field import PrimeField
from kangaroo.rng import MersenneTwister


def is_probable_prime(
    n: int, rng: Optional[MersenneTwister] = None, rounds: int = 50
) -> bool:
    """Miller-Rabin test of ``n`` with ``rounds`` random witnesses.

    Witnesses are drawn with the same bit length as ``n`` and rejected
    until they fall strictly between 1 and ``n - 1``.
    """
    if rounds < 0:
        raise ValueError("rounds must be non-negative")
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    nb_bit = bit_length(n)
    n1 = n - 1
    q = n1
    e = 0
    while q % 2 == 0:
        q //= 2
        e += 1

    for _ in range(rounds):
        x = 0
        while x <= 1 or x >= n1:
            x = rand_bits(nb_bit, rng)
        x = pow(x, q, n)
        if x == 1 or x == n1:
            continue

        for _ in range(e - 1):
            x = x * x % n
            if x == 1:
                return False
            if x == n1:
                break

        if x == n1:
            continue
        return False

    return True


def check_inv(a: int, field: PrimeField) -> bool:
    """Check that ``field.inv`` inverts ``a`` and that inverting twice gives ``a`` back.

    A mismatch is reported on standard output together with the value
    expected from Euler's formula ``a^(p-2)``.
    """
    e = field.p - 2
    inverse = field.inv(a)
    if field.mul(inverse, a) != 1:
        print(f"ModInv() Results Wrong for {to_base16(a)}")
        print(f" Got: {to_base16(inverse)}")
        print(f" Exp: {to_base16(field.exp(a, e))}")
        return False

    back = field.inv(inverse)
    if back != a:
        print(f"ModInv() Results Wrong for {to_base16(inverse)}")
        print(f" Got: {to_base16(back)}")
        print(f" Exp: {to_base16(field.exp(inverse, e))}")
        return False

    return True