"""Helpers for 320-bit two's-complement integers held as Python ints."""

from __future__ import annotations

import math
from typing import Iterator, Optional

from kangaroo.rng import MersenneTwister
from kangaroo.rng import rndl as _default_rndl

BITS = 320
NB64BLOCK = 5
NB32BLOCK = 10
MASK = (1 << BITS) - 1
SIGN_BIT = 1 << (BITS - 1)
_MASK256 = (1 << 256) - 1


def wrap(value: int) -> int:
    """Reduce an int to its unsigned 320-bit representation."""
    return value & MASK


def to_signed(value: int) -> int:
    """Interpret a 320-bit pattern as a signed integer."""
    v = wrap(value)
    return v - (1 << BITS) if v & SIGN_BIT else v


def is_negative(value: int) -> bool:
    """True when the sign bit of the 320-bit pattern is set."""
    return bool(wrap(value) & SIGN_BIT)


def shift_right(value: int, n: int) -> int:
    """Arithmetic (sign-extending) right shift."""
    if n < 0:
        raise ValueError("shift count must be non-negative")
    return wrap(to_signed(value) >> n)


def shift_left(value: int, n: int) -> int:
    """Left shift, dropping bits beyond 320."""
    if n < 0:
        raise ValueError("shift count must be non-negative")
    return wrap(wrap(value) << n)


def div_mod(a: int, b: int) -> tuple[int, int]:
    """Unsigned quotient and remainder of two 320-bit values."""
    a = wrap(a)
    b = wrap(b)
    if b == 0:
        raise ZeroDivisionError("Divide by 0!")
    return divmod(a, b)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor; negative operands are taken by magnitude."""
    a = wrap(a)
    b = wrap(b)
    if a == 0:
        return b
    if b == 0:
        return a
    return wrap(math.gcd(abs(to_signed(a)), abs(to_signed(b))))


def bit_length(value: int) -> int:
    """Number of significant bits of the magnitude."""
    return abs(to_signed(value)).bit_length()


def get_size(value: int) -> int:
    """Number of significant 32-bit limbs (at least one)."""
    return max(1, (wrap(value).bit_length() + 31) // 32)


def get_size64(value: int) -> int:
    """Number of significant 64-bit limbs (at least one)."""
    return max(1, (wrap(value).bit_length() + 63) // 64)


def _check_byte_index(n: int) -> None:
    if not 0 <= n < BITS // 8:
        raise IndexError(f"byte index {n} out of range")


def get_byte(value: int, n: int) -> int:
    """Byte ``n`` of the little-endian representation."""
    _check_byte_index(n)
    return (wrap(value) >> (8 * n)) & 0xFF


def set_byte(value: int, n: int, byte: int) -> int:
    """Return ``value`` with little-endian byte ``n`` replaced."""
    _check_byte_index(n)
    if not 0 <= byte <= 0xFF:
        raise ValueError("byte must be in 0..255")
    shift = 8 * n
    return (wrap(value) & ~(0xFF << shift) & MASK) | (byte << shift)


def swap_bit(value: int, bit_number: int) -> int:
    """Return ``value`` with one bit flipped."""
    if not 0 <= bit_number < BITS:
        raise IndexError(f"bit number {bit_number} out of range")
    return wrap(value) ^ (1 << bit_number)


def _limbs32(value: int) -> Iterator[int]:
    v = wrap(value)
    for _ in range(NB32BLOCK):
        yield v & 0xFFFFFFFF
        v >>= 32


def to_double(value: int) -> float:
    """Unsigned value as a float, accumulated limb by limb."""
    total = 0.0
    base = 1.0
    for limb in _limbs32(value):
        total += float(limb) * base
        base *= 4294967296.0
    return total


def to_32_bytes(value: int) -> bytes:
    """Low 256 bits as 32 big-endian bytes."""
    return (wrap(value) & _MASK256).to_bytes(32, "big")


def from_32_bytes(data: bytes) -> int:
    """Integer from 32 big-endian bytes."""
    if len(data) != 32:
        raise ValueError("exactly 32 bytes are required")
    return int.from_bytes(data, "big")


def rand_bits(nbit: int, rng: Optional[MersenneTwister] = None) -> int:
    """Random value below ``2**nbit`` drawn in 32-bit words, low word first."""
    if not 0 <= nbit < BITS:
        raise ValueError(f"nbit must be in 0..{BITS - 1}")
    draw = rng.next_u32 if rng is not None else _default_rndl
    nb, left = divmod(nbit, 32)
    result = 0
    for word_index in range(nb):
        result |= draw() << (32 * word_index)
    result |= (draw() & ((1 << left) - 1)) << (32 * nb)
    return result


def rand_below(limit: int, rng: Optional[MersenneTwister] = None) -> int:
    """Random value reduced modulo ``limit``."""
    limit = wrap(limit)
    if limit == 0:
        raise ZeroDivisionError("Divide by 0!")
    r = rand_bits(bit_length(limit), rng)
    return div_mod(r, limit)[1]