"""Mersenne Twister pseudo-random generator with a process-wide default state."""

from __future__ import annotations

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF


class MersenneTwister:
    """MT19937 generator seeded from a single 32-bit value."""

    def __init__(self, seed: int) -> None:
        seed &= _MASK32
        key = []
        for pos in range(_N):
            key.append(seed)
            seed = (1812433253 * (seed ^ (seed >> 30)) + pos + 1) & _MASK32
        self._key = key
        self._pos = _N

    def _twist(self) -> None:
        key = self._key
        for i in range(_N):
            y = (key[i] & _UPPER_MASK) | (key[(i + 1) % _N] & _LOWER_MASK)
            key[i] = key[(i + _M) % _N] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._pos = 0

    def next_u32(self) -> int:
        """Return the next tempered 32-bit output."""
        if self._pos == _N:
            self._twist()
        y = self._key[self._pos]
        self._pos += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def random(self) -> float:
        """Return a float with 53 random bits in [0, 1)."""
        a = self.next_u32() >> 5
        b = self.next_u32() >> 6
        return (a * 67108864.0 + b) / 9007199254740992.0


_default = MersenneTwister(0)


def rseed(seed: int) -> None:
    """Reseed the default generator."""
    global _default
    _default = MersenneTwister(seed)


def rndl() -> int:
    """Return the next 32-bit value of the default generator."""
    return _default.next_u32()


def rnd() -> float:
    """Return the next float in [0, 1) of the default generator."""
    return _default.random()