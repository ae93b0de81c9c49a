"""Arithmetic in a prime field and batched modular inversion."""

from __future__ import annotations

from typing import Iterable


class PrimeField:
    """Integers modulo ``p``; operands are reduced into ``[0, p)`` first."""

    __slots__ = ("p",)

    def __init__(self, p: int) -> None:
        if p < 2:
            raise ValueError("field characteristic must be at least 2")
        self.p = p

    def __repr__(self) -> str:
        return f"PrimeField(0x{self.p:X})"

    def _r(self, a: int) -> int:
        return a % self.p

    def add(self, a: int, b: int) -> int:
        """a + b (mod p)."""
        return (self._r(a) + self._r(b)) % self.p

    def sub(self, a: int, b: int) -> int:
        """a - b (mod p)."""
        return (self._r(a) - self._r(b)) % self.p

    def neg(self, a: int) -> int:
        """-a (mod p)."""
        return (-a) % self.p

    def double(self, a: int) -> int:
        """2a (mod p)."""
        return (2 * self._r(a)) % self.p

    def mul(self, a: int, b: int) -> int:
        """a * b (mod p)."""
        return (self._r(a) * self._r(b)) % self.p

    def square(self, a: int) -> int:
        """a^2 (mod p)."""
        a = self._r(a)
        return (a * a) % self.p

    def cube(self, a: int) -> int:
        """a^3 (mod p)."""
        return pow(self._r(a), 3, self.p)

    def exp(self, a: int, e: int) -> int:
        """a^e (mod p) for a non-negative exponent."""
        if e < 0:
            raise ValueError("exponent must be non-negative")
        return pow(self._r(a), e, self.p)

    def inv(self, a: int) -> int:
        """a^-1 (mod p), or 0 when ``a`` has no inverse."""
        a = self._r(a)
        if a == 0:
            return 0
        try:
            return pow(a, -1, self.p)
        except ValueError:
            return 0

    def has_sqrt(self, a: int) -> bool:
        """Euler's criterion: True when ``a`` is a non-zero quadratic residue."""
        return pow(self._r(a), (self.p - 1) // 2, self.p) == 1

    def sqrt(self, a: int) -> int:
        """A square root of ``a`` (mod p), or 0 when none exists or p is even."""
        p = self.p
        if p % 2 == 0 or not self.has_sqrt(a):
            return 0
        a = self._r(a)
        if p % 4 == 3:
            return pow(a, (p + 1) // 4, p)

        # Tonelli-Shanks
        s = p - 1
        e = 0
        while s % 2 == 0:
            s //= 2
            e += 1
        q = 2
        while self.has_sqrt(q):
            q += 1
        c = pow(q, s, p)
        t = pow(a, s, p)
        r = pow(a, (s + 1) // 2, p)
        m = e
        while t != 1:
            t2 = t
            i = 0
            while t2 != 1:
                t2 = t2 * t2 % p
                i += 1
            b = c
            for _ in range(m - i - 1):
                b = b * b % p
            m = i
            c = b * b % p
            t = t * c % p
            r = r * b % p
        return r

    def positive(self, a: int) -> tuple[int, bool]:
        """Return the lower of ``a`` and ``-a`` and whether it was negated."""
        a = self._r(a)
        n = self.neg(a)
        if a < n:
            return a, False
        return n, True


def batch_inverse(values: Iterable[int], field: PrimeField) -> list[int]:
    """Invert every value with a single field inversion.

    If any value is not invertible the whole batch comes back as zeros.
    """
    items = [field._r(v) for v in values]
    if not items:
        return []
    prefix = [items[0]]
    for v in items[1:]:
        prefix.append(field.mul(prefix[-1], v))
    inverse = field.inv(prefix[-1])
    result = [0] * len(items)
    for i in range(len(items) - 1, 0, -1):
        result[i] = field.mul(prefix[i - 1], inverse)
        inverse = field.mul(inverse, items[i])
    result[0] = inverse
    return result