"""Montgomery multiplication and the secp256k1-specific fast reductions."""

from __future__ import annotations

from kangaroo.bigint import get_size, is_negative, wrap
from kangaroo.field import PrimeField

_MASK64 = (1 << 64) - 1
_MASK256 = (1 << 256) - 1
_K1_FOLD = 0x1000003D1


def _redc(a: int, b: int, modulus: int, mm64: int, rounds: int) -> int:
    """Interleaved word-by-word Montgomery product over ``rounds`` limbs of ``b``."""
    t = 0
    for i in range(rounds):
        t += a * ((b >> (64 * i)) & _MASK64)
        m = (t * mm64) & _MASK64
        t = (t + m * modulus) >> 64
    return t - modulus if t >= modulus else t


def _neg_inverse64(n: int) -> int:
    if n % 2 == 0:
        raise ValueError("Montgomery modulus must be odd")
    return (-pow(n, -1, 1 << 64)) & _MASK64


class Montgomery:
    """Montgomery arithmetic modulo an odd ``p`` with ``R = 2**(64*rounds)``."""

    def __init__(self, p: int) -> None:
        if p < 3:
            raise ValueError("Montgomery modulus must be an odd number above 2")
        self.p = p
        self.mm64 = _neg_inverse64(p)
        self.rounds = max(1, get_size(p) // 2)
        field = PrimeField(p)
        ri = self.mult(1, 1)
        r3_inv = self.mult(ri, ri)
        self.r = field.inv(ri)
        self.r2 = field.inv(self.mult(ri, 1))
        self.r3 = field.inv(r3_inv)
        self.r4 = field.inv(self.mult(r3_inv, 1))

    def __repr__(self) -> str:
        return f"Montgomery(0x{self.p:X})"

    def mult(self, a: int, b: int) -> int:
        """a * b * R^-1 (mod p) for operands below ``p``."""
        return _redc(a, b, self.p, self.mm64, self.rounds)

    def mod_mul(self, a: int, b: int) -> int:
        """a * b (mod p) through two Montgomery products."""
        return self.mult(self.r2, self.mult(a, b))


def mod_mul_k1(a: int, b: int) -> int:
    """a * b reduced modulo the secp256k1 prime into 256 bits.

    The result is congruent to the product but, as with the fast folding
    reduction it mirrors, is not forced below the prime.
    """
    product = (a & _MASK256) * (b & _MASK256)
    low = product & _MASK256
    folded = (product >> 256) * _K1_FOLD
    s = low + (folded & _MASK256)
    carry = s >> 256
    s &= _MASK256
    return (s + ((folded >> 256) + carry) * _K1_FOLD) & _MASK256


def mod_square_k1(a: int) -> int:
    """a^2 reduced modulo the secp256k1 prime into 256 bits."""
    return mod_mul_k1(a, a)


class K1Order:
    """Arithmetic modulo a curve group order using 256-bit Montgomery products."""

    def __init__(self, order: int) -> None:
        if order < 3:
            raise ValueError("order must be an odd number above 2")
        self.order = order
        self.mm64 = _neg_inverse64(order)
        self.r2 = pow(2, 512, order)

    def __repr__(self) -> str:
        return f"K1Order(0x{self.order:X})"

    def mul(self, a: int, b: int) -> int:
        """a * b (mod order)."""
        t = _redc(b, a, self.order, self.mm64, 4)
        return _redc(self.r2, t, self.order, self.mm64, 4)

    def add(self, a: int, b: int) -> int:
        """a + b (mod order) for operands below the order."""
        s = wrap(a + b - self.order)
        return wrap(s + self.order) if is_negative(s) else s

    def sub(self, a: int, b: int) -> int:
        """a - b (mod order) for operands below the order."""
        s = wrap(a - b)
        return wrap(s + self.order) if is_negative(s) else s

    def neg(self, a: int) -> int:
        """order - a; zero maps to the order itself."""
        return wrap(self.order - a)