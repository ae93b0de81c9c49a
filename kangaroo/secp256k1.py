"""The secp256k1 curve: point arithmetic, public keys and their hex encoding."""

from __future__ import annotations

import string
from dataclasses import replace
from typing import Sequence

from kangaroo.bigint import from_32_bytes, get_byte, to_32_bytes
from kangaroo.field import PrimeField, batch_inverse
from kangaroo.montgomery import K1Order
from kangaroo.point import Point

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

_HEX = frozenset(string.hexdigits)


def _hex_bytes(text: str, start: int, count: int) -> bytes:
    chunk = text[2 * start : 2 * (start + count)]
    if len(chunk) != 2 * count or not set(chunk) <= _HEX:
        raise ValueError(
            "invalid public key specified (unexpected hexadecimal digit)"
        )
    return bytes.fromhex(chunk)


class Secp256K1:
    """secp256k1 with a precomputed table of generator multiples."""

    def __init__(self) -> None:
        self.field = PrimeField(P)
        self.G = Point(GX, GY, 1)
        self.order = ORDER
        self.order_ops = K1Order(ORDER)

        # Entry 256*i + j holds (j+1) * 256**i * G; the last of each row is a spare.
        table: list[Point] = []
        n = replace(self.G)
        for _ in range(32):
            base = n
            table.append(base)
            n = self.double_direct(n)
            for _ in range(1, 255):
                table.append(n)
                n = self.add_direct(n, base)
            table.append(n)
        self._gtable = table

    def compute_public_key(self, priv_key: int, reduce: bool = True) -> Point:
        """priv_key * G from the table; the zero key yields the zero point."""
        q = Point()
        first = True
        for i in range(32):
            b = get_byte(priv_key, i)
            if not b:
                continue
            entry = self._gtable[256 * i + b - 1]
            q = replace(entry) if first else self.add2(q, entry)
            first = False
        if reduce:
            q.reduce(self.field)
        return q

    def compute_public_keys(self, priv_keys: Sequence[int]) -> list[Point]:
        """Public keys of many private keys, sharing one field inversion."""
        points = [self.compute_public_key(k, False) for k in priv_keys]
        inverses = batch_inverse((p.z for p in points), self.field)
        f = self.field
        for p, inverse in zip(points, inverses):
            p.x = f.mul(p.x, inverse)
            p.y = f.mul(p.y, inverse)
            p.z = 1
        return points

    def next_key(self, key: Point) -> Point:
        """key + G; ``key`` must be affine and different from G."""
        return self.add_direct(key, self.G)

    def ec(self, p: Point) -> bool:
        """True when the affine coordinates satisfy y^2 = x^3 + 7."""
        f = self.field
        return f.sub(f.square(p.y), f.add(f.cube(p.x), 7)) == 0

    def get_public_key_hex(self, compressed: bool, p: Point) -> str:
        """SEC encoding of an affine point as upper-case hex."""
        if compressed:
            prefix = b"\x02" if p.y % 2 == 0 else b"\x03"
            data = prefix + to_32_bytes(p.x)
        else:
            data = b"\x04" + to_32_bytes(p.x) + to_32_bytes(p.y)
        return data.hex().upper()

    def parse_public_key_hex(self, text: str) -> tuple[Point, bool]:
        """Decode a SEC hex public key into ``(point, is_compressed)``.

        Raises ValueError on a malformed key or one not on the curve.
        """
        if len(text) < 2:
            raise ValueError(
                "invalid public key specified (66 or 130 character length)"
            )
        kind = _hex_bytes(text, 0, 1)[0]
        if kind in (0x02, 0x03):
            if len(text) != 66:
                raise ValueError("invalid public key specified (66 character length)")
            x = from_32_bytes(_hex_bytes(text, 1, 32))
            point = Point(x, self.get_y(x, kind == 0x02), 1)
            compressed = True
        elif kind == 0x04:
            if len(text) != 130:
                raise ValueError("invalid public key specified (130 character length)")
            x = from_32_bytes(_hex_bytes(text, 1, 32))
            y = from_32_bytes(_hex_bytes(text, 33, 32))
            point = Point(x, y, 1)
            compressed = False
        else:
            raise ValueError(
                "invalid public key specified (unexpected prefix, only 02, 03 or 04 allowed)"
            )
        if not self.ec(point):
            raise ValueError("invalid public key specified (not on the elliptic curve)")
        return point, compressed

    def add(self, p1: Point, p2: Point) -> Point:
        """Projective addition of two distinct points."""
        f = self.field
        u1 = f.mul(p2.y, p1.z)
        u2 = f.mul(p1.y, p2.z)
        v1 = f.mul(p2.x, p1.z)
        v2 = f.mul(p1.x, p2.z)
        u = f.sub(u1, u2)
        v = f.sub(v1, v2)
        w = f.mul(p1.z, p2.z)
        us2 = f.square(u)
        vs2 = f.square(v)
        vs3 = f.mul(vs2, v)
        us2w = f.mul(us2, w)
        vs2v2 = f.mul(vs2, v2)
        a = f.sub(f.sub(us2w, vs3), f.add(vs2v2, vs2v2))
        x = f.mul(v, a)
        y = f.sub(f.mul(f.sub(vs2v2, a), u), f.mul(vs3, u2))
        z = f.mul(vs3, w)
        return Point(x, y, z)

    def add2(self, p1: Point, p2: Point) -> Point:
        """Projective addition where ``p2`` is affine (z == 1)."""
        f = self.field
        u1 = f.mul(p2.y, p1.z)
        v1 = f.mul(p2.x, p1.z)
        u = f.sub(u1, p1.y)
        v = f.sub(v1, p1.x)
        us2 = f.square(u)
        vs2 = f.square(v)
        vs3 = f.mul(vs2, v)
        us2w = f.mul(us2, p1.z)
        vs2v2 = f.mul(vs2, p1.x)
        a = f.sub(f.sub(us2w, vs3), f.add(vs2v2, vs2v2))
        x = f.mul(v, a)
        y = f.sub(f.mul(f.sub(vs2v2, a), u), f.mul(vs3, p1.y))
        z = f.mul(vs3, p1.z)
        return Point(x, y, z)

    def add_direct(self, p1: Point, p2: Point) -> Point:
        """Affine addition of two distinct affine points."""
        f = self.field
        s = f.mul(f.sub(p2.y, p1.y), f.inv(f.sub(p2.x, p1.x)))
        x = f.sub(f.sub(f.square(s), p1.x), p2.x)
        y = f.sub(f.mul(f.sub(p2.x, x), s), p2.y)
        return Point(x, y, 1)

    def add_direct_many(self, p1: Sequence[Point], p2: Sequence[Point]) -> list[Point]:
        """Pairwise affine sums with one shared inversion; ``p1[i].x == 0`` yields ``p2[i]``."""
        if len(p1) != len(p2):
            raise ValueError("point sequences do not have the same size")
        f = self.field
        dx = batch_inverse((f.sub(b.x, a.x) for a, b in zip(p1, p2)), f)
        result = []
        for a, b, inverse in zip(p1, p2, dx):
            if a.x == 0:
                result.append(replace(b))
                continue
            s = f.mul(f.sub(b.y, a.y), inverse)
            x = f.sub(f.sub(f.square(s), a.x), b.x)
            y = f.sub(f.mul(f.sub(b.x, x), s), b.y)
            result.append(Point(x, y, 1))
        return result

    def double(self, p: Point) -> Point:
        """Projective doubling."""
        f = self.field
        w = f.mul(3, f.square(p.x))
        s = f.mul(p.y, p.z)
        b = f.mul(f.mul(p.y, s), p.x)
        h = f.sub(f.square(w), f.mul(8, b))
        x = f.double(f.mul(h, s))
        s2 = f.square(s)
        y8s2 = f.mul(8, f.mul(f.square(p.y), s2))
        y = f.sub(f.mul(f.sub(f.mul(4, b), h), w), y8s2)
        z = f.mul(8, f.mul(s2, s))
        return Point(x, y, z)

    def double_direct(self, p: Point) -> Point:
        """Affine doubling."""
        f = self.field
        s = f.mul(f.mul(3, f.square(p.x)), f.inv(f.double(p.y)))
        x = f.sub(f.square(s), f.double(p.x))
        y = f.neg(f.add(p.y, f.mul(s, f.sub(x, p.x))))
        return Point(x, y, 1)

    def get_y(self, x: int, is_even: bool) -> int:
        """The y coordinate for ``x`` with the requested parity."""
        f = self.field
        y = f.sqrt(f.add(f.cube(x), 7))
        if (y % 2 == 0) != is_even:
            y = f.neg(y)
        return y