"""Elliptic curve points in projective coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from kangaroo.bigformat import to_base16
from kangaroo.field import PrimeField


@dataclass(slots=True)
class Point:
    """A point ``(x, y, z)``; affine points carry ``z == 1``."""

    x: int = 0
    y: int = 0
    z: int = 0

    def is_zero(self) -> bool:
        """True when both ``x`` and ``y`` are zero."""
        return self.x == 0 and self.y == 0

    def reduce(self, field: PrimeField) -> Point:
        """Divide ``x`` and ``y`` by ``z`` in place, set ``z`` to 1, and return self."""
        inverse = field.inv(self.z)
        self.x = field.mul(self.x, inverse)
        self.y = field.mul(self.y, inverse)
        self.z = 1
        return self

    def equals(self, other: Point) -> bool:
        """Coordinate-wise equality, ``z`` included."""
        return self.x == other.x and self.y == other.y and self.z == other.z

    def clear(self) -> None:
        """Set every coordinate to zero."""
        self.x = 0
        self.y = 0
        self.z = 0

    def __str__(self) -> str:
        return (
            f"X={to_base16(self.x)}\n"
            f"Y={to_base16(self.y)}\n"
            f"Z={to_base16(self.z)}\n"
        )