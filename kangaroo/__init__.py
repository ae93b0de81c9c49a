"""secp256k1 curve arithmetic, prime-field tools, fixed-width integer helpers and a seedable generator."""

__version__ = "2.2.0"

__all__ = [
    "bigformat",
    "bigint",
    "field",
    "montgomery",
    "point",
    "primality",
    "rng",
    "secp256k1",
]