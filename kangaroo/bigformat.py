"""Text renderings of 320-bit integers: arbitrary bases, bit strings and limb dumps."""

from __future__ import annotations

from kangaroo.bigint import NB32BLOCK, NB64BLOCK, is_negative, wrap

DIGITS10 = "0123456789"
DIGITS16 = "0123456789ABCDEF"


def _check_base(base: int, charset: str) -> None:
    if base < 2:
        raise ValueError("base must be at least 2")
    if len(charset) < base:
        raise ValueError("charset is shorter than the base")


def to_base(value: int, base: int, charset: str) -> str:
    """Render a 320-bit value in ``base``; negative values get a leading '-'."""
    _check_base(base, charset)
    v = wrap(value)
    negative = is_negative(v)
    if negative:
        v = wrap(-v)
    digits = []
    while v:
        v, d = divmod(v, base)
        digits.append(charset[d])
    text = "".join(reversed(digits)) or charset[0]
    return "-" + text if negative else text


def from_base(text: str, base: int, charset: str) -> int:
    """Parse ``text`` written with ``charset`` (case-insensitive), wrapping to 320 bits."""
    _check_base(base, charset)
    value = 0
    for ch in text:
        index = charset.find(ch.upper())
        if index < 0 or not ch:
            raise ValueError(f"Invalid charset: unexpected character {ch!r}")
        value = value * base + index
    return wrap(value)


def to_base10(value: int) -> str:
    """Signed decimal rendering."""
    return to_base(value, 10, DIGITS10)


def from_base10(text: str) -> int:
    """Parse an unsigned decimal string."""
    return from_base(text, 10, DIGITS10)


def to_base16(value: int) -> str:
    """Signed upper-case hexadecimal rendering without prefix."""
    return to_base(value, 16, DIGITS16)


def from_base16(text: str) -> int:
    """Parse an unsigned hexadecimal string (either case)."""
    return from_base(text, 16, DIGITS16)


def _words32(value: int) -> list[int]:
    v = wrap(value)
    return [(v >> (32 * i)) & 0xFFFFFFFF for i in range(NB32BLOCK)]


def _words64(value: int) -> list[int]:
    v = wrap(value)
    return [(v >> (64 * i)) & 0xFFFFFFFFFFFFFFFF for i in range(NB64BLOCK)]


def to_base2(value: int) -> str:
    """Bits of the low nine 32-bit words, lowest word first, each word MSB first."""
    return "".join(format(word, "032b") for word in _words32(value)[: NB32BLOCK - 1])


def block_str(value: int) -> str:
    """Low eight 32-bit words as upper-case hex, highest first, space separated."""
    words = _words32(value)[: NB32BLOCK - 2]
    return " ".join(f"{word:08X}" for word in reversed(words))


def c64_str(value: int, nb_digit: int) -> str:
    """The first ``nb_digit`` 64-bit limbs as a brace-enclosed initialiser list."""
    if not 0 <= nb_digit <= NB64BLOCK:
        raise ValueError(f"nb_digit must be in 0..{NB64BLOCK}")
    parts = [
        f"0x{limb:x}ULL" if limb else "0ULL" for limb in _words64(value)[:nb_digit]
    ]
    return "{" + ",".join(parts) + "}"