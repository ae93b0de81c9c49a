import pytest

from kangaroo.bigformat import (
    block_str,
    c64_str,
    from_base,
    from_base10,
    from_base16,
    to_base,
    to_base2,
    to_base10,
    to_base16,
)
from kangaroo.bigint import MASK, wrap

SECP_P = "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F"


@pytest.mark.parametrize(
    "text", ["4743256844168384767987", "1679314142928575978367", "0", "7"]
)
def test_base10_round_trip(text):
    assert to_base10(from_base10(text)) == text


def test_base10_add_matches_source_value():
    a = from_base10("4743256844168384767987")
    b = from_base10("1679314142928575978367")
    assert to_base10(wrap(a + b)) == "6422570987096960746354"


def test_base10_mult_matches_source_value():
    a = from_base10(
        "3890902718436931151119442452387018319292503094706912504064239834754167"
    )
    b = from_base10(
        "474325684416838476798716793141429285759783676422570987096960746354"
    )
    e = from_base10(
        "1845555094921934741640873731771879197054909502699192730283220486240724687661257894226660948002650341240452881231721004292250660431557118"
    )
    assert wrap(a * b) == e


def test_base16_round_trip_prime():
    p = from_base16(SECP_P)
    assert p == 2**256 - 2**32 - 977
    assert to_base16(p) == SECP_P


def test_base16_lowercase_accepted():
    assert from_base16(SECP_P.lower()) == from_base16(SECP_P)


def test_zero_renders_as_single_digit():
    assert to_base16(0) == "0"
    assert to_base10(0) == "0"


def test_negative_values_get_sign():
    assert to_base10(wrap(-12345)) == "-12345"
    assert to_base16(MASK) == "-1"


def test_invalid_character_raises():
    with pytest.raises(ValueError):
        from_base16("12G4")
    with pytest.raises(ValueError):
        from_base10("12a")


def test_generic_base_round_trip():
    charset = "01234567"
    value = from_base10("4743256844168384767987")
    text = to_base(value, 8, charset)
    assert from_base(text, 8, charset) == value
    assert int(text, 8) == value


def test_bad_base_rejected():
    with pytest.raises(ValueError):
        to_base(5, 1, "0")
    with pytest.raises(ValueError):
        to_base(5, 16, "0123")


def test_from_base_wraps_to_320_bits():
    big = "1" + "0" * 80
    assert from_base16(big) == 0


def test_to_base2_layout():
    bits = to_base2(1)
    assert len(bits) == 288
    assert bits[:32] == "0" * 31 + "1"
    assert bits[32:] == "0" * 256


def test_block_str_layout():
    value = from_base16(SECP_P)
    text = block_str(value)
    words = text.split(" ")
    assert len(words) == 8
    assert "".join(words) == SECP_P


def test_c64_str():
    assert c64_str(0, 2) == "{0ULL,0ULL}"
    assert c64_str(255, 1) == "{0xffULL}"
    with pytest.raises(ValueError):
        c64_str(1, 6)