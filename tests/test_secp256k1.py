import pytest

from kangaroo.point import Point
from kangaroo.secp256k1 import GX, GY, ORDER, P, Secp256K1


@pytest.fixture(scope="module")
def curve():
    return Secp256K1()


def test_generator_on_curve(curve):
    assert curve.G.equals(Point(GX, GY, 1))
    assert curve.ec(curve.G)
    assert curve.order == ORDER


def test_public_key_of_one_is_generator(curve):
    assert curve.compute_public_key(1).equals(curve.G)


def test_public_key_of_two_known_value(curve):
    q = curve.compute_public_key(2)
    assert q.x == 0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5
    assert curve.ec(q)


def test_public_key_of_order_minus_one_is_negated_generator(curve):
    q = curve.compute_public_key(ORDER - 1)
    assert q.x == GX
    assert q.y == P - GY
    assert q.z == 1


def test_zero_key_gives_zero_point(curve):
    assert curve.compute_public_key(0).is_zero()


@pytest.mark.parametrize("a,b", [(3, 5), (0x1234, 0x100), (0xDEADBEEF, 0xCAFEBABE12345)])
def test_public_key_is_additive(curve, a, b):
    pa = curve.compute_public_key(a)
    pb = curve.compute_public_key(b)
    assert curve.add_direct(pa, pb).equals(curve.compute_public_key(a + b))


def test_unreduced_key_reduces_to_same(curve):
    k = 0xABCDEF0123456789ABCDEF
    q = curve.compute_public_key(k, False)
    q.reduce(curve.field)
    assert q.equals(curve.compute_public_key(k))


def test_compute_public_keys_matches_single(curve):
    keys = [1, 2, 0x1357, 0xFEDCBA9876543210FF]
    batch = curve.compute_public_keys(keys)
    assert len(batch) == len(keys)
    for k, q in zip(keys, batch):
        assert q.equals(curve.compute_public_key(k))


def test_next_key(curve):
    two = curve.compute_public_key(2)
    assert curve.next_key(two).equals(curve.compute_public_key(3))


def test_double_direct_matches_add(curve):
    g2 = curve.double_direct(curve.G)
    assert g2.equals(curve.compute_public_key(2))
    assert curve.ec(g2)


def test_projective_double(curve):
    q = curve.double(curve.G)
    q.reduce(curve.field)
    assert q.equals(curve.compute_public_key(2))


def test_projective_add(curve):
    g2 = curve.compute_public_key(2)
    q = curve.add(curve.G, g2)
    q.reduce(curve.field)
    assert q.equals(curve.compute_public_key(3))


def test_add2_with_projective_first_operand(curve):
    g5 = curve.compute_public_key(5, False)
    q = curve.add2(g5, curve.G)
    q.reduce(curve.field)
    assert q.equals(curve.compute_public_key(6))


def test_add_direct_many(curve):
    p1 = [curve.compute_public_key(k) for k in (2, 7)] + [Point(0, 0, 1)]
    p2 = [curve.compute_public_key(k) for k in (3, 11, 4)]
    result = curve.add_direct_many(p1, p2)
    assert result[0].equals(curve.compute_public_key(5))
    assert result[1].equals(curve.compute_public_key(18))
    assert result[2].equals(curve.compute_public_key(4))


def test_add_direct_many_size_mismatch(curve):
    with pytest.raises(ValueError):
        curve.add_direct_many([curve.G], [])


def test_generator_hex_encodings(curve):
    assert curve.get_public_key_hex(True, curve.G) == (
        "0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
    )
    assert curve.get_public_key_hex(False, curve.G) == (
        "0479BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
        "483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8"
    )


@pytest.mark.parametrize("k", [1, 2, 3, 0x5555, ORDER - 2])
@pytest.mark.parametrize("compressed", [True, False])
def test_hex_round_trip(curve, k, compressed):
    q = curve.compute_public_key(k)
    text = curve.get_public_key_hex(compressed, q)
    parsed, is_compressed = curve.parse_public_key_hex(text)
    assert parsed.equals(q)
    assert is_compressed is compressed


def test_parse_accepts_lower_case(curve):
    text = curve.get_public_key_hex(True, curve.G).lower()
    parsed, _ = curve.parse_public_key_hex(text)
    assert parsed.equals(curve.G)


def test_get_y_parity(curve):
    even = curve.get_y(GX, True)
    odd = curve.get_y(GX, False)
    assert even % 2 == 0
    assert odd % 2 == 1
    assert (even + odd) % P == 0
    assert GY in (even, odd)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "0",
        "05" + "00" * 32,
        "02" + "00" * 31,
        "04" + "00" * 32,
        "0G" + "00" * 32,
        "02" + "ZZ" * 32,
    ],
)
def test_parse_rejects_malformed(curve, text):
    with pytest.raises(ValueError):
        curve.parse_public_key_hex(text)


def test_parse_rejects_point_off_curve(curve):
    text = curve.get_public_key_hex(False, Point(GX, GY + 1, 1))
    with pytest.raises(ValueError):
        curve.parse_public_key_hex(text)


def test_ec_rejects_off_curve_point(curve):
    assert not curve.ec(Point(GX, GY + 1, 1))