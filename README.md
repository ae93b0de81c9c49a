# kangaroo

Arithmetic on the secp256k1 elliptic curve in pure Python, with no
third-party dependencies.

## Modules

- `kangaroo.secp256k1` – the `Secp256K1` curve (with constants `P`, `GX`,
  `GY`, `ORDER`). It builds a table of generator multiples on construction and
  offers:
  - `compute_public_key(priv_key, reduce)` and `compute_public_keys(priv_keys)`
    (the latter shares one field inversion across all keys);
  - `add`, `add2` (second point affine), `double` in projective form;
  - `add_direct`, `add_direct_many`, `double_direct`, `next_key` in affine form;
  - `ec(p)` to test that a point lies on the curve, `get_y(x, is_even)`;
  - `get_public_key_hex(compressed, p)` and `parse_public_key_hex(text)`,
    which returns `(point, is_compressed)` and raises `ValueError` on a
    malformed key or one not on the curve.
- `kangaroo.point` – the `Point` dataclass with projective coordinates `x`,
  `y`, `z`, and `is_zero`, `reduce(field)`, `equals`, `clear`.
- `kangaroo.field` – `PrimeField` with `add`, `sub`, `neg`, `double`, `mul`,
  `square`, `cube`, `exp`, `inv` (0 when no inverse), `has_sqrt`, `sqrt`
  (Tonelli–Shanks where needed) and `positive`; plus `batch_inverse` for
  inverting many values with a single inversion.
- `kangaroo.montgomery` – `Montgomery` multiplication for an odd modulus,
  the fast secp256k1-prime folding reductions `mod_mul_k1` and
  `mod_square_k1`, and `K1Order` arithmetic modulo a curve order.
- `kangaroo.bigint` – helpers for 320-bit two's-complement integers held as
  Python ints: wrapping, signed view, shifts, division, GCD, byte and bit
  access, 32-byte big-endian conversion and random values.
- `kangaroo.bigformat` – conversion to and from base 10 and 16 (or any
  base with a given charset), bit strings and limb dumps.
- `kangaroo.primality` – `is_probable_prime` (Miller–Rabin) and
  `check_inv`, a self-check of field inversion.
- `kangaroo.rng` – `MersenneTwister`, a seedable MT19937 generator, and the
  module-level default generator behind `rseed`, `rndl` and `rnd`.

## Installation

```
pip install .
```

## Example

```python
from kangaroo.secp256k1 import Secp256K1

curve = Secp256K1()
pub = curve.compute_public_key(1, True)
print(curve.get_public_key_hex(True, pub))
# 0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798

point, compressed = curve.parse_public_key_hex(
    "0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
)
assert curve.ec(point) and compressed
```

## What this package does not do

It is a library only. It has no command-line program, does not run a
discrete-logarithm search itself, keeps no work files, and has no network
client or server. It offers no timing or benchmark helpers either.

## Running the tests

```
pip install .[test]
pytest
```