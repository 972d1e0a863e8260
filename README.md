# koblitzfield

Arithmetic over the finite field used by the secp256k1 Koblitz curve,
modulo `2^256 - 4294968273`.

A value is held as ten 26-bit words, and each word has spare overflow bits.
Additions and small multiplications therefore need no carrying, and the
value can be normalized later. Operations change the value in place and
return it, so calls can be chained.

## Install

```
pip install koblitzfield
```

## Field values

```python
from koblitzfield.field import FieldVal

a = FieldVal().set_hex("fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2e")
b = FieldVal().set_int(1)

a.add(b).normalize()
print(a.is_zero())            # True: (p - 1) + 1 == 0 mod p

x = FieldVal().set_hex("2")
x.mul_int(8).normalize()
print(x.to_bytes().hex())     # 32-byte big-endian encoding of 16
print(x)                      # str() normalizes a copy and prints it as hex
```

`FieldVal` is a dataclass. Its `words` attribute holds the ten words, with
the least significant word first. It has these methods: `copy`, `zero`,
`set`, `set_int`, `set_bytes`, `set_byte_slice`, `set_hex`, `normalize`,
`to_bytes`, `is_zero`, `is_odd`, `equals`, `negate`, `negate_val`,
`add_int`, `add`, `add2`, `mul_int`, `mul`, `mul2`, `square` and
`square_val`.

Some behaviour to know:

- `set_bytes` takes exactly 32 big-endian bytes and raises `ValueError`
  for any other length.
- `set_byte_slice` keeps only the first 32 bytes and left-pads shorter
  input with zeros.
- `set_hex` puts a leading zero on a string of odd length. Decoding stops
  at the first pair that holds a character which is not hex.
- `to_bytes`, `is_odd` and `equals` give correct answers only for
  normalized values, so call `normalize()` first.
- `negate` and `negate_val` need the magnitude of the value being negated.
- `mul`, `mul2`, `square` and `square_val` need inputs with a magnitude of
  at most 8. None of these preconditions is checked.

## Inverse and square root

```python
from koblitzfield.field import FieldVal
from koblitzfield.fieldpow import inverse, sqrt_val

v = FieldVal().set_int(9)
root = sqrt_val(v).normalize()      # 3 or p - 3
inv = inverse(v).normalize()        # v itself is left unchanged
```

`inverse` returns a new value and maps zero to zero. `sqrt_val` returns
`x ** ((p + 1) / 4)` as a new value. When `x` is not a square, the square
of the result is `-x` rather than `x`. Both results have magnitude 1 but
are not normalized.

## Word-level kernels

These functions work directly on the ten-word representation and return
tuples of ten words:

- `koblitzfield.fieldmul.mul_words(a, b)` multiplies two values.
- `koblitzfield.fieldsquare.square_words(a)` squares a value.
- `koblitzfield.fieldmul.reduce_product(terms)` folds twenty product
  columns back into ten words.

Their results have magnitude 1 but are not normalized. Each of them raises
`ValueError` when an input has the wrong length.

## Endomorphism vectors

`koblitzfield.endomorphism.endomorphism_vectors(n, lam)` runs the extended
Euclidean algorithm on the group order `n` and the eigenvalue `lam`. It
returns an `EndomorphismVectors` named tuple `(a1, b1, a2, b2)`, which
holds the two short lattice vectors used to split a scalar as
`k = k1 + k2 * lam (mod n)`. `isqrt(n)` is the integer square root, found
by Newton's method, that it relies on. `isqrt` raises `ValueError` for a
negative argument.

## Byte-point tables

`koblitzfield.precompute` stores and loads a table of 32 windows with 256
Jacobian points each. Every point is three `FieldVal` coordinates.

- `serialize_byte_points(points)` writes every word as a little-endian
  32-bit integer. It raises `ValueError` if the table does not have that
  shape.
- `deserialize_byte_points(serialized)` reads such a table back. It needs
  at least `SERIALIZED_SIZE` bytes.
- `encode_byte_points(serialized)` compresses the bytes with zlib and
  encodes the result as base64.
- `load_byte_points(encoded)` reverses both steps. An empty string gives
  `None`, and invalid input raises `ValueError`.

## What this package does not do

It provides field arithmetic and the supporting routines listed above, and
nothing more. It has no curve point operations such as point addition,
doubling or scalar multiplication. It has no signing or key handling. It
cannot compute a byte-point table itself: such a table has to be supplied
by the caller, either as `FieldVal` coordinates or in its encoded form. It
has no command-line interface.

## Tests

```
pip install -e .[test]
pytest
```