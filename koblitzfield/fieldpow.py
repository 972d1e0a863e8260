"""Exponentiation-based operations over the secp256k1 field.

The multiplicative inverse is computed as ``a**(p-2)`` using a fixed addition
chain.  The square root is computed as ``x**((p+1)/4)``, which is valid
because the secp256k1 prime is congruent to 3 modulo 4.
"""

from koblitzfield.field import FieldVal

# Q = (P + 1) / 4 for the secp256k1 prime P.
_SQRT_EXPONENT = 0x3FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFBFFFFF0C


def _square_times(value: FieldVal, count: int) -> FieldVal:
    """Square ``value`` in place ``count`` times."""
    for _ in range(count):
        value.square()
    return value


def inverse(value: FieldVal) -> FieldVal:
    """Return the multiplicative inverse of ``value`` as a new field value.

    By Fermat's little theorem the inverse is ``value**(p-2)``; the exponent
    ``2**256 - 4294968275`` is reached with 258 squarings and 33
    multiplications.  The inverse of zero is zero.  The result has magnitude 1
    but is not normalized; ``value`` is left unchanged.
    """
    a = value.copy()
    a2 = FieldVal().square_val(a)
    a3 = FieldVal().mul2(a2, a)
    a4 = FieldVal().square_val(a2)
    a10 = FieldVal().square_val(a4).mul(a2)
    a11 = FieldVal().mul2(a10, a)
    a21 = FieldVal().mul2(a10, a11)
    a42 = FieldVal().square_val(a21)
    a45 = FieldVal().mul2(a42, a3)
    a63 = FieldVal().mul2(a42, a21)
    a1019 = _square_times(FieldVal().square_val(a63), 3).mul(a11)
    a1023 = FieldVal().mul2(a1019, a4)

    result = a63.copy()  # a^(2^6 - 1)
    for _ in range(21):  # up to a^(2^216 - 1)
        _square_times(result, 10).mul(a1023)
    _square_times(result, 10).mul(a1019)  # a^(2^226 - 5)
    _square_times(result, 10).mul(a1023)  # a^(2^236 - 4097)
    _square_times(result, 10).mul(a1023)  # a^(2^246 - 4194305)
    _square_times(result, 10)  # a^(2^256 - 4294968320)
    return result.mul(a45)  # a^(p - 2)


def sqrt_val(x: FieldVal) -> FieldVal:
    """Return ``x**((p+1)/4)`` as a new field value.

    When ``x`` is a quadratic residue the result is one of its square roots;
    otherwise its square is ``-x``.  The result has magnitude 1 but is not
    normalized; ``x`` is left unchanged.
    """
    base = x.copy()
    result = FieldVal().set_int(1)
    for bit in bin(_SQRT_EXPONENT)[2:]:
        result.square()
        if bit == "1":
            result.mul(base)
    return result