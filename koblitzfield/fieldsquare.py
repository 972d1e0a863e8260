"""Squaring of secp256k1 field elements held as ten base-2**26 words.

Squaring needs only about half the word products of a general
multiplication, since every cross term ``a[i] * a[j]`` with ``i != j``
appears twice.  The columns are reduced modulo the secp256k1 prime exactly as
for a product.
"""

from collections.abc import Sequence

from koblitzfield.fieldmul import (
    FIELD_BASE,
    FIELD_BASE_MASK,
    FIELD_WORDS,
    PRODUCT_TERMS,
    reduce_product,
)

_UINT64_MASK = (1 << 64) - 1


def _square_columns(a: Sequence[int]) -> list[int]:
    """Square a word sequence, carried into 26-bit columns."""
    columns: list[int] = []
    carry = 0
    for k in range(PRODUCT_TERMS - 1):
        lo = max(0, k - (FIELD_WORDS - 1))
        total = carry
        for i in range(lo, k // 2 + 1):
            j = k - i
            if i < j:
                total += (2 * a[i] * a[j]) & _UINT64_MASK
            else:
                total += a[i] * a[i]
        m = total & _UINT64_MASK
        columns.append(m & FIELD_BASE_MASK)
        carry = m >> FIELD_BASE
    columns.append(carry)
    return columns


def square_words(a: Sequence[int]) -> tuple[int, ...]:
    """Square a field element given as ten words.

    The input may have a magnitude of at most 8.  The result has magnitude 1
    but is not normalized.
    """
    if len(a) != FIELD_WORDS:
        raise ValueError(
            f"a must hold exactly {FIELD_WORDS} values, got {len(a)}"
        )
    return reduce_product(_square_columns(a))