"""Multiplication of secp256k1 field elements held as ten base-2**26 words.

A field element is a sequence of ten unsigned 32-bit words ``n[0..9]`` whose
value is ``sum(n[i] * 2**(26*i))``.  Each word keeps spare overflow bits so
that additions need no carry propagation.  Products are reduced modulo the
secp256k1 prime ``2**256 - 4294968273`` using the special form of the prime.
"""

from collections.abc import Sequence

FIELD_WORDS = 10
FIELD_BASE = 26
FIELD_BASE_MASK = (1 << FIELD_BASE) - 1
FIELD_MSB_BITS = 256 - FIELD_BASE * (FIELD_WORDS - 1)
FIELD_MSB_MASK = (1 << FIELD_MSB_BITS) - 1

#: Number of base-2**26 columns produced by multiplying two field elements.
PRODUCT_TERMS = 2 * FIELD_WORDS

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = (1 << 64) - 1

# The prime is 2**256 - c with c = 4294968273 = 64 * 2**26 + 977.
_C_LOW = 977
_C_HIGH = 64
# Columns from t10 upwards start at bit 260, so c is scaled by 2**4.
_C_LOW_SHIFTED = _C_LOW << 4
_C_HIGH_SHIFTED = _C_HIGH << 4
_C_SHIFTED = 4294968273 << 4


def _check_length(values: Sequence[int], expected: int, what: str) -> Sequence[int]:
    if len(values) != expected:
        raise ValueError(f"{what} must hold exactly {expected} values, got {len(values)}")
    return values


def reduce_product(terms: Sequence[int]) -> tuple[int, ...]:
    """Reduce twenty base-2**26 product columns to ten field words.

    ``terms[0..18]`` are 26-bit columns and ``terms[19]`` is whatever is left
    above them.  The result has magnitude 1 but is not normalized.
    """
    _check_length(terms, PRODUCT_TERMS, "terms")
    low = terms[:FIELD_WORDS]
    high = terms[FIELD_WORDS:]

    reduced: list[int] = []
    m = 0
    for i in range(FIELD_WORDS - 1):
        m = (m >> FIELD_BASE) + low[i] + high[i] * _C_LOW_SHIFTED
        if i:
            m += high[i - 1] * _C_HIGH_SHIFTED
        m &= _UINT64_MASK
        reduced.append(m & FIELD_BASE_MASK)

    m = (
        (m >> FIELD_BASE)
        + low[FIELD_WORDS - 1]
        + high[FIELD_WORDS - 2] * _C_HIGH_SHIFTED
        + high[FIELD_WORDS - 1] * _C_SHIFTED
    ) & _UINT64_MASK
    reduced.append(m & FIELD_MSB_MASK)
    m >>= FIELD_MSB_BITS

    # m now says how many times the value exceeds 2**256; fold it back once.
    d = (reduced[0] + m * _C_LOW) & _UINT64_MASK
    word0 = d & FIELD_BASE_MASK
    d = ((d >> FIELD_BASE) + reduced[1] + m * _C_HIGH) & _UINT64_MASK
    word1 = d & FIELD_BASE_MASK
    word2 = ((d >> FIELD_BASE) + reduced[2]) & _UINT32_MASK

    return (word0, word1, word2, *(w & _UINT32_MASK for w in reduced[3:]))


def _product_columns(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Schoolbook product of two word sequences, carried into 26-bit columns."""
    columns: list[int] = []
    carry = 0
    for k in range(PRODUCT_TERMS - 1):
        lo = max(0, k - (FIELD_WORDS - 1))
        hi = min(k, FIELD_WORDS - 1)
        m = (carry + sum(a[i] * b[k - i] for i in range(lo, hi + 1))) & _UINT64_MASK
        columns.append(m & FIELD_BASE_MASK)
        carry = m >> FIELD_BASE
    columns.append(carry)
    return columns


def mul_words(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """Multiply two field elements given as ten words each.

    Each input may have a magnitude of at most 8.  The result has magnitude 1
    but is not normalized.
    """
    _check_length(a, FIELD_WORDS, "a")
    _check_length(b, FIELD_WORDS, "b")
    return reduce_product(_product_columns(a, b))