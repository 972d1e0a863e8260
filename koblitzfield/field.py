"""Fixed-precision arithmetic over the secp256k1 finite field.

All arithmetic is performed modulo the secp256k1 prime
``2**256 - 4294968273``.  Each 256-bit value is held as ten unsigned 32-bit
words in base ``2**26``.  This leaves 6 overflow bits in each word, and 10 in
the most significant word, so additions need no carry propagation until the
value is normalized.

As with any field implementation built for speed, several operations only
give correct results for normalized values, and multiplication and squaring
require a magnitude of at most 8.  Those preconditions are not checked.
"""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass, field

from koblitzfield.fieldmul import (
    FIELD_BASE,
    FIELD_BASE_MASK,
    FIELD_MSB_BITS,
    FIELD_MSB_MASK,
    FIELD_WORDS,
    mul_words,
)
from koblitzfield.fieldsquare import square_words

_UINT32_MASK = 0xFFFFFFFF

# Words zero and one of the prime in the internal representation.
_PRIME_WORD_ZERO = 0x3FFFC2F
_PRIME_WORD_ONE = 0x3FFFFBF

_HEX_DIGITS = frozenset(string.hexdigits)


def _decode_hex_prefix(hex_string: str) -> bytes:
    """Decode whole hex pairs up to the first invalid character."""
    decoded = bytearray()
    for pos in range(0, len(hex_string) - 1, 2):
        pair = hex_string[pos:pos + 2]
        if not all(ch in _HEX_DIGITS for ch in pair):
            break
        decoded.append(int(pair, 16))
    return bytes(decoded)


def _carry(words: list[int]) -> None:
    """Propagate carries through the low nine words in place."""
    for i in range(FIELD_WORDS - 1):
        words[i + 1] = (words[i + 1] + (words[i] >> FIELD_BASE)) & _UINT32_MASK
        words[i] &= FIELD_BASE_MASK


@dataclass
class FieldVal:
    """An element of the secp256k1 field as ten base-2**26 words.

    ``words[0]`` is the least significant word.  Mutating operations change
    the value in place and return it, so calls can be chained.
    """

    words: list[int] = field(default_factory=lambda: [0] * FIELD_WORDS)

    def __post_init__(self) -> None:
        words = list(self.words)
        if len(words) != FIELD_WORDS:
            raise ValueError(
                f"a field value needs exactly {FIELD_WORDS} words, got {len(words)}"
            )
        self.words = [w & _UINT32_MASK for w in words]

    def __str__(self) -> str:
        return self.copy().normalize().to_bytes().hex()

    def copy(self) -> FieldVal:
        """Return an independent copy of this value."""
        return FieldVal(list(self.words))

    def zero(self) -> FieldVal:
        """Set the value to zero."""
        self.words = [0] * FIELD_WORDS
        return self

    def set(self, val: FieldVal) -> FieldVal:
        """Set the value equal to ``val``."""
        self.words = list(val.words)
        return self

    def set_int(self, value: int) -> FieldVal:
        """Set the value to a small native integer, truncated to 32 bits."""
        self.words = [value & _UINT32_MASK] + [0] * (FIELD_WORDS - 1)
        return self

    def set_bytes(self, data: bytes) -> FieldVal:
        """Pack exactly 32 big-endian bytes into the field representation."""
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        number = int.from_bytes(data, "big")
        self.words = [
            (number >> (FIELD_BASE * i)) & FIELD_BASE_MASK
            for i in range(FIELD_WORDS - 1)
        ]
        self.words.append(number >> (FIELD_BASE * (FIELD_WORDS - 1)))
        return self

    def set_byte_slice(self, data: bytes) -> FieldVal:
        """Pack a big-endian byte string, keeping only its first 32 bytes."""
        data = bytes(data[:32])
        return self.set_bytes(data.rjust(32, b"\x00"))

    def set_hex(self, hex_string: str) -> FieldVal:
        """Decode a big-endian hex string; only the first 32 bytes are used.

        An odd-length string gets a leading zero.  Decoding stops at the first
        pair holding an invalid character.
        """
        if len(hex_string) % 2:
            hex_string = "0" + hex_string
        return self.set_byte_slice(_decode_hex_prefix(hex_string))

    def normalize(self) -> FieldVal:
        """Carry all words into range and reduce fully modulo the prime."""
        t = list(self.words)
        m = t[9] >> FIELD_MSB_BITS
        t[9] &= FIELD_MSB_MASK
        t[0] = (t[0] + m * 977) & _UINT32_MASK
        t[1] = (t[1] + (m << 6)) & _UINT32_MASK
        _carry(t)

        # The magnitude is now one; one more subtraction of the prime may be
        # needed if the value overflowed bit 256 or is at least the prime.
        m = int(
            t[9] == FIELD_MSB_MASK
            and (t[2] & t[3] & t[4] & t[5] & t[6] & t[7] & t[8]) == FIELD_BASE_MASK
            and ((t[0] + 977) >> FIELD_BASE) + t[1] + 64 > FIELD_BASE_MASK
        )
        m |= int(t[9] >> FIELD_MSB_BITS != 0)
        t[0] = (t[0] + m * 977) & _UINT32_MASK
        t[1] = (t[1] + (m << 6)) & _UINT32_MASK
        _carry(t)
        t[9] &= FIELD_MSB_MASK

        self.words = t
        return self

    def to_bytes(self) -> bytes:
        """Return the value as 32 big-endian bytes.

        The value must be normalized for the result to be correct.
        """
        number = sum(
            (w & FIELD_BASE_MASK) << (FIELD_BASE * i)
            for i, w in enumerate(self.words[:-1])
        )
        number |= (self.words[-1] & FIELD_MSB_MASK) << (FIELD_BASE * (FIELD_WORDS - 1))
        return number.to_bytes(32, "big")

    def is_zero(self) -> bool:
        """Return whether every word is zero."""
        return not any(self.words)

    def is_odd(self) -> bool:
        """Return whether the value is odd; it must be normalized."""
        return self.words[0] & 1 == 1

    def equals(self, val: FieldVal) -> bool:
        """Return whether both values have the same words.

        Both must be normalized for the comparison to be meaningful.
        """
        return self.words == val.words

    def negate_val(self, val: FieldVal, magnitude: int) -> FieldVal:
        """Set this value to ``-val``, given the magnitude of ``val``."""
        factor = magnitude + 1
        limits = [_PRIME_WORD_ZERO, _PRIME_WORD_ONE] + [FIELD_BASE_MASK] * 7 + [FIELD_MSB_MASK]
        self.words = [
            (factor * limit - w) & _UINT32_MASK for limit, w in zip(limits, val.words)
        ]
        return self

    def negate(self, magnitude: int) -> FieldVal:
        """Negate this value in place, given its magnitude."""
        return self.negate_val(self, magnitude)

    def add_int(self, value: int) -> FieldVal:
        """Add a small native integer without carrying."""
        self.words[0] = (self.words[0] + value) & _UINT32_MASK
        return self

    def add(self, val: FieldVal) -> FieldVal:
        """Add ``val`` word by word without carrying."""
        return self.add2(self, val)

    def add2(self, val: FieldVal, val2: FieldVal) -> FieldVal:
        """Set this value to ``val + val2`` without carrying."""
        self.words = _add_words(val.words, val2.words)
        return self

    def mul_int(self, value: int) -> FieldVal:
        """Multiply each word by a small native integer.

        The caller must make sure no word overflows 32 bits.
        """
        factor = value & _UINT32_MASK
        self.words = [(w * factor) & _UINT32_MASK for w in self.words]
        return self

    def mul(self, val: FieldVal) -> FieldVal:
        """Multiply this value by ``val``."""
        return self.mul2(self, val)

    def mul2(self, val: FieldVal, val2: FieldVal) -> FieldVal:
        """Set this value to ``val * val2``; the result has magnitude 1."""
        self.words = list(mul_words(val.words, val2.words))
        return self

    def square(self) -> FieldVal:
        """Square this value in place."""
        return self.square_val(self)

    def square_val(self, val: FieldVal) -> FieldVal:
        """Set this value to ``val ** 2``; the result has magnitude 1."""
        self.words = list(square_words(val.words))
        return self


def _add_words(a: Iterable[int], b: Iterable[int]) -> list[int]:
    return [(x + y) & _UINT32_MASK for x, y in zip(a, b)]