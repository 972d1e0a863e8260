"""Serialization of the precomputed byte-window point table.

Scalar base multiplication is sped up by a table holding, for each of the 32
byte windows of a scalar, all 256 combinations of the base point's doublings
in that window, as Jacobian ``(x, y, z)`` coordinates.  The table is stored
as the words of every coordinate written as little-endian 32-bit integers,
then zlib-compressed and base64-encoded.
"""

from __future__ import annotations

import base64
import binascii
import struct
import zlib
from collections.abc import Sequence

from koblitzfield.field import FieldVal
from koblitzfield.fieldmul import FIELD_WORDS

#: Number of byte windows in a 256-bit scalar.
WINDOWS = 32
#: Number of points in each window, one per byte value.
POINTS_PER_WINDOW = 256
#: Coordinates per Jacobian point.
COORDINATES = 3

_POINT_FORMAT = struct.Struct(f"<{COORDINATES * FIELD_WORDS}I")
SERIALIZED_SIZE = WINDOWS * POINTS_PER_WINDOW * _POINT_FORMAT.size

Point = tuple[FieldVal, FieldVal, FieldVal]
BytePoints = tuple[tuple[Point, ...], ...]


def serialize_byte_points(points: Sequence[Sequence[Sequence[FieldVal]]]) -> bytes:
    """Write a 32 x 256 table of Jacobian points as little-endian words."""
    if len(points) != WINDOWS:
        raise ValueError(f"expected {WINDOWS} windows, got {len(points)}")
    out = bytearray()
    for window in points:
        if len(window) != POINTS_PER_WINDOW:
            raise ValueError(
                f"expected {POINTS_PER_WINDOW} points per window, got {len(window)}"
            )
        for point in window:
            if len(point) != COORDINATES:
                raise ValueError(
                    f"expected {COORDINATES} coordinates per point, got {len(point)}"
                )
            out += _POINT_FORMAT.pack(*(w for coord in point for w in coord.words))
    return bytes(out)


def deserialize_byte_points(serialized: bytes) -> BytePoints:
    """Read a 32 x 256 table of Jacobian points from little-endian words."""
    if len(serialized) < SERIALIZED_SIZE:
        raise ValueError(
            f"serialized table needs {SERIALIZED_SIZE} bytes, got {len(serialized)}"
        )
    flat = [
        tuple(
            FieldVal(list(words[c * FIELD_WORDS:(c + 1) * FIELD_WORDS]))
            for c in range(COORDINATES)
        )
        for words in _POINT_FORMAT.iter_unpack(memoryview(serialized)[:SERIALIZED_SIZE])
    ]
    return tuple(
        tuple(flat[w * POINTS_PER_WINDOW:(w + 1) * POINTS_PER_WINDOW])
        for w in range(WINDOWS)
    )


def encode_byte_points(serialized: bytes) -> str:
    """Compress a serialized table with zlib and encode it as base64."""
    return base64.b64encode(zlib.compress(serialized)).decode("ascii")


def load_byte_points(encoded: str) -> BytePoints | None:
    """Decode, decompress and deserialize a table.

    An empty string means no table is available and gives ``None``.
    """
    if not encoded:
        return None
    try:
        compressed = base64.b64decode(encoded, validate=True)
        serialized = zlib.decompress(compressed)
    except (binascii.Error, zlib.error) as exc:
        raise ValueError(f"invalid encoded byte points: {exc}") from exc
    return deserialize_byte_points(serialized)