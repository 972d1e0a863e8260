import random

import pytest

from koblitzfield.field import FieldVal
from koblitzfield.fieldpow import inverse, sqrt_val

PRIME_HEX = "fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f"


def from_hex(text):
    return FieldVal().set_hex(text).normalize()


def random_field_val(rng):
    return FieldVal().set_bytes(rng.randbytes(32)).normalize()


def squared(value):
    return FieldVal().square_val(value).normalize()


def negated(value):
    return FieldVal().negate_val(value, 1).normalize()


INVERSE_CASES = [
    ("0", "0"),
    (PRIME_HEX, "0"),
    ("0", PRIME_HEX),
    (
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2e",
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2e",
    ),
    (
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2d",
        "7fffffffffffffffffffffffffffffffffffffffffffffffffffffff7ffffe17",
    ),
    (
        "16fb970147a9acc73654d4be233cc48b875ce20a2122d24f073d29bd28805aca",
        "987aeb257b063df0c6d1334051c47092b6d8766c4bf10c463786d93f5bc54354",
    ),
    (
        "69d1323ce9f1f7b3bd3c7320b0d6311408e30281e273e39a0d8c7ee1c8257919",
        "49340981fa9b8d3dad72de470b34f547ed9179c3953797d0943af67806f4bb6",
    ),
    (
        "e0debf988ae098ecda07d0b57713e97c6d213db19753e8c95aa12a2fc1cc5272",
        "64f58077b68af5b656b413ea366863f7b2819f8d27375d9c4d9804135ca220c2",
    ),
    (
        "dcd394f91f74c2ba16aad74a22bb0ed47fe857774b8f2d6c09e28bfb14642878",
        "fb848ec64d0be572a63c38fe83df5e7f3d032f60bf8c969ef67d36bf4ada22a9",
    ),
]


@pytest.mark.parametrize(("value", "expected"), INVERSE_CASES)
def test_inverse_cases(value, expected):
    result = inverse(from_hex(value)).normalize()
    assert result.equals(from_hex(expected))


def test_inverse_leaves_input_unchanged():
    value = from_hex("16fb970147a9acc73654d4be233cc48b875ce20a2122d24f073d29bd28805aca")
    before = list(value.words)
    inverse(value)
    assert value.words == before


@pytest.mark.parametrize("seed", range(5))
def test_inverse_times_value_is_one(seed):
    value = random_field_val(random.Random(seed))
    product = FieldVal().mul2(value, inverse(value)).normalize()
    assert product.equals(FieldVal().set_int(1))


def assert_root_matches(value, expected):
    root = sqrt_val(value).normalize()
    root_neg = negated(root)
    assert root.equals(expected) or root_neg.equals(expected)


def assert_no_root(value):
    root = sqrt_val(value).normalize()
    root_neg = negated(root)
    assert not squared(root).equals(value)
    assert not squared(root_neg).equals(value)


@pytest.mark.parametrize("i", range(9, 0, -1))
def test_sqrt_of_negative_small_square_has_no_root(i):
    square = squared(FieldVal().set_int(i))
    assert_no_root(negated(square))


@pytest.mark.parametrize("i", range(10))
def test_sqrt_of_small_square(i):
    x = FieldVal().set_int(i)
    assert_root_matches(squared(x), x)


def _non_square(rng):
    ns = random_field_val(rng)
    if squared(sqrt_val(ns)).equals(ns):
        ns.negate(1).normalize()
    return ns


@pytest.mark.parametrize("seed", range(10))
def test_sqrt_of_random_values(seed):
    rng = random.Random(1000 + seed)
    ns = _non_square(rng)
    x = random_field_val(rng)
    s = squared(x)
    n = negated(s)
    m = FieldVal().mul2(s, ns).normalize()

    assert_root_matches(s, x)
    assert_no_root(n)
    assert_no_root(m)


def test_sqrt_leaves_input_unchanged():
    value = squared(FieldVal().set_int(7))
    before = list(value.words)
    sqrt_val(value)
    assert value.words == before


def test_sqrt_of_four_is_two_or_negative_two():
    root = sqrt_val(from_hex("4")).normalize()
    assert str(root) in {
        "0000000000000000000000000000000000000000000000000000000000000002",
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2d",
    }