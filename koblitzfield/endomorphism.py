"""Lattice vectors for the secp256k1 endomorphism.

The endomorphism lets a scalar ``k`` be split as ``k = k1 + k2 * lam (mod n)``
with both halves about half the size of ``n``.  The split needs two short,
linearly independent vectors ``(a1, b1)`` and ``(a2, b2)`` with
``a + b * lam == 0 (mod n)``.  They are found with the extended Euclidean
algorithm, as in the first three steps of algorithm 3.74 of the Guide to
Elliptic Curve Cryptography.
"""

from __future__ import annotations

from typing import NamedTuple


class EndomorphismVectors(NamedTuple):
    """The two short lattice vectors ``(a1, b1)`` and ``(a2, b2)``."""

    a1: int
    b1: int
    a2: int
    b2: int


def isqrt(n: int) -> int:
    """Return the integer square root of ``n`` using Newton's method."""
    if n < 0:
        raise ValueError("square root of a negative number")
    if n == 0:
        return 0

    guess = 1 << (n.bit_length() // 2)
    # After one step the guess is never below the true root, so from then on
    # the iteration only decreases until it settles on the floor of the root.
    guess = (guess + n // guess) // 2
    while True:
        refined = (guess + n // guess) // 2
        if refined >= guess:
            return guess
        guess = refined


def endomorphism_vectors(n: int, lam: int) -> EndomorphismVectors:
    """Compute the short vectors for the group order ``n`` and eigenvalue ``lam``.

    The Euclidean algorithm on ``n`` and ``lam`` yields a sequence of
    equations ``s[i] * n + t[i] * lam = r[i]``.  With ``l`` the greatest index
    for which ``r[l] >= sqrt(n)``, the first vector is ``(r[l+1], -t[l+1])``
    and the second is whichever of ``(r[l], -t[l])`` and
    ``(r[l+2], -t[l+2])`` is shorter.
    """
    n_sqrt = isqrt(n)
    u, v = n, lam
    x1, y1 = 1, 0
    x2, y2 = 0, 1
    ri = ti = 0
    a1 = b1 = a2 = b2 = 0
    found = one_more = False

    while u != 0:
        q = v // u
        r = v - q * u
        s = x2 - q * x1
        t = y2 - q * y1

        v, u = u, r
        x2, x1 = x1, s
        y2, y1 = y1, t

        if not found and r < n_sqrt:
            # ri and ti still hold r[l] and t[l]; r and t are r[l+1], t[l+1].
            a1, b1 = r, -t
            found = one_more = True
            continue
        if one_more:
            # ri and ti hold r[l] and t[l]; r and t are r[l+2], t[l+2].
            if ri * ri + ti * ti <= r * r + t * t:
                a2, b2 = ri, -ti
            else:
                a2, b2 = r, -t
            break

        ri, ti = r, t

    return EndomorphismVectors(a1, b1, a2, b2)