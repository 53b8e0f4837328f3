# src/secret_recon/shares.py
"""Generate share records for a known secret.

``split_secret``
    Sample a random integer-coefficient polynomial whose constant term is the
    secret and evaluate it at ``x = 1..n``.

``make_record``
    Encode those points in randomly chosen bases, producing an input record
    that :func:`secret_recon.reconstruct.solve_record` accepts.
"""
from __future__ import annotations

import random
import secrets
from typing import Optional, Sequence

from .decoder import MAX_BASE, MIN_BASE
from .records import Point, ShareRequest, to_record

DEFAULT_COEFFICIENT_BOUND = 2**64


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else secrets.SystemRandom()


def split_secret(
    secret: int,
    *,
    n: int,
    k: int,
    coefficient_bound: int = DEFAULT_COEFFICIENT_BOUND,
    rng: Optional[random.Random] = None,
) -> list[Point]:
    """Split ``secret`` into ``n`` points with threshold ``k``."""
    if not (0 < k <= n):
        raise ValueError("Invalid n or k")
    if secret < 0:
        raise ValueError("Secret must be non-negative")
    if coefficient_bound < 1:
        raise ValueError("coefficient_bound must be positive")

    source = _rng(rng)
    coeffs = [secret] + [source.randrange(coefficient_bound) for _ in range(k - 1)]

    points: list[Point] = []
    for x in range(1, n + 1):
        y = 0
        for c in reversed(coeffs):
            y = y * x + c
        points.append(Point(x=x, y=y))
    return points


def make_record(
    points: Sequence[Point],
    *,
    k: int,
    bases: Sequence[int] = tuple(range(MIN_BASE, MAX_BASE + 1)),
    rng: Optional[random.Random] = None,
) -> dict:
    """Build a wire-format record, picking a base for each point from *bases*."""
    source = _rng(rng)
    request = ShareRequest(n=len(points), k=k, points=tuple(points))
    chosen = {p.x: source.choice(list(bases)) for p in points}
    return to_record(request, chosen)


__all__ = ["split_secret", "make_record", "DEFAULT_COEFFICIENT_BOUND"]
