# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

"""Reconstruct the constant term from a set of decoded points.

The lowest ``k`` x-coordinates are always the interpolation subset, so the
same input produces the same answer on every run.
"""
from __future__ import annotations

import itertools
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Tuple, Union

from .config import settings
from .decoder import to_decimal
from .errors import (
    DuplicateXValue,
    InsufficientPoints,
    InvalidInputStructure,
    NonIntegerSecret,
    ReconstructionError,
)
from .interpolate import interpolate_at_zero
from .records import Point, ShareRequest, parse_record

_logger = logging.getLogger(__name__)

PointLike = Union[Point, Tuple[int, int]]


def _as_point(item: PointLike) -> Point:
    if isinstance(item, Point):
        return item
    x, y = item
    return Point(x=x, y=y)


def select_points(k: int, points: Iterable[PointLike]) -> list[Point]:
    """Return the ``k`` points with the lowest x-coordinates, ascending."""

    if k < 1:
        raise InvalidInputStructure("k", f"threshold must be at least 1, got {to_decimal(k)}")
    candidates = [_as_point(p) for p in points]
    if len(candidates) < k:
        raise InsufficientPoints(len(candidates), k)
    seen: set[int] = set()
    for point in candidates:
        if point.x in seen:
            raise DuplicateXValue(point.x)
        seen.add(point.x)
    return sorted(candidates, key=lambda p: p.x)[:k]


def reconstruct_secret(k: int, points: Iterable[PointLike]) -> str:
    """Recover the secret as a base-10 string from at least ``k`` points."""

    chosen = select_points(k, points)
    value = interpolate_at_zero([p.x for p in chosen], [p.y for p in chosen])
    if not value.is_integer():
        raise NonIntegerSecret(value)
    _logger.info("Reconstructed secret from the %d lowest x-coordinates", len(chosen))
    return to_decimal(value.numerator)


def solve_record(record: Any) -> str:
    """Parse an input record and reconstruct its secret."""

    request = parse_record(record)
    return reconstruct_secret(request.k, request.points)


@dataclass(frozen=True)
class Outcome:
    label: str
    secret: Optional[str] = None
    error: Optional[ReconstructionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def solve_many(
    records: Iterable[Tuple[str, Any]],
    *,
    fail_fast: Optional[bool] = None,
) -> Iterator[Outcome]:
    """Solve each labelled record on its own.

    A failing record yields an :class:`Outcome` carrying the error instead of
    aborting the batch, unless *fail_fast* is set, in which case iteration
    stops right after the first failure.
    """

    stop_on_error = settings.fail_fast if fail_fast is None else fail_fast
    for label, record in records:
        try:
            secret = solve_record(record)
        except ReconstructionError as exc:
            _logger.info("Record %s failed: %s", label, exc)
            yield Outcome(label=label, error=exc)
            if stop_on_error:
                return
            continue
        yield Outcome(label=label, secret=secret)


@dataclass
class VerificationReport:
    """Agreement of the secrets reconstructed from different k-subsets."""

    subsets_checked: int = 0
    candidates: Dict[str, int] = field(default_factory=dict)

    @property
    def consistent(self) -> bool:
        return len(self.candidates) == 1

    @property
    def majority(self) -> Optional[str]:
        if not self.candidates:
            return None
        return Counter(self.candidates).most_common(1)[0][0]


def verify_shares(request: ShareRequest, *, limit: Optional[int] = None) -> VerificationReport:
    """Interpolate over up to *limit* k-subsets and tally the results.

    On data sampled from a genuine degree ``k - 1`` polynomial every subset
    yields the same constant term; disagreement points at corrupted shares.
    """

    cap = settings.verify_limit if limit is None else limit
    if len(request.points) < request.k:
        raise InsufficientPoints(len(request.points), request.k)
    ordered: Sequence[Point] = select_points(len(request.points), request.points)
    report = VerificationReport()
    for subset in itertools.islice(itertools.combinations(ordered, request.k), cap):
        value = interpolate_at_zero([p.x for p in subset], [p.y for p in subset])
        key = str(value)
        report.candidates[key] = report.candidates.get(key, 0) + 1
        report.subsets_checked += 1
    if not report.consistent:
        _logger.warning("Share subsets disagree: %s", report.candidates)
    return report


__all__ = [
    "Outcome",
    "VerificationReport",
    "reconstruct_secret",
    "select_points",
    "solve_many",
    "solve_record",
    "verify_shares",
]
