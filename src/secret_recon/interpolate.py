# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

"""Lagrange interpolation at x = 0 in exact rational arithmetic."""
from __future__ import annotations

import logging
from typing import Sequence

from .errors import DuplicateXValue
from .rational import ONE, ZERO, Rational

_logger = logging.getLogger(__name__)


def _ensure_distinct(x_values: Sequence[int]) -> None:
    seen: set[int] = set()
    for x in x_values:
        if x in seen:
            raise DuplicateXValue(x)
        seen.add(x)


def interpolate_at_zero(x_values: Sequence[int], y_values: Sequence[int]) -> Rational:
    """Evaluate the unique degree ``k - 1`` polynomial through the points at 0.

    ``result = sum_i y_i * prod_{j != i} (0 - x_j) / (x_i - x_j)``
    """
    if len(x_values) != len(y_values):
        raise ValueError("x_values and y_values must have the same length")
    if not x_values:
        raise ValueError("At least one point is required")
    _ensure_distinct(x_values)

    total = ZERO
    for i, (xi, yi) in enumerate(zip(x_values, y_values)):
        basis = ONE
        for j, xj in enumerate(x_values):
            if i == j:
                continue
            basis = basis * Rational(-xj, xi - xj)
        total = total + basis * yi
    _logger.debug("Interpolated %d points at zero: %s", len(x_values), total)
    return total


__all__ = ["interpolate_at_zero"]
