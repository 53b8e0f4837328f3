# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

"""Exact fractions over Python's unbounded integers.

:class:`Rational` keeps every value in canonical form: the denominator is
strictly positive and shares no common factor with the numerator. Instances
are immutable, so each arithmetic operation hands back a fresh value.
"""
from __future__ import annotations

from typing import Union

from .decoder import to_decimal
from .errors import DivisionByZero


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` (``gcd(0, n) == n``)."""

    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _is_operand(value: object) -> bool:
    return isinstance(value, (Rational, int)) and not isinstance(value, bool)


class Rational:
    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError("Rational parts must be integers")
        if denominator == 0:
            raise DivisionByZero("Denominator cannot be zero.")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = gcd(numerator, denominator)
        object.__setattr__(self, "_numerator", numerator // divisor)
        object.__setattr__(self, "_denominator", denominator // divisor)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Rational values are immutable")

    def __reduce__(self) -> tuple:
        return (Rational, (self._numerator, self._denominator))

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def coerce(cls, value: RationalLike) -> Rational:
        if isinstance(value, Rational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise TypeError(f"Cannot use {type(value).__name__} as a Rational")

    def is_integer(self) -> bool:
        return self._denominator == 1

    # -- arithmetic -------------------------------------------------------

    def add(self, other: RationalLike) -> Rational:
        other = Rational.coerce(other)
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def subtract(self, other: RationalLike) -> Rational:
        other = Rational.coerce(other)
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def multiply(self, other: RationalLike) -> Rational:
        other = Rational.coerce(other)
        return Rational(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: RationalLike) -> Rational:
        other = Rational.coerce(other)
        if other._numerator == 0:
            raise DivisionByZero("Cannot divide by zero.")
        return Rational(self._numerator * other._denominator, self._denominator * other._numerator)

    def __add__(self, other: object) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    __radd__ = __add__

    def __sub__(self, other: object) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)  # type: ignore[arg-type]

    def __rsub__(self, other: object) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        return Rational.coerce(other).subtract(self)  # type: ignore[arg-type]

    def __mul__(self, other: object) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)  # type: ignore[arg-type]

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)  # type: ignore[arg-type]

    def __rtruediv__(self, other: object) -> Rational:
        if not _is_operand(other):
            return NotImplemented
        return Rational.coerce(other).divide(self)  # type: ignore[arg-type]

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    # -- comparison and display -------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self._numerator == other._numerator and self._denominator == other._denominator
        if isinstance(other, int) and not isinstance(other, bool):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __str__(self) -> str:
        if self._denominator == 1:
            return to_decimal(self._numerator)
        return f"{to_decimal(self._numerator)}/{to_decimal(self._denominator)}"

    def __repr__(self) -> str:
        return f"Rational({to_decimal(self._numerator)}, {to_decimal(self._denominator)})"


RationalLike = Union[Rational, int]

ZERO = Rational(0)
ONE = Rational(1)


__all__ = ["Rational", "RationalLike", "gcd", "ZERO", "ONE"]
