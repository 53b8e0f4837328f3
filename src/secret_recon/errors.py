# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy shared by the reconstruction pipeline."""
from __future__ import annotations

from typing import Any


def _decimal(value: int) -> str:
    # Late import: decoder depends on this module.
    from .decoder import to_decimal

    return to_decimal(value)


class ReconstructionError(Exception):
    """Base class for every failure raised while reconstructing a secret."""


class DivisionByZero(ReconstructionError, ZeroDivisionError):
    """Raised when a zero denominator is constructed or a zero is used as divisor."""


class DecodingError(ReconstructionError, ValueError):
    """Raised when an encoded coordinate cannot be turned into an integer."""


class InvalidDigit(DecodingError):
    def __init__(self, character: str, base: int) -> None:
        super().__init__(character, base)
        self.character = character
        self.base = base

    def __str__(self) -> str:
        return f"Invalid digit {self.character!r} for base {self.base}"


class InvalidBase(DecodingError):
    pass


class InvalidInputStructure(ReconstructionError, ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(field, message)
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class NonIntegerSecret(ReconstructionError, ArithmeticError):
    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"The calculated constant term is not an integer: {self.value}"


class DuplicateXValue(ReconstructionError, ValueError):
    def __init__(self, x: int) -> None:
        super().__init__(x)
        self.x = x

    def __str__(self) -> str:
        return f"Duplicate x-coordinate {_decimal(self.x)}"


class InsufficientPoints(ReconstructionError, ValueError):
    def __init__(self, available: int, required: int) -> None:
        super().__init__(available, required)
        self.available = available
        self.required = required

    def __str__(self) -> str:
        return f"Need at least {_decimal(self.required)} points, got {self.available}"


__all__ = [
    "ReconstructionError",
    "DivisionByZero",
    "DecodingError",
    "InvalidDigit",
    "InvalidBase",
    "InvalidInputStructure",
    "NonIntegerSecret",
    "DuplicateXValue",
    "InsufficientPoints",
]
