# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

"""Mixed-base digit strings <-> integers.

Digits ``0-9`` carry the values 0-9 and the letters ``a-z`` (in either case)
carry 10-35, which covers every base from binary up to base 36. Values are
non-negative magnitudes: there is no sign prefix.
"""
from __future__ import annotations

import string
from typing import Union

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

_ALPHABET = string.digits + string.ascii_lowercase
_DIGIT_VALUES = {ch: value for value, ch in enumerate(_ALPHABET)}


def _check_base(base: int) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base {base} is outside [{MIN_BASE}, {MAX_BASE}]")
    return base


def parse_base(raw: Union[int, str]) -> int:
    """Accept the ``"base"`` field of a record, which may be a number or a string."""

    if isinstance(raw, str):
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidBase(f"Base {raw!r} is not a decimal integer")
        return _check_base(decode(text, 10))
    return _check_base(raw)


def decode(digits: str, base: int) -> int:
    """Decode *digits*, most significant first, as an integer in *base*."""

    _check_base(base)
    text = digits.strip().lower()
    if not text:
        raise InvalidDigit("", base)
    result = 0
    for ch in text:
        value = _DIGIT_VALUES.get(ch)
        if value is None or value >= base:
            raise InvalidDigit(ch, base)
        result = result * base + value
    return result


def encode(value: int, base: int) -> str:
    """Render a non-negative integer in *base* using lowercase digits."""

    _check_base(base)
    if value < 0:
        raise ValueError("Only non-negative values can be encoded")
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, base)
        out.append(_ALPHABET[rem])
    return "".join(reversed(out))


def to_decimal(value: int) -> str:
    """Signed base-10 rendering that is not bound by the int/str digit limit."""

    if value < 0:
        return "-" + encode(-value, 10)
    return encode(value, 10)


def from_decimal(text: str) -> int:
    """Parse an optionally signed decimal string of any length."""

    digits = text.strip()
    sign = 1
    if digits[:1] in ("+", "-"):
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]
    return sign * decode(digits, 10)


__all__ = ["MIN_BASE", "MAX_BASE", "decode", "encode", "from_decimal", "parse_base", "to_decimal"]
