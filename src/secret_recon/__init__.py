# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

"""Exact reconstruction of polynomial secrets from mixed-base shares."""

from .decoder import decode, encode
from .errors import (
    DivisionByZero,
    DuplicateXValue,
    InsufficientPoints,
    InvalidBase,
    InvalidDigit,
    InvalidInputStructure,
    NonIntegerSecret,
    ReconstructionError,
)
from .interpolate import interpolate_at_zero
from .rational import Rational
from .records import Point, ShareRequest, load_records, parse_record
from .reconstruct import reconstruct_secret, solve_many, solve_record, verify_shares

__version__ = "0.1.0"

__all__ = [
    "Rational",
    "decode",
    "encode",
    "interpolate_at_zero",
    "Point",
    "ShareRequest",
    "parse_record",
    "load_records",
    "reconstruct_secret",
    "solve_record",
    "solve_many",
    "verify_shares",
    "ReconstructionError",
    "DivisionByZero",
    "InvalidDigit",
    "InvalidBase",
    "InvalidInputStructure",
    "NonIntegerSecret",
    "DuplicateXValue",
    "InsufficientPoints",
]
