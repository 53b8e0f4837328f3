# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

"""Typed view of the share input records.

A record is a mapping with a ``"keys"`` entry holding ``n`` and ``k`` and
one entry per point, keyed by the decimal x-coordinate::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

:func:`parse_record` turns such a mapping into a :class:`ShareRequest` and
decodes every y-value on the way.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Tuple, Union

import yaml

from .decoder import decode, encode, from_decimal, parse_base, to_decimal
from .errors import DuplicateXValue, InvalidInputStructure

_logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ShareRequest:
    n: int
    k: int
    points: Tuple[Point, ...]

    @property
    def x_values(self) -> List[int]:
        return [p.x for p in self.points]

    @property
    def y_values(self) -> List[int]:
        return [p.y for p in self.points]


def _parse_int(field: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise InvalidInputStructure(field, f"expected an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INTEGER_RE.match(raw.strip()):
        return from_decimal(raw)
    raise InvalidInputStructure(field, f"expected an integer, got {raw!r}")


def _parse_count(field: str, raw: Any) -> int:
    value = _parse_int(field, raw)
    if value <= 0:
        raise InvalidInputStructure(field, f"must be positive, got {to_decimal(value)}")
    return value


def _parse_point(key: str, entry: Any) -> Point:
    x = _parse_int(key, key)
    if not isinstance(entry, Mapping):
        raise InvalidInputStructure(key, "point entry must be a mapping with 'base' and 'value'")
    if "base" not in entry:
        raise InvalidInputStructure(f"{key}.base", "missing")
    if "value" not in entry:
        raise InvalidInputStructure(f"{key}.value", "missing")
    value = entry["value"]
    if not isinstance(value, str):
        raise InvalidInputStructure(f"{key}.value", f"expected a digit string, got {value!r}")
    return Point(x=x, y=decode(value, parse_base(entry["base"])))


def parse_record(record: Any) -> ShareRequest:
    """Validate *record* and decode its points, preserving their input order."""

    if not isinstance(record, Mapping):
        raise InvalidInputStructure("<record>", "expected a mapping")
    keys = record.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise InvalidInputStructure(KEYS_FIELD, "missing or not a mapping")
    for name in ("n", "k"):
        if name not in keys:
            raise InvalidInputStructure(f"{KEYS_FIELD}.{name}", "missing")
    n = _parse_count(f"{KEYS_FIELD}.n", keys["n"])
    k = _parse_count(f"{KEYS_FIELD}.k", keys["k"])
    if k > n:
        raise InvalidInputStructure(
            f"{KEYS_FIELD}.k", f"threshold {to_decimal(k)} exceeds total {to_decimal(n)}"
        )

    points: list[Point] = []
    seen: set[int] = set()
    for key, entry in record.items():
        if key == KEYS_FIELD:
            continue
        label = to_decimal(key) if isinstance(key, int) and not isinstance(key, bool) else str(key)
        point = _parse_point(label, entry)
        if point.x in seen:
            raise DuplicateXValue(point.x)
        seen.add(point.x)
        points.append(point)

    if len(points) != n:
        _logger.warning("Record declares n=%s but carries %d points", to_decimal(n), len(points))
    return ShareRequest(n=n, k=k, points=tuple(points))


def to_record(request: ShareRequest, bases: Mapping[int, int]) -> dict[str, Any]:
    """Render *request* in the wire format, encoding each y in ``bases[x]``."""

    record: dict[str, Any] = {KEYS_FIELD: {"n": request.n, "k": request.k}}
    for point in request.points:
        base = bases.get(point.x, 10)
        record[to_decimal(point.x)] = {"base": str(base), "value": encode(point.y, base)}
    return record


def load_records(path: Union[str, Path]) -> List[Tuple[str, Any]]:
    """Read one record or a list of records from a JSON or YAML file.

    Each record is paired with a label naming its origin so batch failures
    can be reported per input.
    """

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
        if source.suffix.lower() in _YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise InvalidInputStructure(str(source), f"unreadable document: {exc}") from exc

    if isinstance(document, list):
        return [(f"{source}[{index}]", item) for index, item in enumerate(document)]
    return [(str(source), document)]


def dump_records(records: List[Any], *, fmt: str = "json") -> str:
    payload: Any = records[0] if len(records) == 1 else records
    if fmt == "yaml":
        return yaml.safe_dump(payload, sort_keys=False)
    return json.dumps(payload, indent=2) + "\n"


__all__ = [
    "Point",
    "ShareRequest",
    "parse_record",
    "to_record",
    "load_records",
    "dump_records",
]
