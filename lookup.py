from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping

from models import DayOfYearPoint

DayKey = tuple[int, int]


def build_lookup(points: Iterable[DayOfYearPoint | Mapping[str, Any]]) -> Mapping[DayKey, DayOfYearPoint]:
    """
    Index points by (month, day).
    Duplicate keys: the last point in iteration order wins.
    """
    table: dict[DayKey, DayOfYearPoint] = {}
    for p in points:
        if not isinstance(p, DayOfYearPoint):
            p = DayOfYearPoint.from_mapping(p)
        table[(p.month, p.day)] = p
    return MappingProxyType(table)
