"""Data models for day-of-year statistics and their coerced, dated form."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import numpy as np

# Keys consumed by DayOfYearPoint itself, or superseded by the coerced instant.
_RESERVED = frozenset({"month", "day", "value", "dateTime", "date_time"})
_RANGES = {"month": (1, 12), "day": (1, 31)}


def _as_int(row: Mapping[str, Any], key: str) -> int:
    try:
        raw = row[key]
    except KeyError:
        raise ValueError(f"Day-of-year point is missing {key!r}: {dict(row)}") from None
    if isinstance(raw, (bool, np.bool_)):
        raise ValueError(f"Day-of-year point has non-integer {key}={raw!r}")
    try:
        out = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Day-of-year point has non-integer {key}={raw!r}") from e
    if out != raw and not isinstance(raw, str):
        raise ValueError(f"Day-of-year point has non-integer {key}={raw!r}")
    lo, hi = _RANGES[key]
    if not lo <= out <= hi:
        raise ValueError(f"Day-of-year point has {key}={out} outside {lo}..{hi}")
    return out


def _as_value(raw: Any) -> float | None:
    if raw is None:
        return None
    value = float(raw)
    return None if np.isnan(value) else value


@dataclass(frozen=True)
class DayOfYearPoint:
    """
    One climatological sample, not tied to any year.
    extra holds pass-through fields (labels, percentiles, ...).
    """
    month: int
    day: int
    value: float | None
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "DayOfYearPoint":
        return cls(
            month=_as_int(row, "month"),
            day=_as_int(row, "day"),
            value=_as_value(row.get("value")),
            extra=MappingProxyType({k: v for k, v in row.items() if k not in _RESERVED}),
        )


@dataclass(frozen=True)
class StatisticalSeries:
    points: Iterable[DayOfYearPoint | Mapping[str, Any]]
    end_time: Any

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StatisticalSeries":
        end_time = data["endTime"] if "endTime" in data else data.get("end_time")
        return cls(points=data.get("points", ()), end_time=end_time)


@dataclass(frozen=True)
class CoercedPoint:
    # epoch milliseconds when an explicit zone was given, else a zoned pd.Timestamp
    date_time: Any
    value: float | None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {"date_time": self.date_time, "value": self.value, **self.extra}
