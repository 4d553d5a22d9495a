from __future__ import annotations

from datetime import tzinfo
from typing import Any, Iterable, Mapping

import pandas as pd

from lookup import DayKey, build_lookup
from models import CoercedPoint, DayOfYearPoint, StatisticalSeries
from periods import parse_period
from windows import governing_zone, window_boundaries


def epoch_millis(instant: pd.Timestamp) -> int:
    return int(instant.value // 1_000_000)


def coerce_boundaries(
    boundaries: Iterable[pd.Timestamp],
    table: Mapping[DayKey, DayOfYearPoint],
    absolute: bool,
) -> list[CoercedPoint]:
    """
    Attach the statistic of each boundary's local (month, day).
    Boundaries without a matching point are dropped.
    absolute=True emits epoch milliseconds instead of zoned timestamps.
    """
    out: list[CoercedPoint] = []
    for instant in boundaries:
        point = table.get((instant.month, instant.day))
        if point is None:
            continue
        out.append(
            CoercedPoint(
                date_time=epoch_millis(instant) if absolute else instant,
                value=point.value,
                extra=dict(point.extra),
            )
        )
    return out


def coerce_statistical_series(
    series: StatisticalSeries | Mapping[str, Any],
    period: str,
    time_zone: str | tzinfo | None = None,
    *,
    default_zone: str | tzinfo | None = None,
) -> list[CoercedPoint]:
    """
    Map a year-agnostic day-of-year series onto the dated window of length
    `period` ending at series.end_time.

    With time_zone, date_time values are epoch milliseconds; without it they
    are pd.Timestamp in default_zone (or the process local zone).
    """
    parsed = parse_period(period)

    if not isinstance(series, StatisticalSeries):
        series = StatisticalSeries.from_mapping(series)

    zone = governing_zone(time_zone, default_zone)
    boundaries = window_boundaries(series.end_time, parsed, zone)
    table = build_lookup(series.points)
    return coerce_boundaries(boundaries, table, absolute=time_zone is not None)


def to_frame(points: Iterable[CoercedPoint]) -> pd.DataFrame:
    """
    Tabular view of coerced points for charting: one row per point,
    columns date_time, value and any pass-through fields.
    """
    rows = [p.as_dict() for p in points]
    if not rows:
        return pd.DataFrame(columns=["date_time", "value"])
    return pd.DataFrame(rows)
