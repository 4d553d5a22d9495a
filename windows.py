from __future__ import annotations

from datetime import tzinfo
from numbers import Real
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import numpy as np
import pandas as pd
from dateutil import tz

from errors import InvalidEndTime, InvalidTimeZone
from periods import Period, PeriodUnit, subtract_period


def _zone(name: str | tzinfo) -> tzinfo:
    if isinstance(name, tzinfo):
        return name
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as e:
        raise InvalidTimeZone(f"Unknown time zone {name!r}") from e


def governing_zone(time_zone: str | tzinfo | None = None, default_zone: str | tzinfo | None = None) -> tzinfo:
    """
    Zone used for calendar boundaries: the explicit zone, else the injected
    default, else the process local zone.
    """
    if time_zone is not None:
        return _zone(time_zone)
    if default_zone is not None:
        return _zone(default_zone)
    return tz.tzlocal()


def _localize(wall_time: pd.Timestamp, zone: tzinfo) -> pd.Timestamp:
    # Ambiguous wall times take the earlier instant, missing ones move forward
    return wall_time.tz_localize(zone, ambiguous=True, nonexistent="shift_forward")


def resolve_end_time(end_time, zone: tzinfo) -> pd.Timestamp:
    """
    Read end_time as an instant in `zone`.
    Naive values are wall time in the zone; numbers are epoch milliseconds.
    """
    try:
        if isinstance(end_time, Real) and not isinstance(end_time, bool):
            ts = pd.Timestamp(end_time, unit="ms", tz="UTC")
        else:
            ts = pd.Timestamp(end_time)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidEndTime(f"Cannot interpret end time {end_time!r}") from e

    if pd.isna(ts):
        raise InvalidEndTime(f"Cannot interpret end time {end_time!r}")

    if ts.tzinfo is None:
        return _localize(ts, zone)
    return ts.tz_convert(zone)


def window_boundaries(end_time, period: Period, zone: tzinfo) -> pd.DatetimeIndex:
    """
    Ascending boundary instants covering the window that ends at end_time.

    One boundary per calendar day at local midnight, from the date of
    (end_time - period) through the date of end_time. A year window starts
    the day after (end_time - 1 year) so its midnights span a single annual
    cycle. A start with a time of day becomes the exact first boundary; an
    end_time with a time of day is appended after its own midnight.
    """
    end = resolve_end_time(end_time, zone)
    end_wall = end.tz_localize(None)
    start_wall = subtract_period(end_wall, period)

    first_day = start_wall.normalize()
    if period.unit is PeriodUnit.YEAR:
        first_day = first_day + pd.Timedelta(days=1)
    last_day = end_wall.normalize()

    days = pd.date_range(first_day, last_day, freq="D")
    midnights = days.tz_localize(
        zone,
        ambiguous=np.ones(len(days), dtype=bool),
        nonexistent="shift_forward",
    )

    boundaries = list(midnights)
    if start_wall != start_wall.normalize():
        start = _localize(start_wall, zone)
        if period.unit is PeriodUnit.YEAR:
            # start's date is outside a year window's dates, so it leads
            boundaries.insert(0, start)
        else:
            boundaries[0] = start
    if end_wall != last_day and boundaries[-1] != end:
        boundaries.append(end)

    return pd.DatetimeIndex(boundaries)
