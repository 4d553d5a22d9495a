from __future__ import annotations

from datetime import tzinfo
from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd
import xarray as xr

from lookup import build_lookup
from models import DayOfYearPoint
from windows import governing_zone


def daily_median_climatology(series: xr.DataArray) -> list[DayOfYearPoint]:
    """
    Median per calendar day (month, day) of a daily time-indexed history.
    series: DataArray with a "time" dimension
    Returns one DayOfYearPoint per (month, day) present, Feb 29 included
    when the history covers a leap year. All-NaN days get value=None.
    """
    t = series["time"]
    # Group on month/day rather than dayofyear so Mar 1 stays Mar 1 in leap years
    monthday = (t.dt.month * 100 + t.dt.day).rename("monthday")
    clim = series.groupby(monthday).median("time", skipna=True)
    clim.name = "climatology"

    points: list[DayOfYearPoint] = []
    for key, value in zip(clim["monthday"].values, clim.values):
        value = float(value)
        points.append(
            DayOfYearPoint(
                month=int(key) // 100,
                day=int(key) % 100,
                value=None if np.isnan(value) else value,
            )
        )
    return points


def departures_from_reference(
    observed: pd.Series,
    points: Iterable[DayOfYearPoint | Mapping[str, Any]],
    time_zone: str | tzinfo | None = None,
    *,
    default_zone: str | tzinfo | None = None,
) -> pd.Series:
    """
    Subtract the day-of-year reference from a timestamped series.
    Each observation is matched on its local (month, day) in the governing
    zone; days with no reference value give NaN.
    """
    zone = governing_zone(time_zone, default_zone)
    idx = pd.DatetimeIndex(observed.index)
    if idx.tz is None:
        idx = idx.tz_localize(zone, ambiguous=np.ones(len(idx), dtype=bool), nonexistent="shift_forward")
    else:
        idx = idx.tz_convert(zone)

    table = build_lookup(points)
    ref = np.full(len(idx), np.nan)
    for i, key in enumerate(zip(idx.month, idx.day)):
        point = table.get(key)
        if point is not None and point.value is not None:
            ref[i] = point.value

    anom = pd.Series(observed.to_numpy(dtype=float) - ref, index=idx, name="departure")
    if "units" in observed.attrs:
        anom.attrs["units"] = observed.attrs["units"]
    return anom
