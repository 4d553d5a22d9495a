import numpy as np
import pandas as pd
import xarray as xr

from anomalies import daily_median_climatology, departures_from_reference
from models import DayOfYearPoint


def _daily(start, end, values):
    time = pd.date_range(start, end, freq="D")
    return xr.DataArray(values(time), coords={"time": time}, dims=("time",), name="discharge")


def test_median_per_calendar_day():
    # Value depends only on (month, day) plus a per-year offset of -1, 0, +1
    da = _daily(
        "2015-01-01", "2017-12-31",
        lambda t: np.asarray(t.month * 100 + t.day + (t.year - 2016), dtype=float),
    )
    points = daily_median_climatology(da)
    table = {(p.month, p.day): p.value for p in points}
    assert len(points) == 366
    assert table[(1, 1)] == 101.0
    assert table[(7, 4)] == 704.0
    # Only 2016 has a Feb 29
    assert table[(2, 29)] == 229.0


def test_all_nan_day_has_no_value():
    da = _daily("2015-01-01", "2015-01-03", lambda t: np.array([1.0, np.nan, 3.0]))
    points = daily_median_climatology(da)
    assert [(p.day, p.value) for p in points] == [(1, 1.0), (2, None), (3, 3.0)]


def test_departures_match_local_calendar_day():
    points = [
        DayOfYearPoint(month=3, day=5, value=10.0),
        DayOfYearPoint(month=3, day=6, value=20.0),
    ]
    # 2018-03-06T03:00Z is still March 5 in Chicago
    idx = pd.DatetimeIndex(["2018-03-06T03:00Z", "2018-03-06T18:00Z", "2018-03-07T18:00Z"])
    observed = pd.Series([12.0, 25.0, 30.0], index=idx)
    observed.attrs["units"] = "ft3/s"

    anom = departures_from_reference(observed, points, "America/Chicago")
    assert anom.name == "departure"
    assert anom.iloc[0] == 2.0
    assert anom.iloc[1] == 5.0
    assert np.isnan(anom.iloc[2])
    assert anom.attrs["units"] == "ft3/s"


def test_departures_naive_index_uses_default_zone():
    points = [{"month": 1, "day": 1, "value": None}, {"month": 1, "day": 2, "value": 1.0}]
    observed = pd.Series([5.0, 5.0], index=pd.to_datetime(["2020-01-01 12:00", "2020-01-02 12:00"]))
    anom = departures_from_reference(observed, points, default_zone="Europe/Paris")
    assert np.isnan(anom.iloc[0])
    assert anom.iloc[1] == 4.0
    assert str(anom.index.tz) == "Europe/Paris"
