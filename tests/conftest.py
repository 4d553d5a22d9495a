from __future__ import annotations

import pandas as pd
import pytest

from models import DayOfYearPoint


@pytest.fixture
def leap_year_points() -> list[DayOfYearPoint]:
    """One point per calendar day of 2016 (366, Feb 29 included), value = month + 2 * day."""
    days = pd.date_range("2016-01-01", "2016-12-31", freq="D")
    return [
        DayOfYearPoint(month=d.month, day=d.day, value=float(d.month + 2 * d.day))
        for d in days
    ]
