from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

import pandas as pd

from errors import InvalidPeriod

_DAYS_RE = re.compile(r"P([1-9][0-9]*)D")
_YEAR = "P1Y"


class PeriodUnit(str, Enum):
    DAYS = "days"
    YEAR = "year"


@dataclass(frozen=True)
class Period:
    unit: PeriodUnit
    amount: int


def parse_period(text: str) -> Period:
    """
    Parse a restricted ISO-8601 duration.
    Only ``P<N>D`` (N >= 1) and ``P1Y`` are accepted.
    """
    if not isinstance(text, str):
        raise InvalidPeriod(f"Period must be a string, got {type(text).__name__}")

    if text == _YEAR:
        return Period(unit=PeriodUnit.YEAR, amount=1)

    m = _DAYS_RE.fullmatch(text)
    if m is None:
        raise InvalidPeriod(f"Unsupported period {text!r} (expected P<N>D or P1Y)")
    return Period(unit=PeriodUnit.DAYS, amount=int(m.group(1)))


def subtract_period(wall_time: pd.Timestamp, period: Period) -> pd.Timestamp:
    """
    Calendar subtraction on a zone-naive wall-clock timestamp.
    Days keep the time of day; one year keeps month/day, and Feb 29 lands
    on Feb 28 when the target year is not a leap year.
    """
    if period.unit is PeriodUnit.YEAR:
        return wall_time - pd.DateOffset(years=period.amount)
    return wall_time - pd.Timedelta(days=period.amount)
