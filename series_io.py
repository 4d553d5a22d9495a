# series_io.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

from models import CoercedPoint, DayOfYearPoint
from coerce import to_frame


def _records_from_frame(df: pd.DataFrame) -> list[dict]:
    missing = [c for c in ("month", "day") if c not in df.columns]
    if missing:
        raise KeyError(f"Missing columns {missing}. Available columns: {list(df.columns)}")
    # NaN -> None so absent statistics stay absent
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def read_points(path: str | Path) -> list[DayOfYearPoint]:
    """
    Load day-of-year points from a local file.
    - .csv: one row per (month, day), extra columns pass through
    - .json: list of records, or an object with a "points" list
    """
    p = Path(path)
    suffix = p.suffix.lower()

    if suffix == ".csv":
        df = pd.read_csv(p)
    elif suffix == ".json":
        data = json.loads(p.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = data.get("points", [])
        if not data:
            return []
        df = pd.DataFrame.from_records(data)
    else:
        raise ValueError(f"Unsupported points file {p} (expected .csv or .json)")

    return [DayOfYearPoint.from_mapping(r) for r in _records_from_frame(df)]


def _jsonable(v):
    if isinstance(v, pd.Timestamp):
        return v.isoformat()
    if isinstance(v, np.generic):
        return v.item()
    if isinstance(v, float) and np.isnan(v):
        return None
    return v


def write_points(points: Iterable[CoercedPoint], fmt: str = "json") -> str:
    """
    Serialize coerced points: JSON records (ISO strings for zoned
    timestamps, integers for epoch milliseconds) or CSV text.
    """
    points = list(points)
    if fmt == "json":
        rows = [{k: _jsonable(v) for k, v in p.as_dict().items()} for p in points]
        return json.dumps(rows, indent=2)
    if fmt == "csv":
        return to_frame(points).to_csv(index=False)
    raise ValueError(f"Unsupported output format {fmt!r} (expected json or csv)")
