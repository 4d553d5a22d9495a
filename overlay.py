from __future__ import annotations

import argparse
import sys

from coerce import coerce_statistical_series
from errors import CoercionError
from models import StatisticalSeries
from series_io import read_points, write_points


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Coerce a day-of-year statistic (e.g. daily medians) onto a dated trailing window"
    )

    p.add_argument("--points", type=str, required=True, help="CSV or JSON file with month, day, value columns")
    p.add_argument("--end", type=str, required=True, help="Window end, e.g. 2018-03-06T19:26")
    p.add_argument("--period", type=str, default="P7D", help="P<N>D or P1Y")

    p.add_argument(
        "--time-zone",
        type=str,
        default=None,
        help="IANA zone. If set, date_time is emitted as epoch milliseconds.",
    )
    p.add_argument(
        "--default-zone",
        type=str,
        default=None,
        help="Zone used when --time-zone is not set (default: local zone).",
    )
    p.add_argument("--format", type=str, choices=("json", "csv"), default="json")

    return p.parse_args(argv)


def _log(msg: str) -> None:
    print(msg, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        _log(f"[load] points={args.points}")
        points = read_points(args.points)

        _log(f"[coerce] end={args.end} period={args.period} time_zone={args.time_zone} count={len(points)}")
        result = coerce_statistical_series(
            StatisticalSeries(points=points, end_time=args.end),
            args.period,
            args.time_zone,
            default_zone=args.default_zone,
        )
    except (CoercionError, OSError, KeyError, ValueError) as e:
        _log(f"[error] {e}")
        return 2

    print(write_points(result, args.format))
    _log(f"[done] wrote {len(result)} points")
    return 0


if __name__ == "__main__":
    sys.exit(main())
