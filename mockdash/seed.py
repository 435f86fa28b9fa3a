"""Generate the mock data bundle and print a sample for eyeballing.

Usage: ``mockdash-seed [--date YYYY-MM-DD] [--limit N] [--rows N]``
"""
import argparse
import datetime as dt
import json
from typing import List, Optional

import pandas as pd

from .generators import generate_mock_data
from .log import get_logger
from .utils import today_key

logger = get_logger("mockdash.seed")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed and preview deterministic mock analytics data")
    parser.add_argument("--date", type=dt.date.fromisoformat, default=None,
                        help="Reference day (YYYY-MM-DD); defaults to today")
    parser.add_argument("--limit", type=int, default=50, help="Number of events to generate")
    parser.add_argument("--rows", type=int, default=3, help="Rows to preview per table")
    return parser.parse_args(argv)


def _reference_time(day: Optional[dt.date]) -> dt.datetime:
    now = dt.datetime.now()
    if day is None:
        return now
    return dt.datetime.combine(day, now.time())


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    now = _reference_time(args.date)

    logger.info("Seeding mock data for %s", today_key(now))
    data = generate_mock_data(now=now, event_limit=args.limit)

    print("Generated KPIs:")
    print(json.dumps(data["kpis"], indent=2))

    print(f"\nTime series (first {args.rows} entries):")
    for metric in ("visitors", "signups", "revenue"):
        print(f"{metric}:")
        print(pd.DataFrame(data["timeSeries"][metric]).head(args.rows).to_string(index=False))

    print("\nBreakdowns:")
    for category, entries in data["breakdowns"].items():
        print(f"{category}:")
        print(pd.DataFrame(entries).to_string(index=False))

    print(f"\nEvents (first {args.rows}):")
    print(pd.DataFrame(data["events"]).head(args.rows).to_string(index=False))

    logger.info("Generated %d events", len(data["events"]))
    logger.info("Generated %d time series data points", len(data["timeSeries"]["visitors"]))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
