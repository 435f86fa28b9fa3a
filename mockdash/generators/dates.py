import datetime as dt
from typing import List, Optional

from ..utils import resolve_now, to_iso


def generate_date_range(days: int, interval: str = "day",
                        now: Optional[dt.datetime] = None) -> List[str]:
    """Timestamps covering the last ``days`` days, oldest first.

    ``"day"`` yields one local-midnight timestamp per day. ``"hour"`` yields
    the 24 top-of-hour timestamps of each of those days (``days * 24`` in
    total). Any other interval behaves like ``"day"``.
    """
    now = resolve_now(now)
    dates: List[str] = []

    for i in range(days - 1, -1, -1):
        date = now - dt.timedelta(days=i)

        if interval == "hour":
            for hour in range(24):
                dates.append(to_iso(date.replace(hour=hour, minute=0, second=0, microsecond=0)))
        else:
            dates.append(to_iso(date.replace(hour=0, minute=0, second=0, microsecond=0)))

    return dates
