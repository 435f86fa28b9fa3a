from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from .config import Settings, get_settings
from .generators import (
    generate_breakdown,
    generate_events,
    generate_kpis,
    generate_mock_data,
    generate_time_series,
)
from .utils import Clock, system_clock


def _filter_events(df: pd.DataFrame, severity: Optional[str], service: Optional[str]) -> pd.DataFrame:
    if df.empty:
        return df
    if severity:
        df = df[df["severity"] == severity]
    if service:
        df = df[df["service"] == service]
    return df


class MockDataService:
    """High-level access to the generators with an injected clock.

    Every call reads the clock once, so a single response never straddles
    a day boundary.
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> None:
        self.settings = settings or get_settings()
        self.clock = clock or system_clock

    def kpis(self, date_range: str = "7d") -> Dict[str, Any]:
        return generate_kpis(date_range, now=self.clock()).to_dict()

    def time_series(self, metric: str, interval: str = "day", date_range: str = "7d") -> List[Dict[str, Any]]:
        return generate_time_series(metric, interval, date_range, now=self.clock())

    def breakdown(self, category: str) -> List[Dict[str, Any]]:
        return [entry.model_dump() for entry in generate_breakdown(category, now=self.clock())]

    def events(self, limit: int = 50, severity: Optional[str] = None,
               service: Optional[str] = None) -> List[Dict[str, Any]]:
        """Most recent events, optionally filtered, capped at ``limit``.

        Filtering runs over a pool of at least ``events_pool_size`` events,
        so a filtered result can be shorter than ``limit``. ``limit`` is clamped
        to ``events_max_limit``.
        """
        limit = min(limit, self.settings.events_max_limit)
        pool = max(limit, self.settings.events_pool_size)
        records = [e.model_dump() for e in generate_events(pool, now=self.clock())]
        df = _filter_events(pd.DataFrame.from_records(records), severity, service)
        return df.head(limit).to_dict(orient="records")

    def snapshot(self) -> Dict[str, Any]:
        return generate_mock_data(now=self.clock())
