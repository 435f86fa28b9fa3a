"""Deterministic mock data generators.

Every value is derived from a day-scoped seed string, so repeated calls on
the same calendar day return identical data. All functions accept an
optional ``now`` to pin the reference time.

Public exports:
- seeded_random, generate_date_range
- generate_kpis, generate_time_series
- generate_breakdown, generate_events
- generate_mock_data
"""
import datetime as dt
from typing import Optional

from ..utils import resolve_now
from .breakdown import CATEGORIES, generate_breakdown
from .dates import generate_date_range
from .events import SERVICES, SEVERITY_LEVELS, generate_events
from .metrics import METRICS, generate_kpis, generate_time_series
from .models import BreakdownEntry, EventRecord, KpiSnapshot
from .seeded import seeded_random


def generate_mock_data(now: Optional[dt.datetime] = None, event_limit: int = 50) -> dict:
    """Full default bundle: 7-day KPIs and series, all breakdowns, ``event_limit`` events."""
    now = resolve_now(now)
    return {
        "kpis": generate_kpis(now=now).to_dict(),
        "timeSeries": {m: generate_time_series(m, now=now) for m in METRICS},
        "breakdowns": {
            c: [e.model_dump() for e in generate_breakdown(c, now=now)] for c in CATEGORIES
        },
        "events": [e.model_dump() for e in generate_events(event_limit, now=now)],
    }


__all__ = [
    "seeded_random",
    "generate_date_range",
    "generate_kpis",
    "generate_time_series",
    "generate_breakdown",
    "generate_events",
    "generate_mock_data",
    "KpiSnapshot",
    "BreakdownEntry",
    "EventRecord",
    "METRICS",
    "CATEGORIES",
    "SERVICES",
    "SEVERITY_LEVELS",
]
