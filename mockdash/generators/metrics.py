import datetime as dt
import math
from typing import Dict, List, Optional, Union

from ..utils import day_seed, resolve_now, round_half_up
from .dates import generate_date_range
from .models import KpiSnapshot
from .seeded import seeded_random

METRICS = ("visitors", "signups", "revenue", "latencyMs", "errors")
DEFAULT_BASE_VALUE = 1000


def range_days(date_range: str) -> int:
    """``"30d"`` maps to 30 days; anything else is treated as ``"7d"``."""
    return 30 if date_range == "30d" else 7


def generate_kpis(date_range: str = "7d", now: Optional[dt.datetime] = None) -> KpiSnapshot:
    """KPI snapshot for the given range.

    Baselines grow linearly with the number of days and each field gets its
    own seeded jitter. ``conversion_rate`` is derived from the baselines, not
    from the jittered visitors/signups.
    """
    days = range_days(date_range)
    base_seed = day_seed(now)

    base_visitors = 1000 + days * 50
    base_signups = math.floor(base_visitors * 0.05)
    base_revenue = base_signups * 25

    return KpiSnapshot(
        visitors=math.floor(base_visitors + seeded_random(base_seed + "visitors") * 200),
        signups=math.floor(base_signups + seeded_random(base_seed + "signups") * 20),
        conversion_rate=round_half_up((base_signups / base_visitors) * 100, 2),
        revenue=math.floor(base_revenue + seeded_random(base_seed + "revenue") * 500),
        avg_latency_ms=math.floor(150 + seeded_random(base_seed + "latency") * 100),
        error_rate=round_half_up((0.02 + seeded_random(base_seed + "errors") * 0.03) * 100, 2),
    )


def _base_value(metric: str, index: int) -> Union[int, float]:
    base_values = {
        "visitors": 1000 + index * 30,
        "signups": 50 + index * 2,
        "revenue": 1250 + index * 40,
        "latencyMs": 150,
        "errors": 5,
    }
    return base_values.get(metric) or DEFAULT_BASE_VALUE


def generate_time_series(metric: str, interval: str = "day", date_range: str = "7d",
                         now: Optional[dt.datetime] = None) -> List[Dict[str, Union[str, int]]]:
    """Series of ``{"timestamp": ..., <metric>: value}`` points, oldest first.

    Unknown metrics produce zero-valued points; callers validate names.
    """
    now = resolve_now(now)
    dates = generate_date_range(range_days(date_range), interval, now=now)
    base_seed = day_seed(now)

    points = []
    for index, date in enumerate(dates):
        seed = base_seed + date + metric
        base = _base_value(metric, index)

        trend = 1 + index * 0.02 - seeded_random(seed + "trend") * 0.1
        variation = 0.8 + seeded_random(seed + "variation") * 0.4

        if metric == "visitors":
            value = math.floor(base * trend * variation)
        elif metric == "signups":
            value = math.floor(base * 0.05 * trend * variation)
        elif metric == "revenue":
            value = math.floor(base * 0.0025 * trend * variation)
        elif metric == "latencyMs":
            # independent of trend/variation
            value = math.floor((150 + index * 2) * (0.9 + seeded_random(seed) * 0.2))
        elif metric == "errors":
            value = math.floor(base * 0.001 * (0.8 + seeded_random(seed) * 0.4))
        else:
            value = 0

        points.append({"timestamp": date, metric: max(0, value)})
    return points
