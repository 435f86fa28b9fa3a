import datetime as dt
import math
from typing import List, Optional

from ..utils import day_seed, resolve_now, to_iso
from .models import EventRecord
from .seeded import seeded_random

SEVERITY_LEVELS = ("low", "medium", "high", "critical")

SERVICES = (
    "api-gateway", "user-service", "payment-service",
    "notification-service", "analytics-service", "auth-service",
)

MESSAGES = (
    "Database connection timeout",
    "High memory usage detected",
    "Rate limit exceeded",
    "Authentication failure",
    "Payment processing error",
    "Service unavailable",
    "Invalid request format",
    "Cache miss rate high",
    "Slow query detected",
    "Circuit breaker activated",
)

EVENT_SPACING = dt.timedelta(minutes=15)


def _pick(options, seed: str):
    return options[math.floor(seeded_random(seed) * len(options))]


def generate_events(limit: int = 50, now: Optional[dt.datetime] = None) -> List[EventRecord]:
    """``limit`` synthetic log events, most recent first, 15 minutes apart.

    ``evt_1`` is stamped at ``now``.
    """
    now = resolve_now(now)
    base_seed = day_seed(now)

    events = []
    for i in range(limit):
        event_seed = f"{base_seed}event{i}"
        events.append(EventRecord(
            id=f"evt_{i + 1}",
            time=to_iso(now - i * EVENT_SPACING),
            service=_pick(SERVICES, event_seed + "service"),
            severity=_pick(SEVERITY_LEVELS, event_seed + "severity"),
            # "message" is appended twice to keep output stable with earlier releases
            message=_pick(MESSAGES, event_seed + "message" + "message"),
        ))
    return events
