import datetime as dt
import re

from mockdash.generators import SERVICES, SEVERITY_LEVELS, generate_events
from mockdash.generators.events import MESSAGES
from mockdash.utils import to_iso


def parse(ts: str) -> dt.datetime:
    return dt.datetime.fromisoformat(ts.replace("Z", "+00:00"))


def test_events_shape(fixed_now):
    events = generate_events(50, now=fixed_now)
    assert len(events) == 50
    for e in events:
        assert re.fullmatch(r"evt_\d+", e.id)
        assert e.severity in SEVERITY_LEVELS
        assert e.service in SERVICES
        assert e.message in MESSAGES


def test_events_most_recent_first(fixed_now):
    events = generate_events(10, now=fixed_now)
    assert [e.id for e in events] == [f"evt_{i}" for i in range(1, 11)]
    assert events[0].time == to_iso(fixed_now)
    times = [parse(e.time) for e in events]
    assert all(a - b == dt.timedelta(minutes=15) for a, b in zip(times, times[1:]))


def test_events_default_limit_and_empty(fixed_now):
    assert len(generate_events(now=fixed_now)) == 50
    assert generate_events(0, now=fixed_now) == []


def test_events_prefix_stable_across_limits(fixed_now):
    assert generate_events(5, now=fixed_now) == generate_events(20, now=fixed_now)[:5]


def test_events_deterministic_fields_within_day(fixed_now):
    later = fixed_now + dt.timedelta(hours=1)
    a = generate_events(20, now=fixed_now)
    b = generate_events(20, now=later)
    assert [(e.service, e.severity, e.message) for e in a] == [(e.service, e.severity, e.message) for e in b]


# Reference output of the original generators at FIXED_NOW
def test_events_golden_values(fixed_now):
    events = generate_events(3, now=fixed_now)
    assert [e.model_dump() for e in events] == [
        {"id": "evt_1", "time": "2024-01-07T03:37:12.345Z", "service": "user-service",
         "severity": "critical", "message": "Cache miss rate high"},
        {"id": "evt_2", "time": "2024-01-07T03:22:12.345Z", "service": "analytics-service",
         "severity": "critical", "message": "Invalid request format"},
        {"id": "evt_3", "time": "2024-01-07T03:07:12.345Z", "service": "api-gateway",
         "severity": "medium", "message": "Invalid request format"},
    ]
