import datetime as dt
import math
from typing import Callable, Optional

Clock = Callable[[], dt.datetime]

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def system_clock() -> dt.datetime:
    """Current local wall-clock time (naive)."""
    return dt.datetime.now()


def resolve_now(now: Optional[dt.datetime] = None) -> dt.datetime:
    return now if now is not None else system_clock()


def day_seed(now: Optional[dt.datetime] = None) -> str:
    """Day-scoped base seed, e.g. ``Sat Oct 17 2026``.

    Locale independent; changes at local midnight.
    """
    d = resolve_now(now)
    return f"{_WEEKDAYS[d.weekday()]} {_MONTHS[d.month - 1]} {d.day:02d} {d.year:04d}"


def today_key(now: Optional[dt.datetime] = None) -> str:
    """Cache key that changes daily."""
    return resolve_now(now).date().isoformat()


def to_iso(value: dt.datetime) -> str:
    """UTC ISO-8601 with milliseconds and a ``Z`` suffix.

    Naive datetimes are taken as local time.
    """
    utc = value.astimezone(dt.timezone.utc)
    return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def round_half_up(x: float, ndigits: int = 0):
    """Half-up rounding; ``round()`` would round half to even."""
    if ndigits == 0:
        return int(math.floor(x + 0.5))
    factor = 10 ** ndigits
    return math.floor(x * factor + 0.5) / factor
