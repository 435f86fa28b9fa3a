import datetime as dt
from typing import Dict, List, Optional, Tuple

from ..utils import day_seed, round_half_up
from .models import BreakdownEntry
from .seeded import seeded_random

SOURCES = ("organic", "paid", "referral", "direct", "social")
REGIONS = ("AU", "EU", "US", "ASIA", "OTHER")
DEVICES = ("desktop", "mobile", "tablet")

CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "source": SOURCES,
    "region": REGIONS,
    "device": DEVICES,
}


def _label(name: str) -> str:
    # str.capitalize() would lower-case "ASIA"
    return name[:1].upper() + name[1:]


def generate_breakdown(category: str, now: Optional[dt.datetime] = None) -> List[BreakdownEntry]:
    """Approximate percentage split for ``category``, largest first.

    Each value is at least 10. Values are derived independently, so they do
    not sum to exactly 100. Unknown categories yield an empty list.
    """
    base_seed = day_seed(now) + category
    entries = [
        BreakdownEntry(label=_label(name), value=round_half_up(seeded_random(base_seed + name) * 100 + 10))
        for name in CATEGORIES.get(category, ())
    ]
    return sorted(entries, key=lambda e: e.value, reverse=True)
