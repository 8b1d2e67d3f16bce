"""
Cache key derivation for daily recommendations

A key identifies one scope: (calendar day, city, interest set). The day
component rotates the key at local midnight, so yesterday's entry simply
stops matching.
"""

import re
from datetime import datetime
from typing import Iterable, Optional

CACHE_KEY_PREFIX = "CITYSENSE_EVENTS_CACHE_"

_WHITESPACE = re.compile(r"\s+")
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def normalize_city(city: str) -> str:
    """'Miami, USA ' -> 'miami,usa'"""
    return _WHITESPACE.sub("", city or "").lower()


def canonical_interests(interests: Iterable[str]) -> str:
    """Order-independent, case-insensitive join of the interest set"""
    cleaned = {i.strip().lower() for i in interests if i and i.strip()}
    return "-".join(sorted(cleaned))


def day_stamp(now: datetime) -> str:
    """Calendar day only, e.g. 'Fri Oct 27 2023' (English names whatever the locale)"""
    return f"{_WEEKDAYS[now.weekday()]} {_MONTHS[now.month - 1]} {now.day:02d} {now.year}"


def make_cache_key(city: str, interests: Iterable[str], now: Optional[datetime] = None) -> str:
    """
    Derive the scoped cache key.

    Args:
        city: City as displayed ("Miami, USA")
        interests: User interests, any order
        now: Local time (defaults to datetime.now())

    Returns:
        str: e.g. "CITYSENSE_EVENTS_CACHE_Fri Oct 27 2023_miami,usa_jazz-opera"
    """
    now = now or datetime.now()
    return f"{CACHE_KEY_PREFIX}{day_stamp(now)}_{normalize_city(city)}_{canonical_interests(interests)}"
