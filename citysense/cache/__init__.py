"""
Cache Module
Daily recommendation caching scoped by city, interests and calendar day
"""

from .cache_keys import CACHE_KEY_PREFIX, make_cache_key, normalize_city, canonical_interests
from .recommendation_cache import RecommendationCache

__all__ = [
    "CACHE_KEY_PREFIX",
    "make_cache_key",
    "normalize_city",
    "canonical_interests",
    "RecommendationCache"
]
