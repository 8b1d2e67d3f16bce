"""
Algorithms Module
Filtering and projection over merged event sets
"""

from .filter_engine import (
    ALL_CATEGORIES,
    merge,
    filter_by_category,
    top_picks,
    available_categories,
    mappable
)

__all__ = [
    "ALL_CATEGORIES",
    "merge",
    "filter_by_category",
    "top_picks",
    "available_categories",
    "mappable"
]
