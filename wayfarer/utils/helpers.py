"""
Helper utilities for Wayfarer.

This module provides general utility functions used across the application.
"""

import random
import uuid
from datetime import date, timedelta

# Month ranges for the northern-hemisphere seasons
_SEASONS = (
    ((3, 4, 5), "spring"),
    ((6, 7, 8), "summer"),
    ((9, 10, 11), "autumn"),
)


def generate_id(prefix: str = "") -> str:
    """
    Generate a unique ID with an optional prefix.

    Args:
        prefix: Optional prefix for the ID

    Returns:
        A unique ID string
    """
    unique_id = str(uuid.uuid4()).replace("-", "")
    if prefix:
        return f"{prefix}-{unique_id}"
    return unique_id


def parse_iso_date(value: str | date) -> date:
    """
    Parse an ISO-8601 date string (YYYY-MM-DD).

    A full timestamp is accepted and truncated to its date part.

    Raises:
        ValueError: If the value is not a valid date
    """
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def day_count(start_date: date, end_date: date) -> int:
    """Number of calendar days in [start_date, end_date], both ends inclusive."""
    return (end_date - start_date).days + 1


def trip_dates(start_date: date, end_date: date) -> list[date]:
    """Every calendar day of the trip, in order."""
    return [
        start_date + timedelta(days=offset)
        for offset in range(day_count(start_date, end_date))
    ]


def season_for(day: date) -> str:
    """Return the (northern-hemisphere) season a date falls in."""
    for months, season in _SEASONS:
        if day.month in months:
            return season
    return "winter"


def seeded_rng(*parts: object, base_seed: int | None = None) -> random.Random:
    """
    Build a pseudo-random generator seeded from the given parts.

    Identical parts (and base seed) always yield the same sequence, so
    synthetic listings are reproducible for a given query.
    """
    key = "|".join(str(part) for part in parts)
    if base_seed is not None:
        key = f"{base_seed}|{key}"
    return random.Random(key)
