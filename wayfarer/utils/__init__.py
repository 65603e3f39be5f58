"""
Utility modules for Wayfarer.
"""

from wayfarer.config import LogLevel
from wayfarer.utils.error_handling import (
    FallbackFailure,
    MissingInputError,
    ParseError,
    UnauthenticatedError,
    UpstreamError,
    WayfarerError,
    with_retry,
)
from wayfarer.utils.helpers import (
    day_count,
    generate_id,
    parse_iso_date,
    season_for,
    seeded_rng,
    trip_dates,
)
from wayfarer.utils.logging import get_logger, setup_logging

__all__ = [
    "FallbackFailure",
    "LogLevel",
    "MissingInputError",
    "ParseError",
    "UnauthenticatedError",
    "UpstreamError",
    "WayfarerError",
    "day_count",
    "generate_id",
    "get_logger",
    "parse_iso_date",
    "season_for",
    "seeded_rng",
    "setup_logging",
    "trip_dates",
    "with_retry",
]
