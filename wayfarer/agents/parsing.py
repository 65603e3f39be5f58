"""
Structured payload extraction from generated text.

Models often wrap their JSON in prose or markdown fences. The outermost
{...} span is located, decoded, and validated against the domain models
right away, so nothing unvalidated leaves this module.
"""

import json
import re
from typing import Any

from pydantic import ValidationError

from wayfarer.data.models import (
    PACKING_CATEGORY_COLORS,
    PACKING_CATEGORY_NAMES,
    ItineraryDay,
    PackingCategory,
    TripRequest,
)
from wayfarer.utils.error_handling import ParseError
from wayfarer.utils.helpers import trip_dates
from wayfarer.utils.logging import get_logger

logger = get_logger(__name__)

# Greedy: first "{" to last "}"
_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")


def extract_json_object(raw_text: str) -> dict[str, Any]:
    """
    Decode the outermost JSON object embedded in free text.

    Args:
        raw_text: Generated text, possibly with surrounding prose

    Returns:
        The decoded object

    Raises:
        ParseError: If there is no {...} span, it does not decode, or it is
            not a JSON object
    """
    match = _OBJECT_SPAN.search(raw_text or "")
    if not match:
        raise ParseError("No JSON object found in generated text")

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ParseError("Generated JSON could not be decoded", original_error=e) from e

    if not isinstance(payload, dict):
        raise ParseError("Generated JSON is not an object")
    return payload


def _require_list(payload: dict[str, Any], key: str) -> list[Any]:
    value = payload.get(key)
    if not isinstance(value, list):
        raise ParseError(f"Generated JSON has no '{key}' array")
    return value


def parse_itinerary(raw_text: str, request: TripRequest) -> list[ItineraryDay]:
    """
    Extract and validate a day-by-day itinerary.

    The result holds exactly one entry per trip day, numbered from 1, with
    dates normalised to the trip's calendar.

    Raises:
        ParseError: If the payload is missing, malformed or incomplete
    """
    entries = _require_list(extract_json_object(raw_text), "itinerary")
    dates = trip_dates(request.start_date, request.end_date)
    if len(entries) != len(dates):
        raise ParseError(
            f"Expected {len(dates)} itinerary days, got {len(entries)}"
        )

    days = []
    for index, (entry, day_date) in enumerate(zip(entries, dates, strict=True)):
        if not isinstance(entry, dict):
            raise ParseError(f"Itinerary entry {index + 1} is not an object")
        try:
            day = ItineraryDay.model_validate({**entry, "date": day_date})
        except ValidationError as e:
            raise ParseError(
                f"Itinerary day {index + 1} is invalid", original_error=e
            ) from e

        if day.day != index + 1:
            raise ParseError(
                f"Itinerary day numbers out of order: expected {index + 1}, "
                f"got {day.day}"
            )
        if len(set(day.places)) < len(day.places):
            logger.info(f"Itinerary day {day.day} repeats a place: {day.places}")
        days.append(day)

    return days


def parse_packing_list(raw_text: str) -> list[PackingCategory]:
    """
    Extract and validate a packing list.

    Each canonical category must appear exactly once; the result is returned
    in canonical order with colour tokens filled in where missing.

    Raises:
        ParseError: If the payload is missing, malformed or incomplete
    """
    entries = _require_list(extract_json_object(raw_text), "categories")

    by_name: dict[str, PackingCategory] = {}
    for index, entry in enumerate(entries):
        try:
            category = PackingCategory.model_validate(entry)
        except ValidationError as e:
            raise ParseError(
                f"Packing category {index + 1} is invalid", original_error=e
            ) from e

        if category.name not in PACKING_CATEGORY_COLORS:
            raise ParseError(f"Unknown packing category: {category.name}")
        if category.name in by_name:
            raise ParseError(f"Duplicate packing category: {category.name}")
        by_name[category.name] = category

    missing = [name for name in PACKING_CATEGORY_NAMES if name not in by_name]
    if missing:
        raise ParseError(f"Missing packing categories: {', '.join(missing)}")

    categories = []
    for name in PACKING_CATEGORY_NAMES:
        category = by_name[name]
        if not category.color_token:
            category = category.model_copy(
                update={"color_token": PACKING_CATEGORY_COLORS[name]}
            )
        categories.append(category)
    return categories
