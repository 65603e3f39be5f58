"""Tests for domain models."""

from datetime import date

import pytest
from pydantic import ValidationError

from wayfarer.data.models import (
    Activity,
    GenerationResult,
    GenerationSource,
    HotelPage,
    ItineraryDay,
    PackingCategory,
    TripRequest,
)


def _activity(place: str = "Louvre") -> Activity:
    return Activity(
        time_range="9:00 AM - 12:00 PM",
        place=place,
        description="See the collections",
        duration="3 hours",
    )


def test_trip_request_parses_strings():
    request = TripRequest(destination="Paris", start_date="2024-07-01", end_date="2024-07-03")
    assert request.start_date == date(2024, 7, 1)
    assert request.day_count == 3


def test_trip_request_accepts_camel_case():
    request = TripRequest.model_validate(
        {"destination": "Paris", "startDate": "2024-07-01", "endDate": "2024-07-01"}
    )
    assert request.day_count == 1


def test_trip_request_truncates_timestamps():
    request = TripRequest(
        destination="Paris",
        start_date="2024-06-01T00:00:00.000Z",
        end_date="2024-06-05T00:00:00.000Z",
    )
    assert request.day_count == 5


def test_trip_request_rejects_reversed_dates():
    with pytest.raises(ValidationError):
        TripRequest(destination="Paris", start_date="2024-07-03", end_date="2024-07-01")


def test_trip_request_rejects_blank_destination():
    with pytest.raises(ValidationError):
        TripRequest(destination="  ", start_date="2024-07-01", end_date="2024-07-01")


def test_itinerary_day_serialises_camel_case():
    day = ItineraryDay(
        day=1,
        date=date(2024, 7, 1),
        morning=_activity("Louvre"),
        afternoon=_activity("Tuileries"),
        evening=_activity("Le Procope"),
        local_tips=["a", "b", "c"],
    )
    data = day.to_json_dict()
    assert data["date"] == "2024-07-01"
    assert data["localTips"] == ["a", "b", "c"]
    assert data["morning"]["timeRange"] == "9:00 AM - 12:00 PM"
    assert day.places == ["Louvre", "Tuileries", "Le Procope"]


def test_itinerary_day_tip_bounds():
    with pytest.raises(ValidationError):
        ItineraryDay(
            day=1,
            date=date(2024, 7, 1),
            morning=_activity(),
            afternoon=_activity(),
            evening=_activity(),
            local_tips=["a", "b", "c", "d", "e"],
        )


def test_packing_category_serialises_color_token():
    category = PackingCategory(name="Clothing", color_token="blue", items=list("abcdef"))
    assert category.to_json_dict() == {
        "name": "Clothing",
        "colorToken": "blue",
        "items": ["a", "b", "c", "d", "e", "f"],
    }


def test_generation_result_source():
    assert GenerationResult(value=1, source=GenerationSource.FALLBACK).is_fallback
    assert not GenerationResult(value=1, source=GenerationSource.AI).is_fallback
    assert GenerationSource.AI == "ai"


def test_hotel_page_has_more_alias():
    page = HotelPage(hotels=[], has_more=True, page=1)
    assert page.to_json_dict() == {"hotels": [], "hasMore": True, "page": 1}
