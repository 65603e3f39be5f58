"""Tests for deterministic fallback content."""

from datetime import date

from wayfarer.agents.fallback import (
    AFTERNOON_TEMPLATES,
    EVENING_TEMPLATES,
    MORNING_TEMPLATES,
    TIP_SETS,
    synthesize_itinerary,
    synthesize_packing_list,
)
from wayfarer.data.models import PACKING_CATEGORY_COLORS


def test_itinerary_one_entry_per_day():
    days = synthesize_itinerary("Paris", date(2024, 6, 1), date(2024, 6, 5))
    assert len(days) == 5
    assert [d.day for d in days] == [1, 2, 3, 4, 5]
    assert days[0].date == date(2024, 6, 1)
    assert days[4].date == date(2024, 6, 5)


def test_itinerary_single_day():
    days = synthesize_itinerary("Paris", date(2024, 6, 1), date(2024, 6, 1))
    assert len(days) == 1


def test_itinerary_is_deterministic():
    first = synthesize_itinerary("Rome", date(2024, 3, 1), date(2024, 3, 9))
    second = synthesize_itinerary("Rome", date(2024, 3, 1), date(2024, 3, 9))
    assert [d.model_dump() for d in first] == [d.model_dump() for d in second]


def test_itinerary_uses_destination_and_round_robin():
    days = synthesize_itinerary("Kyoto", date(2024, 4, 1), date(2024, 4, 12))
    assert "Kyoto" in days[0].morning.place
    assert "{destination}" not in days[0].morning.description
    # Pools cycle by day index
    assert days[0].morning == days[len(MORNING_TEMPLATES)].morning
    assert days[0].afternoon == days[len(AFTERNOON_TEMPLATES)].afternoon
    assert days[0].evening == days[len(EVENING_TEMPLATES)].evening
    assert days[0].local_tips == days[len(TIP_SETS)].local_tips
    assert days[0].morning != days[1].morning


def test_itinerary_days_have_three_distinct_places():
    for day in synthesize_itinerary("Cairo", date(2024, 1, 1), date(2024, 1, 12)):
        assert len(set(day.places)) == 3
        assert 3 <= len(day.local_tips) <= 4


def test_packing_list_has_canonical_categories():
    categories = synthesize_packing_list("Paris", date(2024, 7, 1), date(2024, 7, 3))
    assert {c.name for c in categories} == {
        "Clothing",
        "Documents",
        "Essentials",
        "Weather-Specific",
    }
    assert [c.name for c in categories] == list(PACKING_CATEGORY_COLORS)
    for category in categories:
        assert 6 <= len(category.items) <= 10
        assert category.color_token == PACKING_CATEGORY_COLORS[category.name]


def test_packing_list_is_destination_agnostic():
    paris = synthesize_packing_list("Paris", date(2024, 7, 1), date(2024, 7, 3))
    oslo = synthesize_packing_list("Oslo", date(2024, 12, 1), date(2024, 12, 20))
    assert [c.model_dump() for c in paris] == [c.model_dump() for c in oslo]
    assert "Passport/ID documents" in paris[1].items
