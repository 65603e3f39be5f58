"""
Deterministic fallback content.

Used whenever generated content is unavailable. Everything here is built
from fixed template pools, selected round-robin by day index, with the
destination name substituted in. No network access and no randomness: the
same trip always yields the same result.
"""

from datetime import date

from wayfarer.data.models import (
    PACKING_CATEGORY_COLORS,
    Activity,
    ItineraryDay,
    PackingCategory,
)
from wayfarer.prompts.templates import render_template
from wayfarer.utils.helpers import trip_dates

# (time range, place, description, duration)
MORNING_TEMPLATES: tuple[tuple[str, str, str, str], ...] = (
    (
        "9:00 AM - 12:00 PM",
        "Historic {destination} Old Town",
        "Walk the historic centre of {destination} and get oriented among its oldest streets and squares.",
        "3 hours",
    ),
    (
        "9:00 AM - 12:00 PM",
        "{destination} National Museum",
        "Explore the main collections to learn about the history and culture of {destination}.",
        "3 hours",
    ),
    (
        "8:30 AM - 11:30 AM",
        "{destination} Central Market",
        "Browse the morning market stalls and try local breakfast specialities.",
        "3 hours",
    ),
    (
        "9:30 AM - 12:30 PM",
        "{destination} Botanical Garden",
        "Start the day with a relaxed stroll through gardens and green spaces.",
        "3 hours",
    ),
)

AFTERNOON_TEMPLATES: tuple[tuple[str, str, str, str], ...] = (
    (
        "1:00 PM - 5:00 PM",
        "{destination} Cathedral Quarter",
        "Visit the landmark religious and civic buildings and the surrounding lanes.",
        "4 hours",
    ),
    (
        "1:30 PM - 5:00 PM",
        "{destination} Art Gallery",
        "See works by local and international artists, then rest in the gallery cafe.",
        "3.5 hours",
    ),
    (
        "1:00 PM - 4:30 PM",
        "{destination} Waterfront Promenade",
        "Follow the waterfront on foot and stop at viewpoints along the way.",
        "3.5 hours",
    ),
    (
        "2:00 PM - 5:30 PM",
        "{destination} Artisan District",
        "Meet local craftspeople and pick up handmade souvenirs.",
        "3.5 hours",
    ),
)

EVENING_TEMPLATES: tuple[tuple[str, str, str, str], ...] = (
    (
        "6:30 PM - 9:30 PM",
        "Traditional {destination} Restaurant",
        "Enjoy a dinner of regional dishes in a long-established local restaurant.",
        "3 hours",
    ),
    (
        "7:00 PM - 9:30 PM",
        "Scenic {destination} Viewpoint",
        "Watch the sunset over {destination} and take in the city lights.",
        "2.5 hours",
    ),
    (
        "6:00 PM - 9:00 PM",
        "{destination} Night Market",
        "Sample street food and browse the evening stalls.",
        "3 hours",
    ),
)

TIP_SETS: tuple[tuple[str, ...], ...] = (
    (
        "Buy a day pass for public transport in {destination} to save on fares.",
        "Carry some cash, as smaller shops and markets may not accept cards.",
        "Start early to avoid crowds at the most popular sights.",
    ),
    (
        "Book museum tickets online in advance to skip the queues.",
        "Learn a few local phrases; a simple greeting goes a long way.",
        "Keep a reusable water bottle with you while sightseeing.",
        "Check opening hours, as many sights close one day a week.",
    ),
    (
        "Ask locals for their favourite places to eat away from the main squares.",
        "Keep your valuables secure in busy areas and on public transport.",
        "Wear comfortable shoes; most of {destination} is best explored on foot.",
    ),
)

# Destination-agnostic items per canonical category
PACKING_ITEMS: dict[str, tuple[str, ...]] = {
    "Clothing": (
        "Comfortable walking shoes",
        "Light cotton t-shirts (3-4)",
        "Comfortable jeans/pants (2 pairs)",
        "Light jacket or cardigan",
        "Underwear and socks (enough for trip)",
        "Sleepwear",
        "One dressy outfit for nice dinners",
        "Swimwear (if applicable)",
        "Hat or cap for sun protection",
    ),
    "Documents": (
        "Passport/ID documents",
        "Travel insurance papers",
        "Flight/train tickets (printed copies)",
        "Hotel booking confirmations",
        "Emergency contact information",
        "Copies of important documents",
        "Travel itinerary",
        "Credit cards and cash",
    ),
    "Essentials": (
        "Phone charger and power bank",
        "Universal travel adapter",
        "Medications and first aid kit",
        "Toiletries and personal hygiene items",
        "Sunglasses",
        "Reusable water bottle",
        "Camera or smartphone",
        "Hand sanitizer",
        "Travel pillow for comfort",
    ),
    "Weather-Specific": (
        "Sunscreen SPF 30+",
        "Umbrella or rain jacket",
        "Insect repellent",
        "Light scarf for air conditioning",
        "Comfortable day backpack",
        "Weather-appropriate footwear",
        "Extra layer for temperature changes",
    ),
}


def _activity(template: tuple[str, str, str, str], destination: str) -> Activity:
    time_range, place, description, duration = template
    return Activity(
        time_range=time_range,
        place=render_template(place, destination=destination),
        description=render_template(description, destination=destination),
        duration=duration,
    )


def synthesize_itinerary(
    destination: str, start_date: date, end_date: date
) -> list[ItineraryDay]:
    """
    Build a complete itinerary from the template pools.

    Day i uses entry i modulo pool size from each pool.
    """
    days = []
    for index, day_date in enumerate(trip_dates(start_date, end_date)):
        tips = TIP_SETS[index % len(TIP_SETS)]
        days.append(
            ItineraryDay(
                day=index + 1,
                date=day_date,
                morning=_activity(
                    MORNING_TEMPLATES[index % len(MORNING_TEMPLATES)], destination
                ),
                afternoon=_activity(
                    AFTERNOON_TEMPLATES[index % len(AFTERNOON_TEMPLATES)], destination
                ),
                evening=_activity(
                    EVENING_TEMPLATES[index % len(EVENING_TEMPLATES)], destination
                ),
                local_tips=[
                    render_template(tip, destination=destination) for tip in tips
                ],
            )
        )
    return days


def synthesize_packing_list(
    destination: str, start_date: date, end_date: date
) -> list[PackingCategory]:
    """Build the standard packing list: the four canonical categories."""
    return [
        PackingCategory(name=name, color_token=color, items=list(PACKING_ITEMS[name]))
        for name, color in PACKING_CATEGORY_COLORS.items()
    ]
