"""
Prompt templates for itinerary and packing-list generation.

Each template embeds a literal JSON example of the exact output the model
must reproduce. Placeholders use {name} syntax and are filled with
render_template, which leaves the JSON braces of the example untouched.
"""

from datetime import date

from wayfarer.data.models import PACKING_CATEGORY_COLORS
from wayfarer.utils.helpers import day_count, season_for

TIPS_PER_DAY = "3-4"
ITEMS_PER_CATEGORY = "6-10"


def render_template(template: str, **kwargs: str) -> str:
    """Render a template string, leaving unresolved vars as-is."""
    result = template
    for key, value in kwargs.items():
        result = result.replace(f"{{{key}}}", value)
    return result


ITINERARY_TEMPLATE = """\
You are an expert local travel planner.
Create a detailed {days}-day travel itinerary for {destination} from {start_date} to {end_date}.

For each of the {days} days, provide:
1. A morning, an afternoon and an evening activity. Each activity has a time range, the name of a specific place, a short description of what to do there, and a duration.
2. {tips} practical local tips for that day (transport, etiquette, food, money).

Rules:
- The three activities of a day must take place at three different, specific, real places in {destination} (a named landmark, museum, market, restaurant or neighbourhood, never a generic description).
- No place may appear more than once in the whole itinerary.
- Day numbers start at 1 and dates run consecutively from {start_date}.

Reply with a single JSON object and nothing else, using exactly this structure:
{
  "itinerary": [
    {
      "day": 1,
      "date": "{start_date}",
      "morning": {
        "timeRange": "9:00 AM - 12:00 PM",
        "place": "Name of a specific place",
        "description": "What to do there",
        "duration": "3 hours"
      },
      "afternoon": {
        "timeRange": "1:00 PM - 5:00 PM",
        "place": "Name of a different specific place",
        "description": "What to do there",
        "duration": "4 hours"
      },
      "evening": {
        "timeRange": "6:30 PM - 9:30 PM",
        "place": "Name of another specific place",
        "description": "What to do there",
        "duration": "3 hours"
      },
      "localTips": ["Tip 1", "Tip 2", "Tip 3"]
    }
  ]
}
The "itinerary" array must contain exactly {days} entries."""


PACKING_LIST_TEMPLATE = """\
Create a personalized packing list for a {days}-day trip to {destination} from {start_date} to {end_date} ({season} season).

Consider:
- Weather conditions in {destination} during {season}
- Trip duration ({days} days)
- Local activities and culture in {destination}
- Practical travel needs

Organize items into exactly these categories:
1. Clothing (weather-appropriate, versatile pieces)
2. Documents (travel essentials, identification)
3. Essentials (health, hygiene, electronics)
4. Weather-Specific (season and destination specific items)

Reply with a single JSON object and nothing else, using exactly this structure:
{
  "categories": [
{categories_example}
  ]
}

Make recommendations specific to {destination}'s climate, culture, and typical activities. Include {items} items per category."""


_CATEGORY_EXAMPLE = """\
    {
      "name": "{name}",
      "colorToken": "{color}",
      "items": ["Item 1", "Item 2", "..."]
    }"""


def build_itinerary_prompt(destination: str, start_date: date, end_date: date) -> str:
    """Build the itinerary generation prompt for a destination and date range."""
    return render_template(
        ITINERARY_TEMPLATE,
        days=str(day_count(start_date, end_date)),
        destination=destination,
        start_date=start_date.isoformat(),
        end_date=end_date.isoformat(),
        tips=TIPS_PER_DAY,
    )


def build_packing_list_prompt(
    destination: str, start_date: date, end_date: date
) -> str:
    """Build the packing-list generation prompt, including the trip's season."""
    categories_example = ",\n".join(
        render_template(_CATEGORY_EXAMPLE, name=name, color=color)
        for name, color in PACKING_CATEGORY_COLORS.items()
    )
    return render_template(
        PACKING_LIST_TEMPLATE,
        categories_example=categories_example,
        days=str(day_count(start_date, end_date)),
        destination=destination,
        start_date=start_date.isoformat(),
        end_date=end_date.isoformat(),
        season=season_for(start_date),
        items=ITEMS_PER_CATEGORY,
    )
