"""
Domain models for trip planning.

Defines the trip request, generated itinerary and packing-list shapes, and
the listing models served next to them (attractions, hotels, weather).
Models use snake_case attributes and camelCase JSON aliases.
"""

import datetime as dt
from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from wayfarer.utils.helpers import day_count, parse_iso_date

T = TypeVar("T")

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Canonical packing categories, in display order, with their colour tokens
PACKING_CATEGORY_COLORS: dict[str, str] = {
    "Clothing": "bg-gradient-to-r from-blue-500 to-cyan-500",
    "Documents": "bg-gradient-to-r from-purple-500 to-pink-500",
    "Essentials": "bg-gradient-to-r from-green-500 to-teal-500",
    "Weather-Specific": "bg-gradient-to-r from-orange-500 to-red-500",
}
PACKING_CATEGORY_NAMES: tuple[str, ...] = tuple(PACKING_CATEGORY_COLORS)


class CamelModel(BaseModel):
    """Base model serialising to camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Dump to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class TripRequest(CamelModel):
    """Destination and inclusive date range of a trip."""

    destination: NonEmptyStr
    start_date: dt.date
    end_date: dt.date

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_iso_date(value)
        return value

    @model_validator(mode="after")
    def check_date_order(self) -> "TripRequest":
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self

    @property
    def day_count(self) -> int:
        return day_count(self.start_date, self.end_date)


class Activity(CamelModel):
    """One time-of-day slot of an itinerary day."""

    time_range: NonEmptyStr
    place: NonEmptyStr
    description: NonEmptyStr
    duration: NonEmptyStr


class ItineraryDay(CamelModel):
    """Plan for a single calendar day of the trip."""

    day: int = Field(ge=1)
    date: dt.date
    morning: Activity
    afternoon: Activity
    evening: Activity
    local_tips: list[NonEmptyStr] = Field(min_length=3, max_length=4)

    @property
    def places(self) -> list[str]:
        return [self.morning.place, self.afternoon.place, self.evening.place]


class PackingCategory(CamelModel):
    """A named group of items to pack."""

    name: NonEmptyStr
    color_token: str = ""
    items: list[NonEmptyStr] = Field(min_length=6, max_length=10)


class GenerationSource(StrEnum):
    AI = "ai"
    FALLBACK = "fallback"


@dataclass
class GenerationResult(Generic[T]):
    """Outcome of a generation pipeline run.

    Both sources carry an equally valid value; the source tag only exists
    for diagnostics.
    """

    value: T
    source: GenerationSource
    fallback_reason: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.source is GenerationSource.FALLBACK


class Coordinates(CamelModel):
    lat: float = 0.0
    lng: float = 0.0


class Attraction(CamelModel):
    """A point of interest at the destination."""

    id: str
    name: str
    category: str
    rating: float
    description: str
    details: str
    address: str
    coordinates: Coordinates = Field(default_factory=Coordinates)


class Hotel(CamelModel):
    """A hotel listing with a booking link."""

    id: str
    name: str
    rating: float
    price: int
    amenities: list[str]
    image: str
    booking_url: str
    address: str


class HotelPage(CamelModel):
    hotels: list[Hotel]
    has_more: bool
    page: int


class CurrentWeather(CamelModel):
    temp: int
    condition: str
    icon: str
    humidity: int
    wind_speed: int


class ForecastDay(CamelModel):
    date: dt.date
    temp: int
    condition: str
    icon: str
    humidity: int


class WeatherReport(CamelModel):
    current: CurrentWeather
    forecast: list[ForecastDay]
