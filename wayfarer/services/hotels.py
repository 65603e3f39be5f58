"""
Hotel listing service.

Synthesises paginated hotel listings for a destination, each with a search
link on a booking site for the requested dates.
"""

import random
from urllib.parse import quote

from wayfarer.data.models import Hotel, HotelPage
from wayfarer.utils.helpers import seeded_rng

# Number of pages a search pretends to have
TOTAL_PAGES = 3

# (prefix, suffix, (min price, max price))
HOTEL_TYPES: tuple[tuple[str, str, tuple[int, int]], ...] = (
    ("Grand", "Palace Hotel", (8000, 15000)),
    ("Royal", "Resort & Spa", (12000, 25000)),
    ("", "Heritage Hotel", (6000, 12000)),
    ("Luxury", "Suites", (10000, 20000)),
    ("Boutique", "Inn", (5000, 10000)),
    ("Premium", "Lodge", (7000, 14000)),
    ("Comfort", "Hotel", (4000, 8000)),
    ("Elite", "Resort", (15000, 30000)),
    ("Classic", "Hotel & Spa", (9000, 18000)),
    ("Modern", "Business Hotel", (6500, 13000)),
)

AMENITIES: tuple[tuple[str, ...], ...] = (
    ("wifi", "parking", "breakfast"),
    ("wifi", "pool", "gym", "spa"),
    ("wifi", "breakfast", "restaurant"),
    ("wifi", "parking", "pool", "breakfast"),
    ("wifi", "gym", "restaurant", "bar"),
    ("wifi", "spa", "pool", "parking"),
    ("wifi", "breakfast", "gym"),
    ("wifi", "pool", "spa", "restaurant", "bar"),
    ("wifi", "parking", "breakfast", "gym"),
    ("wifi", "restaurant", "pool"),
)

PLACEHOLDER_IMAGE = "/placeholder.svg?height=200&width=300"


def booking_urls(destination: str, checkin: str, checkout: str) -> list[str]:
    """Search URLs for the destination and dates on the supported booking sites."""
    encoded = quote(destination)
    slug = "-".join(encoded.lower().split("%20"))
    return [
        f"https://www.booking.com/searchresults.html?ss={encoded}&checkin={checkin}"
        f"&checkout={checkout}&group_adults=2&group_children=0&selected_currency=INR&aid=1610687",
        f"https://www.agoda.com/search?city={encoded}&checkIn={checkin}&checkOut={checkout}"
        f"&rooms=1&adults=2&children=0&currency=INR&cid=1844104",
        f"https://www.expedia.co.in/Hotel-Search?destination={encoded}&startDate={checkin}"
        f"&endDate={checkout}&rooms=1&adults=2&currency=INR",
        f"https://www.makemytrip.com/hotels/{slug}-hotels.html?checkin={checkin}"
        f"&checkout={checkout}&rooms=1&adults=2&currency=INR",
        f"https://www.goibibo.com/hotels/{slug}-hotels/?checkin={checkin}"
        f"&checkout={checkout}&guests=2&rooms=1",
    ]


class HotelService:
    """Service for hotel searches."""

    def __init__(self, mock_seed: int | None = None):
        self.mock_seed = mock_seed

    def search(
        self,
        destination: str,
        checkin: str,
        checkout: str,
        page: int = 1,
        limit: int = 6,
        rng: random.Random | None = None,
    ) -> HotelPage:
        """
        Return one page of hotel listings.

        Without an explicit rng, listings are seeded from the query, so the
        same search always returns the same page.
        """
        rng = rng or seeded_rng(
            "hotels", destination, checkin, checkout, page, base_seed=self.mock_seed
        )
        urls = booking_urls(destination, checkin, checkout)

        hotels = []
        for index, (prefix, suffix, (low, high)) in enumerate(HOTEL_TYPES[:limit]):
            hotels.append(
                Hotel(
                    id=f"hotel-{page}-{index}",
                    name=f"{prefix} {destination} {suffix}".strip(),
                    rating=round(rng.random() * 2 + 3, 1),
                    price=int(rng.random() * (high - low) + low),
                    amenities=list(AMENITIES[index % len(AMENITIES)]),
                    image=PLACEHOLDER_IMAGE,
                    booking_url=rng.choice(urls),
                    address=f"{destination} City Center, {destination}",
                )
            )

        return HotelPage(hotels=hotels, has_more=page < TOTAL_PAGES, page=page)
