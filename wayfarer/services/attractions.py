"""
Attractions service.

Looks up points of interest through the Geoapify Places API and serves a
fixed set of destination-named attractions when the API is unavailable.
"""

import random
from typing import Any

from pydantic import ValidationError

from wayfarer.data.models import Attraction, Coordinates
from wayfarer.prompts.templates import render_template
from wayfarer.utils.error_handling import UpstreamError
from wayfarer.utils.helpers import seeded_rng
from wayfarer.utils.http import APIClient
from wayfarer.utils.logging import get_logger

logger = get_logger(__name__)

GEOAPIFY_BASE_URL = "https://api.geoapify.com/v2"
ATTRACTION_CATEGORIES = "tourism.attraction,tourism.sights"
MAX_RESULTS = 20

# (name, category, rating, description, details, address)
_MOCK_ATTRACTIONS = (
    (
        "Historic {destination} Center",
        "historical",
        4.5,
        "Beautiful historic architecture and cultural sites with centuries of rich heritage.",
        "Explore ancient temples, colonial buildings, and traditional markets. "
        "Perfect for photography and cultural immersion. Don't miss the guided "
        "tours available in multiple languages.",
        "{destination} Historic District",
    ),
    (
        "{destination} Central Park",
        "nature",
        4.8,
        "Large urban park perfect for walking, jogging, and relaxation.",
        "Sprawling green space with lakes, walking trails, and picnic areas. "
        "Great for families and nature lovers. Features beautiful gardens and "
        "wildlife viewing opportunities.",
        "{destination} Central Area",
    ),
    (
        "{destination} Art Museum",
        "culture",
        4.3,
        "World-class art collection and rotating exhibitions.",
        "Features contemporary and classical art from local and international "
        "artists. Interactive exhibits available. Special exhibitions change monthly.",
        "{destination} Arts District",
    ),
    (
        "{destination} Local Market",
        "shopping",
        4.6,
        "Vibrant local market with authentic crafts and food.",
        "Experience local culture through traditional crafts, street food, and "
        "handmade souvenirs. Best visited in the morning for fresh produce.",
        "{destination} Market Square",
    ),
    (
        "{destination} Scenic Viewpoint",
        "nature",
        4.7,
        "Breathtaking panoramic views of the city and surrounding landscape.",
        "Perfect spot for sunrise/sunset photography and romantic moments. "
        "Accessible by hiking trail or cable car.",
        "{destination} Hills",
    ),
)


def mock_attractions(destination: str) -> list[Attraction]:
    """Fixed attractions named after the destination."""
    return [
        Attraction(
            id=str(index + 1),
            name=render_template(name, destination=destination),
            category=category,
            rating=rating,
            description=description,
            details=details,
            address=render_template(address, destination=destination),
        )
        for index, (name, category, rating, description, details, address) in enumerate(
            _MOCK_ATTRACTIONS
        )
    ]


def _point(feature: dict[str, Any]) -> tuple[float, float] | None:
    """Return (lng, lat) of a Point feature, or None for any other geometry."""
    coordinates = (feature.get("geometry") or {}).get("coordinates")
    if coordinates is None:
        return 0.0, 0.0
    if (
        isinstance(coordinates, list)
        and len(coordinates) == 2
        and all(isinstance(c, int | float) for c in coordinates)
    ):
        return coordinates[0], coordinates[1]
    return None


def _to_attraction(
    feature: dict[str, Any],
    index: int,
    destination: str,
    rng: random.Random,
    point: tuple[float, float],
) -> Attraction:
    """Map a GeoJSON feature from Geoapify to an Attraction."""
    props = feature.get("properties") or {}
    categories = props.get("categories") or []
    category_parts = categories[0].split(".") if categories else []
    lng, lat = point

    return Attraction(
        id=str(props.get("place_id") or f"attraction-{index}"),
        name=props.get("name") or f"Attraction {index + 1}",
        category=category_parts[1] if len(category_parts) > 1 else "attraction",
        rating=props.get("rating") or rng.random() * 2 + 3,
        description=props.get("description") or f"Popular attraction in {destination}",
        details=props.get("details")
        or "A must-visit destination offering unique experiences and cultural insights.",
        address=props.get("formatted") or destination,
        coordinates=Coordinates(lat=lat, lng=lng),
    )


class AttractionService:
    """Service for attraction lookups."""

    def __init__(
        self,
        api_key: str | None = None,
        mock_seed: int | None = None,
        client: APIClient | None = None,
    ):
        self.api_key = api_key
        self.mock_seed = mock_seed
        self.client = client or APIClient("geoapify", GEOAPIFY_BASE_URL)

    async def get_attractions(self, destination: str) -> list[Attraction]:
        """
        Get attractions for a destination.

        Upstream failures and malformed features are not raised; the fixed
        attractions are returned instead.
        """
        if not self.api_key:
            logger.info("Geoapify API key not configured, serving mock attractions")
            return mock_attractions(destination)

        try:
            data = await self.client.request(
                "GET",
                "places",
                params={
                    "categories": ATTRACTION_CATEGORIES,
                    "filter": f"place:{destination}",
                    "limit": MAX_RESULTS,
                    "apiKey": self.api_key,
                },
            )
            attractions = self._map_features(data.get("features") or [], destination)
        except (UpstreamError, ValidationError, TypeError, AttributeError) as e:
            logger.warning(f"Attraction lookup failed, serving mock attractions: {e!s}")
            return mock_attractions(destination)

        if not attractions:
            logger.info(f"No attractions found for {destination}, serving mock attractions")
            return mock_attractions(destination)
        return attractions

    def _map_features(
        self, features: list[dict[str, Any]], destination: str
    ) -> list[Attraction]:
        rng = seeded_rng("attractions", destination, base_seed=self.mock_seed)
        attractions = []
        for index, feature in enumerate(features):
            point = _point(feature)
            if point is None:
                logger.debug(f"Skipping non-point feature {index} for {destination}")
                continue
            attractions.append(_to_attraction(feature, index, destination, rng, point))
        return attractions
