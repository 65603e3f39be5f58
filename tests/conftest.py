"""
Pytest configuration for the Wayfarer tests.
"""

import json
from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from wayfarer.config import (
    APIConfig,
    GenerationModelConfig,
    SystemConfig,
    WayfarerConfig,
)
from wayfarer.data.models import PACKING_CATEGORY_NAMES, TripRequest
from wayfarer.utils import LogLevel, setup_logging


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    setup_logging(LogLevel.DEBUG)


@pytest.fixture
def mock_gemini_client():
    """Mock Gemini client for testing."""
    mock_client = MagicMock()

    # Mock the aio.models.generate_content method
    mock_response = MagicMock()
    mock_response.text = "Test response"

    mock_client.aio = MagicMock()
    mock_client.aio.models = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock(return_value=mock_response)

    return mock_client


@pytest.fixture
def paris_request():
    return TripRequest(
        destination="Paris", start_date="2024-07-01", end_date="2024-07-03"
    )


@pytest.fixture
def test_config():
    """Configuration with no API keys: every feature serves fallback content."""
    return WayfarerConfig(
        api=APIConfig(
            gemini_api_key=None,
            geoapify_api_key=None,
            aws_region="ap-northeast-1",
            dynamodb_table_name="wayfarer-test",
        ),
        system=SystemConfig(log_level=LogLevel.DEBUG, environment="test", mock_seed=7),
        generation_models={
            "itinerary": GenerationModelConfig(temperature=0.5),
            "packing": GenerationModelConfig(temperature=0.5),
        },
    )


def _activity(place: str) -> dict:
    return {
        "timeRange": "9:00 AM - 12:00 PM",
        "place": place,
        "description": f"Visit {place}",
        "duration": "3 hours",
    }


def make_itinerary_json(start: date, days: int, prose: bool = True) -> str:
    """Generated-looking itinerary text for `days` days starting at `start`."""
    payload = {
        "itinerary": [
            {
                "day": i + 1,
                "date": (start + timedelta(days=i)).isoformat(),
                "morning": _activity(f"Museum {i + 1}"),
                "afternoon": _activity(f"Park {i + 1}"),
                "evening": _activity(f"Bistro {i + 1}"),
                "localTips": ["Tip A", "Tip B", "Tip C"],
            }
            for i in range(days)
        ]
    }
    text = json.dumps(payload, indent=2)
    if prose:
        return f"Here is your itinerary:\n```json\n{text}\n```\nEnjoy your trip!"
    return text


def make_packing_json(names: tuple[str, ...] = PACKING_CATEGORY_NAMES, items: int = 7) -> str:
    """Generated-looking packing-list text with the given categories."""
    payload = {
        "categories": [
            {"name": name, "items": [f"{name} item {n}" for n in range(items)]}
            for name in names
        ]
    }
    return "Sure! " + json.dumps(payload)


@pytest.fixture
def itinerary_json():
    return make_itinerary_json


@pytest.fixture
def packing_json():
    return make_packing_json


@pytest.fixture
def test_agent_config():
    """Test agent configuration."""
    from wayfarer.agents.base import AgentConfig

    return AgentConfig(
        name="Test Agent",
        instructions="You are a test agent",
        model="gemini-2.5-flash",
        temperature=0.5,
        api_key="test-key",
    )
