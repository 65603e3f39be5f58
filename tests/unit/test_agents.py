"""
Tests for the itinerary and packing-list agents.
"""

from datetime import date
from unittest.mock import patch

import pytest
from google.genai import errors

from wayfarer.agents import ItineraryAgent, PackingListAgent
from wayfarer.agents.fallback import synthesize_itinerary, synthesize_packing_list
from wayfarer.config import GenerationModelConfig
from wayfarer.data.models import GenerationSource, TripRequest


@pytest.fixture
def mock_genai(mock_gemini_client):
    with patch("wayfarer.agents.base.genai") as mock:
        mock.Client.return_value = mock_gemini_client
        yield mock


def _server_error() -> errors.APIError:
    return errors.ServerError(
        500, {"error": {"code": 500, "message": "Internal error", "status": "INTERNAL"}}
    )


def test_agents_take_model_config():
    model_config = GenerationModelConfig(name="gemini-2.5-pro", temperature=0.2, max_tokens=2048)
    agent = ItineraryAgent(model_config=model_config)
    assert agent.config.model == "gemini-2.5-pro"
    assert agent.config.temperature == 0.2
    assert agent.config.max_tokens == 2048


async def test_itinerary_without_key_makes_no_call(mock_genai, paris_request):
    result = await ItineraryAgent(api_key=None).run(paris_request)

    mock_genai.Client.assert_not_called()
    assert result.source is GenerationSource.FALLBACK
    assert len(result.value) == 3
    assert [d.date for d in result.value] == [
        date(2024, 7, 1),
        date(2024, 7, 2),
        date(2024, 7, 3),
    ]
    assert "Paris" in result.value[0].morning.place


async def test_itinerary_from_model(
    mock_genai, mock_gemini_client, paris_request, itinerary_json
):
    mock_gemini_client.aio.models.generate_content.return_value.text = itinerary_json(
        date(2024, 7, 1), 3
    )
    result = await ItineraryAgent(api_key="test-key").run(paris_request)

    assert result.source is GenerationSource.AI
    assert [d.morning.place for d in result.value] == ["Museum 1", "Museum 2", "Museum 3"]
    prompt = mock_gemini_client.aio.models.generate_content.call_args.kwargs["contents"]
    assert "3-day travel itinerary for Paris" in prompt[0].parts[0].text


async def test_itinerary_incomplete_output_falls_back(
    mock_genai, mock_gemini_client, paris_request, itinerary_json
):
    mock_gemini_client.aio.models.generate_content.return_value.text = itinerary_json(
        date(2024, 7, 1), 2
    )
    result = await ItineraryAgent(api_key="test-key").run(paris_request)

    assert result.is_fallback
    assert result.value == synthesize_itinerary("Paris", date(2024, 7, 1), date(2024, 7, 3))


async def test_itinerary_prose_only_falls_back(mock_genai, mock_gemini_client):
    mock_gemini_client.aio.models.generate_content.return_value.text = (
        "Sorry, I cannot help with that."
    )
    request = TripRequest(destination="Tokyo", start_date="2024-06-01", end_date="2024-06-05")
    result = await ItineraryAgent(api_key="test-key").run(request)

    assert result.is_fallback
    assert len(result.value) == 5


async def test_itinerary_upstream_error_falls_back(
    mock_genai, mock_gemini_client, paris_request
):
    mock_gemini_client.aio.models.generate_content.side_effect = _server_error()
    result = await ItineraryAgent(api_key="test-key").run(paris_request)

    assert result.is_fallback
    assert "status: 500" in result.fallback_reason
    mock_gemini_client.aio.models.generate_content.assert_awaited_once()


async def test_packing_list_from_model(mock_genai, mock_gemini_client, paris_request, packing_json):
    mock_gemini_client.aio.models.generate_content.return_value.text = packing_json()
    result = await PackingListAgent(api_key="test-key").run(paris_request)

    assert result.source is GenerationSource.AI
    assert [c.name for c in result.value] == [
        "Clothing",
        "Documents",
        "Essentials",
        "Weather-Specific",
    ]
    prompt = mock_gemini_client.aio.models.generate_content.call_args.kwargs["contents"]
    assert "(summer season)" in prompt[0].parts[0].text


async def test_packing_list_http_500_falls_back(mock_genai, mock_gemini_client, paris_request):
    mock_gemini_client.aio.models.generate_content.side_effect = _server_error()
    result = await PackingListAgent(api_key="test-key").run(paris_request)

    assert result.is_fallback
    assert len(result.value) == 4
    assert all(len(c.items) >= 6 for c in result.value)
    assert result.value == synthesize_packing_list("Paris", date(2024, 7, 1), date(2024, 7, 3))


async def test_packing_list_without_key(mock_genai, paris_request):
    result = await PackingListAgent().run(paris_request)

    mock_genai.Client.assert_not_called()
    assert result.is_fallback
    assert {c.name for c in result.value} == {
        "Clothing",
        "Documents",
        "Essentials",
        "Weather-Specific",
    }
