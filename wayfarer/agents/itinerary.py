"""
Itinerary agent.

Generates a day-by-day plan (morning, afternoon and evening activities plus
local tips) for a trip via Gemini, falling back to template content.
"""

from wayfarer.agents.base import AgentConfig, BaseAgent
from wayfarer.agents.fallback import synthesize_itinerary
from wayfarer.agents.parsing import parse_itinerary
from wayfarer.config import GenerationModelConfig
from wayfarer.data.models import ItineraryDay, TripRequest
from wayfarer.prompts.templates import build_itinerary_prompt


class ItineraryAgent(BaseAgent[list[ItineraryDay]]):
    """Agent for generating trip itineraries."""

    def __init__(
        self,
        api_key: str | None = None,
        model_config: GenerationModelConfig | None = None,
    ):
        model_config = model_config or GenerationModelConfig()
        config = AgentConfig(
            name="Itinerary Agent",
            instructions=(
                "You are a travel planning assistant. "
                "Always answer with a single valid JSON object."
            ),
            model=model_config.name,
            temperature=model_config.temperature,
            max_tokens=model_config.max_tokens,
            api_key=api_key,
        )
        super().__init__(config)

    def build_prompt(self, request: TripRequest) -> str:
        return build_itinerary_prompt(
            request.destination, request.start_date, request.end_date
        )

    def parse(self, raw_text: str, request: TripRequest) -> list[ItineraryDay]:
        return parse_itinerary(raw_text, request)

    def synthesize(self, request: TripRequest) -> list[ItineraryDay]:
        return synthesize_itinerary(
            request.destination, request.start_date, request.end_date
        )
