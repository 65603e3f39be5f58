"""
Generation agents for Wayfarer.

Each agent turns a trip request into structured content via Gemini and
falls back to deterministic content when generation is unavailable.
"""

from wayfarer.agents.base import AgentConfig, BaseAgent, InvalidConfigurationError
from wayfarer.agents.itinerary import ItineraryAgent
from wayfarer.agents.packing import PackingListAgent

__all__ = [
    "AgentConfig",
    "BaseAgent",
    "InvalidConfigurationError",
    "ItineraryAgent",
    "PackingListAgent",
]
