"""
Packing-list agent.

Generates a packing list in the four canonical categories, tailored to the
destination and season, falling back to a standard list.
"""

from wayfarer.agents.base import AgentConfig, BaseAgent
from wayfarer.agents.fallback import synthesize_packing_list
from wayfarer.agents.parsing import parse_packing_list
from wayfarer.config import GenerationModelConfig
from wayfarer.data.models import PackingCategory, TripRequest
from wayfarer.prompts.templates import build_packing_list_prompt


class PackingListAgent(BaseAgent[list[PackingCategory]]):
    """Agent for generating packing lists."""

    def __init__(
        self,
        api_key: str | None = None,
        model_config: GenerationModelConfig | None = None,
    ):
        model_config = model_config or GenerationModelConfig()
        config = AgentConfig(
            name="Packing List Agent",
            instructions=(
                "You are a travel packing expert. "
                "Always answer with a single valid JSON object."
            ),
            model=model_config.name,
            temperature=model_config.temperature,
            max_tokens=model_config.max_tokens,
            api_key=api_key,
        )
        super().__init__(config)

    def build_prompt(self, request: TripRequest) -> str:
        return build_packing_list_prompt(
            request.destination, request.start_date, request.end_date
        )

    def parse(self, raw_text: str, request: TripRequest) -> list[PackingCategory]:
        return parse_packing_list(raw_text)

    def synthesize(self, request: TripRequest) -> list[PackingCategory]:
        return synthesize_packing_list(
            request.destination, request.start_date, request.end_date
        )
