"""
Base agent class for Wayfarer's generation agents.

This module implements the foundation the itinerary and packing-list agents
inherit from: the Gemini client wrapper that sends one prompt and returns the
generated text, and the run loop that falls back to deterministic content
whenever generation or parsing fails.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from google import genai
from google.genai import errors, types

from wayfarer.data.models import GenerationResult, GenerationSource, TripRequest
from wayfarer.utils.error_handling import FallbackFailure, ParseError, UpstreamError
from wayfarer.utils.logging import get_logger

logger = get_logger(__name__)

# Type variable for the generated payload
T = TypeVar("T")

GEMINI_SERVICE = "gemini"


class InvalidConfigurationError(Exception):
    """Exception raised when agent configuration is invalid."""

    pass


@dataclass
class AgentConfig:
    """Configuration for an agent."""

    name: str
    instructions: str = ""
    model: str = "gemini-2.5-flash"
    temperature: float = 0.7
    max_tokens: int | None = None
    api_key: str | None = None


class BaseAgent(Generic[T]):
    """
    Base class for generation agents.

    A run follows one path: build a prompt, make a single Gemini call, then
    extract and validate the structured payload. When no API key is
    configured, or any of those steps fails, the partial output is dropped
    and the deterministic fallback is returned instead. Callers always get a
    complete payload.

    Subclasses provide build_prompt, parse and synthesize.
    """

    def __init__(self, config: AgentConfig):
        """
        Initialize a base agent.

        Args:
            config: Configuration for the agent
        """
        self.config = config
        self._validate_config()
        self.client = genai.Client(api_key=config.api_key) if config.api_key else None

    @property
    def name(self) -> str:
        """Get the name of the agent."""
        return self.config.name

    @property
    def has_credentials(self) -> bool:
        return self.client is not None

    def _validate_config(self) -> bool:
        """Validate the agent configuration."""
        if not self.config.name:
            raise InvalidConfigurationError("Agent name cannot be empty")
        if not (0.0 <= self.config.temperature <= 1.0):
            raise InvalidConfigurationError(
                f"Temperature must be between 0.0 and 1.0, got {self.config.temperature}"
            )
        return True

    def build_prompt(self, request: TripRequest) -> str:
        raise NotImplementedError("Subclasses must implement build_prompt")

    def parse(self, raw_text: str, request: TripRequest) -> T:
        raise NotImplementedError("Subclasses must implement parse")

    def synthesize(self, request: TripRequest) -> T:
        raise NotImplementedError("Subclasses must implement synthesize")

    async def generate(self, prompt: str) -> str:
        """
        Send a prompt to Gemini and return the generated text.

        Args:
            prompt: The full prompt, sent as the only user content

        Returns:
            Raw generated text

        Raises:
            UpstreamError: If no API key is configured, the call fails, or the
                response carries no text
        """
        if self.client is None:
            raise UpstreamError("API key not configured", GEMINI_SERVICE)

        contents = [
            types.Content(role="user", parts=[types.Part.from_text(text=prompt)])
        ]
        config = types.GenerateContentConfig(
            temperature=self.config.temperature,
            max_output_tokens=self.config.max_tokens,
            system_instruction=self.config.instructions or None,
        )

        logger.debug(
            f"LLM Request: {self.config.model} - Temperature: {self.config.temperature}\n{prompt}"
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=self.config.model,
                contents=contents,
                config=config,
            )
        except errors.APIError as e:
            raise UpstreamError(
                e.message or "Request rejected",
                GEMINI_SERVICE,
                status_code=e.code,
                original_error=e,
            ) from e
        except Exception as e:
            raise UpstreamError(
                "Request failed", GEMINI_SERVICE, original_error=e
            ) from e

        text = response.text
        if not text or not text.strip():
            raise UpstreamError("No content generated", GEMINI_SERVICE)

        logger.debug(f"LLM Response: {self.config.model}\n{text}")
        return text

    async def run(self, request: TripRequest) -> GenerationResult[T]:
        """
        Produce a payload for the trip, from Gemini when possible.

        Args:
            request: Validated trip request

        Returns:
            GenerationResult tagged with the source of the payload

        Raises:
            FallbackFailure: Only if the deterministic fallback itself fails
        """
        logger.info(
            f"{self.name}: generating for {request.destination} "
            f"({request.start_date} to {request.end_date}, {request.day_count} days)"
        )

        if not self.has_credentials:
            return self._fallback(request, "Gemini API key not configured")

        try:
            raw_text = await self.generate(self.build_prompt(request))
            value = self.parse(raw_text, request)
        except (UpstreamError, ParseError) as e:
            return self._fallback(request, str(e))

        logger.info(f"{self.name}: generated by {self.config.model}")
        return GenerationResult(value=value, source=GenerationSource.AI)

    def _fallback(self, request: TripRequest, reason: str) -> GenerationResult[T]:
        logger.warning(f"{self.name}: using fallback content: {reason}")
        try:
            value = self.synthesize(request)
        except Exception as e:
            logger.error(f"{self.name}: fallback synthesis failed: {e!s}")
            raise FallbackFailure("Fallback synthesis failed", original_error=e) from e
        return GenerationResult(
            value=value, source=GenerationSource.FALLBACK, fallback_reason=reason
        )
