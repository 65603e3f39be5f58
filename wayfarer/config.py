"""
Configuration management for Wayfarer.

This module loads configuration from environment variables (and an optional
.env file): API keys for the upstream services, model settings for the
generation agents, and system-wide defaults. The configuration is resolved
once at start-up and injected into agents and services.
"""

import os
from dataclasses import dataclass, field
from enum import Enum

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class LogLevel(str, Enum):
    """Log levels supported by the system."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class GenerationModelConfig(BaseModel):
    """Configuration for a generation agent's model."""

    name: str = Field(default="gemini-2.5-flash", description="Model name to use")
    temperature: float = Field(default=0.7, description="Model temperature")
    max_tokens: int | None = Field(default=None, description="Max tokens to generate")

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, value: float) -> float:
        """Validate temperature is within reasonable bounds."""
        if not (0.0 <= value <= 1.0):
            raise ValueError(f"Temperature must be between 0.0 and 1.0, got {value}")
        return value

    @classmethod
    def from_env(cls, prefix: str = "") -> "GenerationModelConfig":
        """Create a GenerationModelConfig from environment variables."""
        prefix = f"{prefix}_" if prefix else ""
        return cls(
            name=os.getenv(f"{prefix}MODEL", "gemini-2.5-flash"),
            temperature=float(os.getenv(f"{prefix}TEMPERATURE", "0.7")),
            max_tokens=int(os.getenv(f"{prefix}MAX_TOKENS", "0")) or None,
        )


class APIConfig(BaseModel):
    """Configuration for external APIs."""

    gemini_api_key: str | None = Field(
        default=None, description="Gemini API key (absent means fallback content)"
    )
    geoapify_api_key: str | None = Field(
        default=None, description="Geoapify Places API key"
    )
    aws_region: str = Field(default="ap-northeast-1", description="AWS region")
    dynamodb_table_name: str = Field(
        default="wayfarer-trips", description="DynamoDB table name"
    )
    dynamodb_endpoint: str | None = Field(
        default=None, description="DynamoDB endpoint URL (for local dev)"
    )

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Create an APIConfig from environment variables."""
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            geoapify_api_key=os.getenv("GEOAPIFY_API_KEY") or None,
            aws_region=os.getenv("AWS_REGION", "ap-northeast-1"),
            dynamodb_table_name=os.getenv("DYNAMODB_TABLE_NAME", "wayfarer-trips"),
            dynamodb_endpoint=os.getenv("DYNAMODB_ENDPOINT"),
        )

    def missing_optional_keys(self) -> list[str]:
        """Return the names of optional API keys that are not configured."""
        missing = []
        if not self.gemini_api_key:
            missing.append("GEMINI_API_KEY")
        if not self.geoapify_api_key:
            missing.append("GEOAPIFY_API_KEY")
        return missing


class SystemConfig(BaseModel):
    """System-wide configuration."""

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    environment: str = Field(
        default="development",
        description="Environment (development, staging, production)",
    )
    mock_seed: int | None = Field(
        default=None,
        description="Optional seed mixed into every synthetic-data generator",
    )

    @classmethod
    def from_env(cls) -> "SystemConfig":
        """Create a SystemConfig from environment variables."""
        mock_seed = os.getenv("MOCK_SEED")
        return cls(
            log_level=LogLevel(os.getenv("LOG_LEVEL", "INFO").upper()),
            environment=os.getenv("ENVIRONMENT", "development"),
            mock_seed=int(mock_seed) if mock_seed else None,
        )


@dataclass
class WayfarerConfig:
    """Main configuration class for Wayfarer."""

    api: APIConfig = field(default_factory=APIConfig.from_env)
    system: SystemConfig = field(default_factory=SystemConfig.from_env)
    generation_models: dict[str, GenerationModelConfig] = field(default_factory=dict)

    def __post_init__(self):
        """Initialize generation models if not provided."""
        if not self.generation_models:
            self.generation_models = {
                "itinerary": GenerationModelConfig.from_env("ITINERARY"),
                "packing": GenerationModelConfig.from_env("PACKING"),
            }

    class ConfigurationError(Exception):
        """Exception raised for configuration validation errors."""

        pass

    def validate(self, raise_error: bool = False) -> bool:
        """
        Validate the configuration.

        Missing API keys are not errors: every upstream service degrades to
        synthetic content. They are reported as warnings.

        Args:
            raise_error: If True, raise ConfigurationError instead of returning False

        Returns:
            True if configuration is valid, False otherwise

        Raises:
            ConfigurationError: If raise_error is True and validation fails
        """
        try:
            if not self.api.dynamodb_table_name:
                raise ValueError("DynamoDB table name must not be empty")

            missing = self.api.missing_optional_keys()
            if missing:
                logger.warning(
                    f"Optional API keys missing: {', '.join(missing)}. "
                    f"Fallback content will be served for those features."
                )
            return True

        except ValueError as e:
            logger.error(f"Configuration validation failed: {e!s}")
            if raise_error:
                raise self.ConfigurationError(
                    f"Configuration validation failed: {e!s}"
                ) from e
            return False

    def get_generation_model(self, kind: str) -> GenerationModelConfig:
        """
        Get model configuration for a generation agent.

        Args:
            kind: Agent kind ("itinerary" or "packing")

        Returns:
            GenerationModelConfig for the requested kind, or a default if not found
        """
        return self.generation_models.get(kind, GenerationModelConfig())


# Global configuration instance
config = WayfarerConfig()


def initialize_config(
    custom_config_path: str | None = None,
    validate: bool = True,
    raise_on_error: bool = False,
) -> WayfarerConfig:
    """
    Initialize and validate the configuration.

    Args:
        custom_config_path: Path to a custom .env file to load
        validate: Whether to validate the configuration
        raise_on_error: Whether to raise an exception on validation failure

    Returns:
        Initialized and validated configuration object

    Raises:
        WayfarerConfig.ConfigurationError: If validation fails and
            raise_on_error is True
        FileNotFoundError: If custom_config_path is provided but does not exist
    """
    if custom_config_path:
        if not os.path.exists(custom_config_path):
            error_msg = f"Custom configuration file not found: {custom_config_path}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        logger.info(f"Loading custom configuration from {custom_config_path}")
        load_dotenv(custom_config_path, override=True)

        # Reload in place so modules holding a reference to `config` see updates
        config.api = APIConfig.from_env()
        config.system = SystemConfig.from_env()
        config.generation_models = {}
        config.__post_init__()

    if validate:
        is_valid = config.validate(raise_error=raise_on_error)
        if not is_valid:
            logger.warning(
                "Configuration validation failed. Please check your environment "
                "variables (see DYNAMODB_TABLE_NAME)."
            )

    return config
