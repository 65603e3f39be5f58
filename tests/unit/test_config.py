"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from wayfarer.config import (
    APIConfig,
    GenerationModelConfig,
    LogLevel,
    SystemConfig,
    WayfarerConfig,
    initialize_config,
)


def test_api_config_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
    monkeypatch.setenv("GEOAPIFY_API_KEY", "")
    monkeypatch.setenv("DYNAMODB_TABLE_NAME", "trips")
    monkeypatch.delenv("DYNAMODB_ENDPOINT", raising=False)

    api = APIConfig.from_env()
    assert api.gemini_api_key == "gemini-key"
    assert api.geoapify_api_key is None
    assert api.dynamodb_table_name == "trips"
    assert api.dynamodb_endpoint is None
    assert api.missing_optional_keys() == ["GEOAPIFY_API_KEY"]


def test_api_config_only_declares_used_keys():
    assert set(APIConfig.model_fields) == {
        "gemini_api_key",
        "geoapify_api_key",
        "aws_region",
        "dynamodb_table_name",
        "dynamodb_endpoint",
    }


def test_generation_model_from_env(monkeypatch):
    monkeypatch.setenv("ITINERARY_MODEL", "gemini-2.5-pro")
    monkeypatch.setenv("ITINERARY_TEMPERATURE", "0.3")
    monkeypatch.setenv("ITINERARY_MAX_TOKENS", "4096")

    model = GenerationModelConfig.from_env("ITINERARY")
    assert model.name == "gemini-2.5-pro"
    assert model.temperature == 0.3
    assert model.max_tokens == 4096


def test_generation_model_defaults(monkeypatch):
    for name in ("PACKING_MODEL", "PACKING_TEMPERATURE", "PACKING_MAX_TOKENS"):
        monkeypatch.delenv(name, raising=False)

    model = GenerationModelConfig.from_env("PACKING")
    assert model.name == "gemini-2.5-flash"
    assert model.temperature == 0.7
    assert model.max_tokens is None


def test_generation_model_temperature_bounds():
    with pytest.raises(ValidationError):
        GenerationModelConfig(temperature=1.5)


def test_system_config_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("MOCK_SEED", "42")

    system = SystemConfig.from_env()
    assert system.log_level is LogLevel.DEBUG
    assert system.mock_seed == 42


def test_config_fills_generation_models(test_config):
    config = WayfarerConfig(api=test_config.api, system=test_config.system)
    assert set(config.generation_models) == {"itinerary", "packing"}
    assert config.get_generation_model("unknown").name == "gemini-2.5-flash"


def test_validate_missing_keys_is_not_an_error(test_config):
    assert test_config.validate() is True


def test_validate_empty_table_name(test_config):
    test_config.api.dynamodb_table_name = ""
    assert test_config.validate() is False
    with pytest.raises(WayfarerConfig.ConfigurationError):
        test_config.validate(raise_error=True)


def test_initialize_config_missing_file():
    with pytest.raises(FileNotFoundError):
        initialize_config("/nonexistent/.env")
