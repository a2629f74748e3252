"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Momentum Screener:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - ScreeningConfig: Root configuration object
    - RuleThresholds: Rule chain thresholds
    - PipelineSettings: History floor, worker count, symbol limit
    - ProviderSettings: Live or mock data provider
    - FinnhubConfig: API key, base URL, timeouts, rate limit

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (conservative, aggressive)
    - Environment read once at startup, then passed explicitly
"""

from momentum_screener.config.loader import (
    ConfigLoader,
    ConfigurationError,
    load_config,
    validate_for_provider,
)
from momentum_screener.config.models import (
    FinnhubConfig,
    PipelineSettings,
    ProviderSettings,
    RuleThresholds,
    ScreeningConfig,
)

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "FinnhubConfig",
    "PipelineSettings",
    "ProviderSettings",
    "RuleThresholds",
    "ScreeningConfig",
    "load_config",
    "validate_for_provider",
]
