"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files and validates using Pydantic models.
Environment variables are read here, at startup, and nowhere else.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from momentum_screener.config.models import ScreeningConfig

API_KEY_ENV_VAR = "FINNHUB_API_KEY"


class ConfigurationError(Exception):
    """Raised when the configuration cannot be used to start a run."""
    pass


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> ScreeningConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name to merge

        Returns:
            Validated ScreeningConfig object

        Raises:
            FileNotFoundError: If config file or profile doesn't exist
            ConfigurationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if profile:
            profile_dict = self._load_profile(profile)
            config_dict = self._merge_configs(config_dict, profile_dict)

        return self.load_from_dict(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ScreeningConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated ScreeningConfig object

        Raises:
            ConfigurationError: If config is invalid
        """
        try:
            return ScreeningConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def apply_env_overrides(
        self,
        config: ScreeningConfig,
        environ: Optional[Mapping[str, str]] = None,
    ) -> ScreeningConfig:
        """
        Return a copy of config with the API key taken from the environment.

        An explicit key in the YAML file wins over the environment.
        """
        environ = os.environ if environ is None else environ
        api_key = environ.get(API_KEY_ENV_VAR)
        if not api_key or config.finnhub.api_key:
            return config
        finnhub = config.finnhub.model_copy(update={"api_key": api_key})
        return config.model_copy(update={"finnhub": finnhub})

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Cannot parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a mapping")
        return data

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        """Load profile configuration."""
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._load_yaml(profile_path)

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def validate_for_provider(config: ScreeningConfig) -> None:
    """
    Check that the selected provider can be constructed.

    Raises:
        ConfigurationError: If the Finnhub provider is selected without a key
    """
    if config.provider.kind == "finnhub" and not config.finnhub.api_key:
        raise ConfigurationError(
            f"Finnhub provider selected but no API key configured "
            f"(set finnhub.api_key or {API_KEY_ENV_VAR})"
        )


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
    use_env: bool = False,
) -> ScreeningConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths
        use_env: Take the API key from the environment if the file has none

    Returns:
        Validated ScreeningConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    config = loader.load(config_path, profile)
    if use_env:
        config = loader.apply_env_overrides(config)
    return config
