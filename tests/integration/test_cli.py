"""
Integration Tests for the command-line entry point and pipeline factory.

Tests cover:
    - End-to-end run over the mock provider, JSON on stdout
    - Profiles and overrides from the command line
    - Startup failures mapped to exit codes
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from momentum_screener.adapters.finnhub_provider import (
    FinnhubMarketDataProvider,
    FinnhubSymbolSource,
)
from momentum_screener.adapters.mock_provider import MockMarketDataProvider
from momentum_screener.cli import build_config, main, parse_args
from momentum_screener.config.loader import API_KEY_ENV_VAR, ConfigurationError
from momentum_screener.config.models import ScreeningConfig
from momentum_screener.factory import create_pipeline

REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG = REPO_ROOT / "config" / "default.yaml"


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)


class TestCli:
    """Test cases for main()."""

    def test_mock_run_prints_report(self, capsys: pytest.CaptureFixture) -> None:
        """
        SCENARIO: Run against the mock provider
        EXPECTED: Exit code 0, JSON report on stdout with ROCKET in top tier
        """
        # Act
        exit_code = main(["--config", str(DEFAULT_CONFIG), "--mock", "--sorted"])

        # Assert
        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert "ROCKET" in [c["symbol"] for c in payload["top_tier_stocks"]]
        assert payload["summary"]["evaluated"] == 14

    def test_explicit_symbols(self, capsys: pytest.CaptureFixture) -> None:
        exit_code = main(["--mock", "--symbols", "ROCKET", "PENNY"])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["summary"]["evaluated"] == 2
        assert payload["summary"]["rejected"] == {"price/liquidity gate": 1}

    def test_output_file(self, tmp_path: Path) -> None:
        target = tmp_path / "report.json"

        exit_code = main(["--mock", "--symbols", "ROCKET", "--output", str(target)])

        assert exit_code == 0
        payload = json.loads(target.read_text(encoding="utf-8"))
        assert payload["top_tier_stocks"][0]["symbol"] == "ROCKET"

    def test_missing_api_key_exit_code(self) -> None:
        """
        SCENARIO: Finnhub provider selected without FINNHUB_API_KEY
        EXPECTED: Exit code 2 before any request
        """
        assert main(["--config", str(DEFAULT_CONFIG)]) == 2

    def test_missing_profile_exit_code(self) -> None:
        assert main(["--config", str(DEFAULT_CONFIG), "--profile", "nope", "--mock"]) == 2

    @pytest.mark.parametrize("limit", ["-1", "0"])
    def test_invalid_limit_exit_code(
        self, limit: str, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: --limit below 1
        EXPECTED: Exit code 2, nothing screened
        """
        assert main(["--mock", "--limit", limit]) == 2
        assert capsys.readouterr().out == ""

    def test_profile_without_config_exit_code(self) -> None:
        assert main(["--profile", "aggressive", "--mock"]) == 2

    def test_http_session_closed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        SCENARIO: Finnhub run whose symbol listing is unusable
        EXPECTED: Exit code 1, HTTP session still closed
        """
        # Arrange
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")
        session = MagicMock()
        session.__enter__.return_value = session
        session.get.return_value.json.return_value = {"error": "bad"}
        monkeypatch.setattr("momentum_screener.cli.requests.Session", lambda: session)

        # Act
        exit_code = main(["--config", str(DEFAULT_CONFIG)])

        # Assert
        assert exit_code == 1
        assert session.get.call_args.args[0].endswith("/stock/symbol")
        session.__exit__.assert_called_once()


class TestBuildConfig:
    """Test cases for command-line config assembly."""

    def test_defaults_without_file(self) -> None:
        config = build_config(parse_args([]))

        assert config.rules == ScreeningConfig().rules

    def test_profile_and_overrides(self) -> None:
        args = parse_args(
            [
                "--config", str(DEFAULT_CONFIG),
                "--profile", "aggressive",
                "--limit", "5",
                "--sorted",
                "--mock",
            ]
        )

        config = build_config(args)

        assert config.rules.perf_1m_floor == 20.0
        assert config.pipeline.symbol_limit == 5
        assert config.pipeline.sort_by_symbol is True
        assert config.provider.kind == "mock"

    def test_env_key_applied(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")

        config = build_config(parse_args(["--config", str(DEFAULT_CONFIG)]))

        assert config.finnhub.api_key == "env-key"

    def test_invalid_limit_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            build_config(parse_args(["--mock", "--limit", "-1"]))

    def test_profile_requires_config(self) -> None:
        with pytest.raises(ConfigurationError):
            build_config(parse_args(["--profile", "aggressive"]))


class TestFactory:
    """Test cases for create_pipeline."""

    def test_mock_wiring(self) -> None:
        config = ScreeningConfig.model_validate({"provider": {"kind": "mock"}})

        pipeline, source = create_pipeline(config)

        assert isinstance(pipeline.price_provider, MockMarketDataProvider)
        assert source is pipeline.price_provider
        assert pipeline.rules.stage_names[0] == "price_liquidity_gate"

    def test_finnhub_wiring(self) -> None:
        config = ScreeningConfig.model_validate({"finnhub": {"api_key": "k"}})

        pipeline, source = create_pipeline(config)

        assert isinstance(pipeline.price_provider, FinnhubMarketDataProvider)
        assert pipeline.fundamentals_provider is pipeline.price_provider
        assert isinstance(source, FinnhubSymbolSource)

    def test_finnhub_without_key(self) -> None:
        with pytest.raises(ConfigurationError):
            create_pipeline(ScreeningConfig())
