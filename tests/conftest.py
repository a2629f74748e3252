"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Callable, Optional

import pytest

from momentum_screener.adapters.console_logger import ConsoleAuditLogger
from momentum_screener.adapters.metrics_collector import InMemoryMetricsCollector
from momentum_screener.adapters.mock_provider import MockMarketDataProvider
from momentum_screener.config.models import ScreeningConfig
from momentum_screener.domain.entities import Fundamentals
from momentum_screener.domain.value_objects import IndicatorSet
from momentum_screener.pipeline.evaluation_context import EvaluationContext
from momentum_screener.rules.chain import ScreeningRules


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def mock_provider() -> MockMarketDataProvider:
    """Create mock provider for testing."""
    return MockMarketDataProvider(seed=42)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> ScreeningConfig:
    """Create default screening configuration."""
    return ScreeningConfig()


@pytest.fixture
def default_rules() -> ScreeningRules:
    """Canonical rule chain with default thresholds."""
    return ScreeningRules.default()


@pytest.fixture
def strong_fundamentals() -> Fundamentals:
    """Fundamentals that clear the price/liquidity and beta floors."""
    return Fundamentals(
        symbol="SCN",
        company_name="Scenario Corp",
        market_cap=5e8,
        beta=1.3,
        sector="Technology",
    )


@pytest.fixture
def top_tier_indicators() -> IndicatorSet:
    """Aligned trend, moderate RSI and every momentum floor met."""
    return IndicatorSet(
        ema10=115,
        ema21=110,
        sma50=105,
        sma100=100,
        sma200=95,
        rsi14=55,
        adr14=6,
        perf_1m_pct=35,
        perf_3m_pct=65,
        perf_6m_pct=110,
    )


@pytest.fixture
def make_context(
    strong_fundamentals: Fundamentals,
    top_tier_indicators: IndicatorSet,
) -> Callable[..., EvaluationContext]:
    """
    Factory for contexts derived from the top tier scenario.

    Keyword arguments override single indicator fields; `price`,
    `market_cap` and `beta` override the price and fundamentals.
    """

    def _make(
        price: Optional[float] = 120,
        market_cap: Optional[float] = 5e8,
        beta: Optional[float] = 1.3,
        **indicator_overrides,
    ) -> EvaluationContext:
        fundamentals = strong_fundamentals.model_copy(
            update={"market_cap": market_cap, "beta": beta}
        )
        indicators = top_tier_indicators.model_copy(update=indicator_overrides)
        return EvaluationContext.from_indicators(
            "SCN", price, fundamentals, indicators
        )

    return _make
