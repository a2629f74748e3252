"""
Pipeline Factory - Wires Providers, Rules and Adapters from Config.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests

from momentum_screener.adapters.console_logger import ConsoleAuditLogger
from momentum_screener.adapters.finnhub_provider import (
    FinnhubClient,
    FinnhubMarketDataProvider,
    FinnhubSymbolSource,
)
from momentum_screener.adapters.metrics_collector import InMemoryMetricsCollector
from momentum_screener.adapters.mock_provider import MockMarketDataProvider
from momentum_screener.config.loader import validate_for_provider
from momentum_screener.config.models import ScreeningConfig
from momentum_screener.interfaces.audit_logger import AuditLogger
from momentum_screener.interfaces.metrics_collector import MetricsCollector
from momentum_screener.interfaces.providers import SymbolSource
from momentum_screener.pipeline.screening_pipeline import ScreeningPipeline
from momentum_screener.rules.chain import ScreeningRules

logger = logging.getLogger(__name__)


def create_pipeline(
    config: ScreeningConfig,
    audit_logger: Optional[AuditLogger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
    session: Optional[requests.Session] = None,
) -> Tuple[ScreeningPipeline, SymbolSource]:
    """
    Build a pipeline and its symbol source.

    Args:
        config: Validated configuration
        audit_logger: Defaults to a non-verbose ConsoleAuditLogger
        metrics_collector: Defaults to an InMemoryMetricsCollector
        session: HTTP session for the Finnhub provider

    Returns:
        Tuple of (pipeline, symbol source)

    Raises:
        ConfigurationError: If the selected provider cannot be constructed
    """
    validate_for_provider(config)

    if config.provider.kind == "mock":
        mock = MockMarketDataProvider(seed=config.provider.mock_seed)
        price_provider = fundamentals_provider = mock
        symbol_source: SymbolSource = mock
    else:
        client = FinnhubClient(config.finnhub, session=session)
        price_provider = fundamentals_provider = FinnhubMarketDataProvider(client)
        symbol_source = FinnhubSymbolSource(client)

    logger.info(f"Using {config.provider.kind} provider")

    pipeline = ScreeningPipeline(
        price_provider=price_provider,
        fundamentals_provider=fundamentals_provider,
        rules=ScreeningRules.default(config.rules),
        config=config,
        audit_logger=audit_logger or ConsoleAuditLogger(verbose=False),
        metrics_collector=metrics_collector or InMemoryMetricsCollector(),
    )
    return pipeline, symbol_source
