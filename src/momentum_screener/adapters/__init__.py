"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package. Following the
Hexagonal Architecture (Ports & Adapters) pattern.

Providers:
    - FinnhubMarketDataProvider / FinnhubSymbolSource: Live Finnhub API
    - MockMarketDataProvider: Fake data for development/testing

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No screening logic in adapters
"""

from momentum_screener.adapters.console_logger import ConsoleAuditLogger
from momentum_screener.adapters.finnhub_provider import (
    FinnhubClient,
    FinnhubMarketDataProvider,
    FinnhubSymbolSource,
)
from momentum_screener.adapters.metrics_collector import InMemoryMetricsCollector
from momentum_screener.adapters.mock_provider import MockMarketDataProvider

__all__ = [
    "ConsoleAuditLogger",
    "FinnhubClient",
    "FinnhubMarketDataProvider",
    "FinnhubSymbolSource",
    "InMemoryMetricsCollector",
    "MockMarketDataProvider",
]
