"""
Momentum Screener - Technical Indicator Screening Pipeline.

Turns a list of equity tickers into two candidate lists ("top tier" and
"emerging momentum") based on price trend, volatility and multi-horizon
performance thresholds.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Ordered, short-circuiting rule chain
    - Configuration-driven thresholds via YAML

Main Components:
    - domain: Core entities (PriceSeries, Fundamentals, ScreenOutcome, etc.)
    - indicators: Pure indicator functions (SMA, EMA, RSI, ADR, performance)
    - rules: Rule stages and the screening rule chain
    - pipeline: Per-symbol orchestration and result aggregation
    - interfaces: Abstract protocols for providers, loggers, metrics
    - adapters: Infrastructure implementations (Finnhub, mock, console)
    - config: Configuration models and loaders

Example:
    >>> from momentum_screener.factory import create_pipeline
    >>> pipeline, symbols = create_pipeline(config)
    >>> report = pipeline.screen(symbols)
    >>> print(f"{len(report.top_tier_stocks)} top tier candidates")

"""

import logging

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Momentum Screener.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import momentum_screener
        >>> momentum_screener.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("momentum_screener").setLevel(level)
    # urllib3 is chatty at DEBUG when every candle request is logged
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
