"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - series_from_closes: Build a PriceSeries from a list of closes

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Sequence

from momentum_screener.domain.value_objects import PriceBar, PriceSeries


def series_from_closes(
    closes: Sequence[float],
    symbol: str = "TEST",
    highs: Optional[Sequence[float]] = None,
    lows: Optional[Sequence[float]] = None,
    start: date = date(2023, 1, 2),
) -> PriceSeries:
    """
    Build a daily series, one bar per calendar day.

    Without explicit highs/lows each bar spans +4% / -3% around its close.
    """
    bars = []
    for i, close in enumerate(closes):
        high = highs[i] if highs is not None else close * 1.04
        low = lows[i] if lows is not None else close * 0.97
        bars.append(
            PriceBar(
                date=start + timedelta(days=i),
                open=close,
                high=high,
                low=low,
                close=close,
                volume=1_000_000,
            )
        )
    return PriceSeries(symbol=symbol, bars=tuple(bars))
