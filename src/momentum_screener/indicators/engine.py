"""
Indicator Engine - Pure Technical Indicator Functions.

Every function takes a chronologically ordered PriceSeries and returns a
scalar for the most recent bar, or None when the series is too short.
Functions never raise and never substitute a default number for missing
history; callers must treat None as disqualifying.

Indicators:
    - sma: Simple moving average of closes
    - ema: Exponential moving average seeded by the SMA of the first bars
    - rsi: Relative strength index from trailing mean gain/loss
    - adr: Average daily range, (high - low) / low in percent
    - performance: Percent change over a lookback window
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from momentum_screener.domain.value_objects import IndicatorSet, PriceSeries

logger = logging.getLogger(__name__)

# Trading-day lookbacks for the performance horizons
ONE_MONTH = 21
THREE_MONTHS = 63
SIX_MONTHS = 126

RSI_PERIOD = 14
ADR_PERIOD = 14


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _sma_of(closes: List[float], period: int) -> Optional[float]:
    if period < 1 or len(closes) < period:
        return None
    return _mean(closes[-period:])


def sma(series: PriceSeries, period: int) -> Optional[float]:
    """Mean of the last `period` closes."""
    return _sma_of(series.closes, period)


def ema(series: PriceSeries, period: int) -> Optional[float]:
    """
    Exponential moving average of closes.

    The seed is the SMA of the first `period` closes; the recurrence
    ema_i = close_i * k + ema_{i-1} * (1 - k), k = 2 / (period + 1),
    then runs over the remaining bars in chronological order.
    """
    closes = series.closes
    value = _sma_of(closes[:period], period)
    if value is None:
        return None

    k = 2 / (period + 1)
    for close in closes[period:]:
        value = close * k + value * (1 - k)
    return value


def rsi(series: PriceSeries, period: int = RSI_PERIOD) -> Optional[float]:
    """
    Relative strength index over the trailing `period` daily changes.

    Returns 100 when there was no loss in the window.
    """
    closes = series.closes
    if period < 1 or len(closes) < period + 1:
        return None

    window = closes[-(period + 1):]
    changes = [current - previous for previous, current in zip(window, window[1:])]
    avg_gain = sum(c for c in changes if c > 0) / period
    avg_loss = sum(-c for c in changes if c < 0) / period

    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100 - 100 / (1 + rs)


def adr(series: PriceSeries, period: int = ADR_PERIOD) -> Optional[float]:
    """Average daily range over the last `period` bars, in percent of the low."""
    if period < 1 or len(series) < period:
        return None
    return _mean([bar.range_pct for bar in series.bars[-period:]])


def performance(series: PriceSeries, lookback_days: int) -> Optional[float]:
    """Percent change from the close `lookback_days` bars ago to the latest close."""
    closes = series.closes
    if lookback_days < 1 or len(closes) <= lookback_days:
        return None
    then = closes[-(lookback_days + 1)]
    now = closes[-1]
    return (now - then) / then * 100


def compute_indicators(series: PriceSeries) -> IndicatorSet:
    """Compute the full IndicatorSet for a series."""
    indicators = IndicatorSet(
        ema10=ema(series, 10),
        ema21=ema(series, 21),
        sma50=sma(series, 50),
        sma100=sma(series, 100),
        sma200=sma(series, 200),
        rsi14=rsi(series, RSI_PERIOD),
        adr14=adr(series, ADR_PERIOD),
        perf_1m_pct=performance(series, ONE_MONTH),
        perf_3m_pct=performance(series, THREE_MONTHS),
        perf_6m_pct=performance(series, SIX_MONTHS),
    )
    if not indicators.is_complete:
        logger.debug(
            f"{series.symbol}: {len(series)} bars, missing {indicators.missing_fields}"
        )
    return indicators
