"""
Indicators Package - Pure Technical Indicator Computation.

Converts an ordered PriceSeries into the IndicatorSet consumed by the
screening rules. All functions are synchronous and side-effect free.
"""

from momentum_screener.indicators.engine import (
    ONE_MONTH,
    SIX_MONTHS,
    THREE_MONTHS,
    adr,
    compute_indicators,
    ema,
    performance,
    rsi,
    sma,
)

__all__ = [
    "ONE_MONTH",
    "THREE_MONTHS",
    "SIX_MONTHS",
    "adr",
    "compute_indicators",
    "ema",
    "performance",
    "rsi",
    "sma",
]
