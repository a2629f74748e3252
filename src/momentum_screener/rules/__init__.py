"""
Rules Package - Screening Rule Chain.

This package contains the gates of the screening rule chain and the
chain that runs them in order.

Stages:
    - PriceLiquidityGate: Price and market cap floors
    - VolatilityGate: Beta and average daily range floors
    - TrendAlignmentGate: Six-level moving average stack
    - OverboughtGate: RSI ceiling
    - MomentumClassifier: Top tier / emerging / insufficient momentum

Design Principles:
    - Each stage is independently testable
    - Thresholds injected via constructor
    - Synchronous and side-effect free
    - Missing data fails closed
"""

from momentum_screener.rules.chain import ScreeningRules
from momentum_screener.rules.stages import (
    MomentumClassifier,
    OverboughtGate,
    PriceLiquidityGate,
    TrendAlignmentGate,
    VolatilityGate,
)

__all__ = [
    "ScreeningRules",
    "PriceLiquidityGate",
    "VolatilityGate",
    "TrendAlignmentGate",
    "OverboughtGate",
    "MomentumClassifier",
]
