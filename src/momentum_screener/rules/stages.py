"""
Rule Stage Implementations.

The gates of the screening rule chain, in canonical order:
    1. PriceLiquidityGate: price and market cap floors
    2. VolatilityGate: beta and average daily range floors
    3. TrendAlignmentGate: price > ema10 > ema21 > sma50 > sma100 > sma200
    4. OverboughtGate: RSI strictly below the ceiling

followed by the MomentumClassifier, which sorts survivors into top tier,
emerging or rejected.

Comparison operators are part of the contract: floors on price and market
cap are exclusive, floors on beta, ADR and performance are inclusive, and
the RSI ceiling is exclusive. An absent value fails its check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from momentum_screener.config.models import RuleThresholds
from momentum_screener.domain.entities import (
    RejectionReason,
    RuleDecision,
    ScreenCategory,
)

if TYPE_CHECKING:
    from momentum_screener.pipeline.evaluation_context import EvaluationContext


class PriceLiquidityGate:
    """Reject penny stocks and small caps. Consults no indicator."""

    def __init__(self, thresholds: RuleThresholds) -> None:
        self.thresholds = thresholds

    @property
    def name(self) -> str:
        return "price_liquidity_gate"

    @property
    def reason(self) -> RejectionReason:
        return RejectionReason.PRICE_LIQUIDITY

    def check(self, context: "EvaluationContext") -> Tuple[bool, str]:
        price = context.price
        if price is None:
            return False, "price unknown"
        if not price > self.thresholds.min_price:
            return False, f"price={price:.2f} <= min={self.thresholds.min_price:.2f}"

        market_cap = context.fundamentals.market_cap
        if market_cap is None:
            return False, "market_cap unknown"
        if not market_cap > self.thresholds.min_market_cap:
            return (
                False,
                f"market_cap={market_cap:.3g} <= min={self.thresholds.min_market_cap:.3g}",
            )

        return True, ""


class VolatilityGate:
    """Require a high-beta, wide-ranging stock."""

    def __init__(self, thresholds: RuleThresholds) -> None:
        self.thresholds = thresholds

    @property
    def name(self) -> str:
        return "volatility_gate"

    @property
    def reason(self) -> RejectionReason:
        return RejectionReason.VOLATILITY

    def check(self, context: "EvaluationContext") -> Tuple[bool, str]:
        beta = context.fundamentals.beta
        if beta is None:
            return False, "beta unknown"
        if beta < self.thresholds.min_beta:
            return False, f"beta={beta:.2f} < min={self.thresholds.min_beta:.2f}"

        adr14 = context.indicators.adr14
        if adr14 is None:
            return False, "adr14 unavailable"
        if adr14 < self.thresholds.min_adr_pct:
            return False, f"adr14={adr14:.2f}% < min={self.thresholds.min_adr_pct:.2f}%"

        return True, ""


class TrendAlignmentGate:
    """Require the full descending moving-average stack."""

    @property
    def name(self) -> str:
        return "trend_alignment_gate"

    @property
    def reason(self) -> RejectionReason:
        return RejectionReason.TREND_ALIGNMENT

    def check(self, context: "EvaluationContext") -> Tuple[bool, str]:
        ind = context.indicators
        levels: List[Tuple[str, Optional[float]]] = [
            ("price", context.price),
            ("ema10", ind.ema10),
            ("ema21", ind.ema21),
            ("sma50", ind.sma50),
            ("sma100", ind.sma100),
            ("sma200", ind.sma200),
        ]

        for label, value in levels:
            if value is None:
                return False, f"{label} unavailable"

        for (upper_label, upper), (lower_label, lower) in zip(levels, levels[1:]):
            if not upper > lower:
                return False, f"{upper_label}={upper:.2f} <= {lower_label}={lower:.2f}"

        return True, ""


class OverboughtGate:
    """Reject stocks whose RSI is at or above the ceiling."""

    def __init__(self, thresholds: RuleThresholds) -> None:
        self.thresholds = thresholds

    @property
    def name(self) -> str:
        return "overbought_gate"

    @property
    def reason(self) -> RejectionReason:
        return RejectionReason.OVERBOUGHT

    def check(self, context: "EvaluationContext") -> Tuple[bool, str]:
        rsi14 = context.indicators.rsi14
        if rsi14 is None:
            return False, "rsi14 unavailable"
        ceiling = self.thresholds.rsi_overbought_ceiling
        if rsi14 >= ceiling:
            return False, f"rsi14={rsi14:.1f} >= ceiling={ceiling:.1f}"
        return True, ""


class MomentumClassifier:
    """Final stage: classify by 1/3/6 month performance."""

    def __init__(self, thresholds: RuleThresholds) -> None:
        self.thresholds = thresholds

    @property
    def name(self) -> str:
        return "momentum_classifier"

    def classify(self, context: "EvaluationContext") -> RuleDecision:
        ind = context.indicators
        t = self.thresholds

        horizons = (ind.perf_1m_pct, ind.perf_3m_pct, ind.perf_6m_pct)
        if any(p is None for p in horizons):
            return RuleDecision.reject(
                RejectionReason.INSUFFICIENT_MOMENTUM,
                "performance history incomplete",
            )

        meets_1m = _at_least(ind.perf_1m_pct, t.perf_1m_floor)
        meets_3m = _at_least(ind.perf_3m_pct, t.perf_3m_floor)
        meets_6m = _at_least(ind.perf_6m_pct, t.perf_6m_floor)

        if meets_1m and meets_3m and meets_6m:
            return RuleDecision(category=ScreenCategory.TOP_TIER)
        if meets_1m and meets_3m:
            return RuleDecision(category=ScreenCategory.EMERGING)

        return RuleDecision.reject(
            RejectionReason.INSUFFICIENT_MOMENTUM,
            f"perf 1m={_fmt(ind.perf_1m_pct)} 3m={_fmt(ind.perf_3m_pct)} "
            f"6m={_fmt(ind.perf_6m_pct)}",
        )


def _at_least(value: Optional[float], floor: float) -> bool:
    return value is not None and value >= floor


def _fmt(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.1f}%"
