"""
Evaluation Context - Per-Symbol Data Container.

The EvaluationContext holds everything the rule chain may consult for
one symbol: the current price, the fundamentals and the IndicatorSet.

Design Notes:
    - Indicators are computed lazily on first access, so a symbol rejected
      by the price/liquidity gate never pays for indicator computation
    - Computed at most once per context
    - A failing loader yields an empty IndicatorSet (every rule fails closed)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from momentum_screener.domain.entities import Fundamentals
from momentum_screener.domain.value_objects import IndicatorSet, PriceSeries
from momentum_screener.indicators.engine import compute_indicators

logger = logging.getLogger(__name__)


class EvaluationContext:
    """
    Data a single symbol is screened against.

    Usage:
        context = EvaluationContext.from_series(series, fundamentals)
        context.indicators.ema10  # computed here, on first access
    """

    def __init__(
        self,
        symbol: str,
        price: Optional[float],
        fundamentals: Optional[Fundamentals],
        indicator_loader: Callable[[], IndicatorSet],
    ) -> None:
        """
        Initialize evaluation context.

        Args:
            symbol: Ticker symbol
            price: Current price (latest close), None if unknown
            fundamentals: Company fundamentals, None if unknown
            indicator_loader: Callback computing the IndicatorSet
        """
        self.symbol = symbol
        self.price = price
        self.fundamentals = fundamentals or Fundamentals(symbol=symbol)
        self._indicator_loader = indicator_loader
        self._indicators: Optional[IndicatorSet] = None

    @classmethod
    def from_series(
        cls,
        series: PriceSeries,
        fundamentals: Optional[Fundamentals],
    ) -> "EvaluationContext":
        """Build a context whose indicators derive from a price series."""
        return cls(
            symbol=series.symbol,
            price=series.latest_close,
            fundamentals=fundamentals,
            indicator_loader=lambda: compute_indicators(series),
        )

    @classmethod
    def from_indicators(
        cls,
        symbol: str,
        price: Optional[float],
        fundamentals: Optional[Fundamentals],
        indicators: IndicatorSet,
    ) -> "EvaluationContext":
        """Build a context around precomputed indicators."""
        return cls(symbol, price, fundamentals, lambda: indicators)

    @property
    def indicators(self) -> IndicatorSet:
        """IndicatorSet, computed on first access."""
        if self._indicators is None:
            try:
                self._indicators = self._indicator_loader()
            except Exception as e:
                logger.warning(f"Failed to compute indicators for {self.symbol}: {e}")
                self._indicators = IndicatorSet()
        return self._indicators

    @property
    def indicators_loaded(self) -> bool:
        """Check whether indicators have been computed."""
        return self._indicators is not None

    def __repr__(self) -> str:
        return (
            f"EvaluationContext(symbol={self.symbol!r}, price={self.price}, "
            f"indicators_loaded={self.indicators_loaded})"
        )
