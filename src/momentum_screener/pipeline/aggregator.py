"""
Result Aggregator - Partition Outcomes into Output Buckets.

Accepted outcomes go to `top_tier_stocks` or `emerging_momentum_stocks`;
rejected outcomes are dropped and only counted by reason.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from momentum_screener.domain.entities import (
    CandidateRecord,
    ScreenCategory,
    ScreenOutcome,
    ScreeningReport,
)


class ResultAggregator:
    """Builds a ScreeningReport from per-symbol outcomes."""

    def __init__(self, sort_by_symbol: bool = False) -> None:
        """
        Initialize aggregator.

        Args:
            sort_by_symbol: Sort each bucket by symbol. Otherwise buckets keep
                the order outcomes arrive in, which is unspecified for
                concurrent runs.
        """
        self.sort_by_symbol = sort_by_symbol

    def aggregate(
        self,
        outcomes: Iterable[ScreenOutcome],
        metrics: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> ScreeningReport:
        top_tier: List[CandidateRecord] = []
        emerging: List[CandidateRecord] = []
        rejections: Counter = Counter()
        evaluated = 0

        for outcome in outcomes:
            evaluated += 1
            if outcome.category == ScreenCategory.TOP_TIER:
                top_tier.append(outcome.to_candidate())
            elif outcome.category == ScreenCategory.EMERGING:
                emerging.append(outcome.to_candidate())
            else:
                rejections[outcome.rejection_reason.value] += 1

        if self.sort_by_symbol:
            top_tier.sort(key=lambda c: c.symbol)
            emerging.sort(key=lambda c: c.symbol)

        return ScreeningReport(
            top_tier_stocks=top_tier,
            emerging_momentum_stocks=emerging,
            rejection_counts=dict(rejections),
            evaluated_count=evaluated,
            metrics=metrics or {},
            metadata=metadata or {},
        )
