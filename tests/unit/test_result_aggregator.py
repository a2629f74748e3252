"""
Unit Tests for ResultAggregator.

Test Aspects Covered:
    ✅ Business Logic: Partition into buckets, rejection counts
    ✅ Edge Cases: Empty input, optional symbol sort
"""

from __future__ import annotations

from typing import List

import pytest

from momentum_screener.domain.entities import (
    Fundamentals,
    RejectionReason,
    ScreenCategory,
    ScreenOutcome,
)
from momentum_screener.domain.value_objects import IndicatorSet
from momentum_screener.pipeline.aggregator import ResultAggregator


def _accepted(symbol: str, category: ScreenCategory, indicators: IndicatorSet) -> ScreenOutcome:
    return ScreenOutcome(
        symbol=symbol,
        fundamentals=Fundamentals(symbol=symbol, market_cap=1e9, beta=1.5),
        indicators=indicators,
        price=50.0,
        category=category,
    )


def _rejected(symbol: str, reason: RejectionReason) -> ScreenOutcome:
    return ScreenOutcome(
        symbol=symbol,
        category=ScreenCategory.REJECTED,
        rejection_reason=reason,
    )


@pytest.fixture
def outcomes(top_tier_indicators: IndicatorSet) -> List[ScreenOutcome]:
    return [
        _accepted("ZZZ", ScreenCategory.TOP_TIER, top_tier_indicators),
        _rejected("R1", RejectionReason.OVERBOUGHT),
        _accepted("MMM", ScreenCategory.EMERGING, top_tier_indicators),
        _accepted("AAA", ScreenCategory.TOP_TIER, top_tier_indicators),
        _rejected("R2", RejectionReason.OVERBOUGHT),
        _rejected("R3", RejectionReason.DATA_UNAVAILABLE),
    ]


class TestResultAggregator:
    """Test cases for ResultAggregator."""

    def test_partitions_outcomes(self, outcomes: List[ScreenOutcome]) -> None:
        """
        SCENARIO: Mixed accepted and rejected outcomes
        EXPECTED: Accepted rows in their bucket, rejected rows dropped
        """
        # Act
        report = ResultAggregator().aggregate(outcomes)

        # Assert
        assert [c.symbol for c in report.top_tier_stocks] == ["ZZZ", "AAA"]
        assert [c.symbol for c in report.emerging_momentum_stocks] == ["MMM"]
        assert report.evaluated_count == 6
        assert report.accepted_count == 3

    def test_counts_rejections_by_reason(self, outcomes: List[ScreenOutcome]) -> None:
        report = ResultAggregator().aggregate(outcomes)

        assert report.rejection_counts == {"overbought gate": 2, "data unavailable": 1}

    def test_sort_by_symbol(self, outcomes: List[ScreenOutcome]) -> None:
        report = ResultAggregator(sort_by_symbol=True).aggregate(outcomes)

        assert [c.symbol for c in report.top_tier_stocks] == ["AAA", "ZZZ"]

    def test_empty_input(self) -> None:
        report = ResultAggregator().aggregate([])

        assert report.top_tier_stocks == []
        assert report.emerging_momentum_stocks == []
        assert report.evaluated_count == 0
        assert report.rejection_counts == {}

    def test_carries_metrics_and_metadata(self) -> None:
        report = ResultAggregator().aggregate(
            [], metrics={"m": 1}, metadata={"correlation_id": "abc"}
        )

        assert report.metrics == {"m": 1}
        assert report.to_dict()["summary"]["correlation_id"] == "abc"
