"""
Unit Tests for Domain Value Objects and Entities.

Test Aspects Covered:
    ✅ Validation: Bar prices, chronological order, outcome consistency
    ✅ Business Logic: Candidate rows and report serialisation
    ✅ Immutability: Frozen models
"""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from momentum_screener.domain.entities import (
    Fundamentals,
    RejectionReason,
    ScreenCategory,
    ScreenOutcome,
    ScreeningReport,
)
from momentum_screener.domain.value_objects import IndicatorSet, PriceBar, PriceSeries


def _bar(day: date, close: float = 10.0) -> PriceBar:
    return PriceBar(date=day, open=close, high=close * 1.1, low=close * 0.9, close=close)


class TestPriceBar:
    """Test cases for PriceBar."""

    @pytest.mark.parametrize("close", [0.0, -1.0, float("nan"), float("inf")])
    def test_rejects_invalid_prices(self, close: float) -> None:
        with pytest.raises(ValidationError):
            PriceBar(date=date(2024, 1, 2), open=1, high=1, low=1, close=close)

    def test_rejects_negative_volume(self) -> None:
        with pytest.raises(ValidationError):
            PriceBar(date=date(2024, 1, 2), open=1, high=1, low=1, close=1, volume=-5)

    def test_range_pct(self) -> None:
        bar = PriceBar(date=date(2024, 1, 2), open=9, high=11, low=10, close=10.5)

        assert bar.range_pct == pytest.approx(10.0)

    def test_is_frozen(self) -> None:
        bar = _bar(date(2024, 1, 2))

        with pytest.raises(ValidationError):
            bar.close = 99.0


class TestPriceSeries:
    """Test cases for PriceSeries."""

    def test_accepts_increasing_dates(self) -> None:
        series = PriceSeries(
            symbol="ABC",
            bars=(_bar(date(2024, 1, 2), 10), _bar(date(2024, 1, 3), 11)),
        )

        assert len(series) == 2
        assert series.closes == [10, 11]
        assert series.latest_close == 11
        assert series.last_date == date(2024, 1, 3)

    @pytest.mark.parametrize(
        "second",
        [date(2024, 1, 1), date(2024, 1, 2)],
        ids=["out_of_order", "duplicate"],
    )
    def test_rejects_non_increasing_dates(self, second: date) -> None:
        """
        SCENARIO: Bars out of order or with a repeated date
        EXPECTED: ValidationError
        """
        with pytest.raises(ValidationError):
            PriceSeries(symbol="ABC", bars=(_bar(date(2024, 1, 2)), _bar(second)))

    def test_empty_series(self) -> None:
        series = PriceSeries(symbol="ABC")

        assert len(series) == 0
        assert series.latest_close is None
        assert series.last_date is None


class TestIndicatorSet:
    """Test cases for IndicatorSet."""

    def test_missing_fields_lists_absent_indicators(self) -> None:
        indicators = IndicatorSet(ema10=1.0, ema21=1.0)

        assert "sma200" in indicators.missing_fields
        assert "ema10" not in indicators.missing_fields
        assert not indicators.is_complete


class TestFundamentals:
    """Test cases for Fundamentals."""

    def test_unknown_values_default_to_none(self) -> None:
        fundamentals = Fundamentals(symbol="ABC")

        assert fundamentals.market_cap is None
        assert fundamentals.beta is None
        assert fundamentals.company_name is None

    def test_rejects_negative_market_cap(self) -> None:
        with pytest.raises(ValidationError):
            Fundamentals(symbol="ABC", market_cap=-1)


class TestScreenOutcome:
    """Test cases for ScreenOutcome."""

    def test_rejected_requires_reason(self) -> None:
        with pytest.raises(ValidationError):
            ScreenOutcome(symbol="ABC", category=ScreenCategory.REJECTED)

    def test_accepted_must_not_carry_reason(self) -> None:
        with pytest.raises(ValidationError):
            ScreenOutcome(
                symbol="ABC",
                category=ScreenCategory.TOP_TIER,
                rejection_reason=RejectionReason.OVERBOUGHT,
            )

    def test_to_candidate(
        self,
        strong_fundamentals: Fundamentals,
        top_tier_indicators: IndicatorSet,
    ) -> None:
        """
        SCENARIO: Accepted top tier outcome
        EXPECTED: Candidate row carries price, performance, RSI and fundamentals
        """
        # Arrange
        outcome = ScreenOutcome(
            symbol="SCN",
            fundamentals=strong_fundamentals,
            indicators=top_tier_indicators,
            price=120.0,
            category=ScreenCategory.TOP_TIER,
        )

        # Act
        candidate = outcome.to_candidate()

        # Assert
        assert candidate.symbol == "SCN"
        assert candidate.company_name == "Scenario Corp"
        assert candidate.price == 120.0
        assert candidate.perf_1m_pct == 35
        assert candidate.perf_6m_pct == 110
        assert candidate.rsi == 55
        assert candidate.beta == 1.3
        assert candidate.category == ScreenCategory.TOP_TIER

    def test_to_candidate_rejects_rejected_outcome(self) -> None:
        outcome = ScreenOutcome(
            symbol="ABC",
            category=ScreenCategory.REJECTED,
            rejection_reason=RejectionReason.DATA_UNAVAILABLE,
        )

        with pytest.raises(ValueError):
            outcome.to_candidate()


class TestScreeningReport:
    """Test cases for ScreeningReport."""

    def test_to_dict_shape(
        self,
        strong_fundamentals: Fundamentals,
        top_tier_indicators: IndicatorSet,
    ) -> None:
        # Arrange
        candidate = ScreenOutcome(
            symbol="SCN",
            fundamentals=strong_fundamentals,
            indicators=top_tier_indicators,
            price=120.0,
            category=ScreenCategory.TOP_TIER,
        ).to_candidate()
        report = ScreeningReport(
            top_tier_stocks=[candidate],
            rejection_counts={"overbought gate": 2},
            evaluated_count=3,
            metadata={"correlation_id": "abc"},
        )

        # Act
        payload = report.to_dict()

        # Assert
        assert payload["top_tier_stocks"][0]["symbol"] == "SCN"
        assert payload["top_tier_stocks"][0]["category"] == "top_tier"
        assert payload["emerging_momentum_stocks"] == []
        assert payload["summary"]["evaluated"] == 3
        assert payload["summary"]["accepted"] == 1
        assert payload["summary"]["rejected"] == {"overbought gate": 2}
        assert payload["summary"]["correlation_id"] == "abc"
