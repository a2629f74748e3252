"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for the Momentum Screener.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Fundamentals: Company profile data (market cap, beta, sector)
    - ScreenOutcome: Classification of one symbol in one run
    - CandidateRecord: Output row for an accepted candidate
    - ScreeningReport: The two output buckets plus run summary

Value Objects:
    - PriceBar / PriceSeries: Ordered daily OHLCV history
    - IndicatorSet: Derived indicators, each possibly absent

Design Principles:
    - Immutable (frozen pydantic models)
    - Missing data stays None, never defaults to zero
    - No infrastructure dependencies
"""

from momentum_screener.domain.entities import (
    CandidateRecord,
    Fundamentals,
    RejectionReason,
    RuleDecision,
    ScreenCategory,
    ScreenOutcome,
    ScreeningReport,
)
from momentum_screener.domain.value_objects import (
    IndicatorSet,
    PriceBar,
    PriceSeries,
)

__all__ = [
    "CandidateRecord",
    "Fundamentals",
    "IndicatorSet",
    "PriceBar",
    "PriceSeries",
    "RejectionReason",
    "RuleDecision",
    "ScreenCategory",
    "ScreenOutcome",
    "ScreeningReport",
]
