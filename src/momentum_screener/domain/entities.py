"""
Core Domain Entities.

This module defines the fundamental entities of the Momentum Screener domain:
company fundamentals, the per-symbol screening outcome and the report that
collects accepted candidates.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from momentum_screener.domain.value_objects import IndicatorSet


class ScreenCategory(str, Enum):
    """Classification of a screened symbol."""

    TOP_TIER = "top_tier"
    EMERGING = "emerging"
    REJECTED = "rejected"


class RejectionReason(str, Enum):
    """Identity of the stage that rejected a symbol."""

    DATA_UNAVAILABLE = "data unavailable"
    PRICE_LIQUIDITY = "price/liquidity gate"
    VOLATILITY = "volatility/beta gate"
    TREND_ALIGNMENT = "trend alignment gate"
    OVERBOUGHT = "overbought gate"
    INSUFFICIENT_MOMENTUM = "insufficient momentum"


class Fundamentals(BaseModel):
    """Company profile data. Unknown values stay None."""

    symbol: str = Field(..., description="Ticker symbol")
    company_name: Optional[str] = Field(default=None, description="Company name")
    market_cap: Optional[float] = Field(
        default=None, ge=0, allow_inf_nan=False, description="Market cap in USD"
    )
    beta: Optional[float] = Field(default=None, allow_inf_nan=False)
    sector: Optional[str] = Field(default=None, description="Industry sector")

    model_config = {"frozen": True}


class RuleDecision(BaseModel):
    """Result of running the rule chain for one symbol."""

    category: ScreenCategory
    reason: Optional[RejectionReason] = None
    detail: str = ""

    model_config = {"frozen": True}

    @property
    def accepted(self) -> bool:
        return self.category != ScreenCategory.REJECTED

    @classmethod
    def reject(cls, reason: RejectionReason, detail: str = "") -> "RuleDecision":
        return cls(category=ScreenCategory.REJECTED, reason=reason, detail=detail)


class CandidateRecord(BaseModel):
    """One row of an output bucket."""

    symbol: str
    company_name: Optional[str] = None
    price: float
    perf_1m_pct: float
    perf_3m_pct: float
    perf_6m_pct: Optional[float] = None
    market_cap: Optional[float] = None
    sector: Optional[str] = None
    rsi: Optional[float] = None
    beta: Optional[float] = None
    category: ScreenCategory

    model_config = {"frozen": True}


class ScreenOutcome(BaseModel):
    """Classification of one symbol in one pipeline run."""

    symbol: str
    fundamentals: Optional[Fundamentals] = None
    indicators: Optional[IndicatorSet] = None
    price: Optional[float] = None
    category: ScreenCategory
    rejection_reason: Optional[RejectionReason] = None
    rejection_detail: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _reason_iff_rejected(self) -> "ScreenOutcome":
        rejected = self.category == ScreenCategory.REJECTED
        if rejected and self.rejection_reason is None:
            raise ValueError("rejected outcome requires a rejection_reason")
        if not rejected and self.rejection_reason is not None:
            raise ValueError("accepted outcome must not carry a rejection_reason")
        return self

    @property
    def is_accepted(self) -> bool:
        return self.category != ScreenCategory.REJECTED

    def to_candidate(self) -> CandidateRecord:
        """
        Build the output row for an accepted outcome.

        Raises:
            ValueError: If the outcome was rejected
        """
        if not self.is_accepted or self.indicators is None or self.price is None:
            raise ValueError(f"{self.symbol} is not an accepted candidate")

        fundamentals = self.fundamentals or Fundamentals(symbol=self.symbol)
        return CandidateRecord(
            symbol=self.symbol,
            company_name=fundamentals.company_name,
            price=self.price,
            perf_1m_pct=self.indicators.perf_1m_pct,
            perf_3m_pct=self.indicators.perf_3m_pct,
            perf_6m_pct=self.indicators.perf_6m_pct,
            market_cap=fundamentals.market_cap,
            sector=fundamentals.sector,
            rsi=self.indicators.rsi14,
            beta=fundamentals.beta,
            category=self.category,
        )


class ScreeningReport(BaseModel):
    """The two output buckets of a screening run plus a run summary."""

    top_tier_stocks: List[CandidateRecord] = Field(default_factory=list)
    emerging_momentum_stocks: List[CandidateRecord] = Field(default_factory=list)
    rejection_counts: Dict[str, int] = Field(
        default_factory=dict, description="Rejection reason -> symbol count"
    )
    evaluated_count: int = Field(default=0, ge=0)
    metrics: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def accepted_count(self) -> int:
        return len(self.top_tier_stocks) + len(self.emerging_momentum_stocks)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation for a presentation layer."""
        return {
            "top_tier_stocks": [
                c.model_dump(mode="json") for c in self.top_tier_stocks
            ],
            "emerging_momentum_stocks": [
                c.model_dump(mode="json") for c in self.emerging_momentum_stocks
            ],
            "summary": {
                "evaluated": self.evaluated_count,
                "accepted": self.accepted_count,
                "rejected": self.rejection_counts,
                **self.metadata,
            },
        }
