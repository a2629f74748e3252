"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe price history and the
indicators derived from it. They have no conceptual identity.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, computed_field, field_validator


class PriceBar(BaseModel):
    """One trading day of OHLCV data."""

    date: dt.date
    open: float = Field(gt=0, allow_inf_nan=False)
    high: float = Field(gt=0, allow_inf_nan=False)
    low: float = Field(gt=0, allow_inf_nan=False)
    close: float = Field(gt=0, allow_inf_nan=False)
    volume: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @computed_field
    @property
    def range_pct(self) -> float:
        """Daily range relative to the low, in percent."""
        return (self.high - self.low) / self.low * 100


class PriceSeries(BaseModel):
    """
    Chronologically ordered trading history of one symbol.

    Bars are strictly increasing by date. The series is built once per
    evaluation and discarded after the indicators have been computed.
    """

    symbol: str
    bars: Tuple[PriceBar, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("bars")
    @classmethod
    def _check_chronological(cls, bars: Tuple[PriceBar, ...]) -> Tuple[PriceBar, ...]:
        for previous, current in zip(bars, bars[1:]):
            if current.date <= previous.date:
                raise ValueError(
                    f"bars must be strictly increasing by date: "
                    f"{current.date} follows {previous.date}"
                )
        return bars

    @property
    def closes(self) -> List[float]:
        return [b.close for b in self.bars]

    @property
    def highs(self) -> List[float]:
        return [b.high for b in self.bars]

    @property
    def lows(self) -> List[float]:
        return [b.low for b in self.bars]

    @property
    def latest_close(self) -> Optional[float]:
        """Most recent close, None for an empty series."""
        if not self.bars:
            return None
        return self.bars[-1].close

    @property
    def last_date(self) -> Optional[dt.date]:
        if not self.bars:
            return None
        return self.bars[-1].date

    def __len__(self) -> int:
        return len(self.bars)


class IndicatorSet(BaseModel):
    """
    Indicators derived from one PriceSeries snapshot.

    A field is None when the series is too short to compute it.
    """

    ema10: Optional[float] = None
    ema21: Optional[float] = None
    sma50: Optional[float] = None
    sma100: Optional[float] = None
    sma200: Optional[float] = None
    rsi14: Optional[float] = None
    adr14: Optional[float] = None
    perf_1m_pct: Optional[float] = None
    perf_3m_pct: Optional[float] = None
    perf_6m_pct: Optional[float] = None

    model_config = {"frozen": True}

    @property
    def missing_fields(self) -> List[str]:
        """Names of indicators that could not be computed."""
        return [name for name, value in self if value is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields
