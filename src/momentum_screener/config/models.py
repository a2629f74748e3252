"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class RuleThresholds(BaseModel):
    """Thresholds of the screening rule chain. Each can be overridden alone."""

    min_price: float = Field(default=1.0, ge=0)
    min_market_cap: float = Field(default=300_000_000, ge=0)
    min_beta: float = Field(default=1.1)
    min_adr_pct: float = Field(default=5.0, ge=0)
    rsi_overbought_ceiling: float = Field(default=70.0, ge=0, le=100)
    perf_1m_floor: float = Field(default=30.0)
    perf_3m_floor: float = Field(default=60.0)
    perf_6m_floor: float = Field(default=100.0)


class PipelineSettings(BaseModel):
    """Per-run orchestration settings."""

    min_history_bars: int = Field(default=126, ge=1)
    max_workers: int = Field(default=8, ge=1, le=64)
    symbol_limit: Optional[int] = Field(default=150, ge=1)
    sort_by_symbol: bool = False


class ProviderSettings(BaseModel):
    """Which data provider implementation to wire in."""

    kind: Literal["finnhub", "mock"] = "finnhub"
    mock_seed: int = 42


class FinnhubConfig(BaseModel):
    """Connection settings for the Finnhub REST API."""

    api_key: Optional[str] = Field(default=None, repr=False)
    base_url: str = "https://finnhub.io/api/v1"
    timeout_seconds: float = Field(default=10.0, gt=0)
    requests_per_minute: int = Field(default=60, ge=1)
    history_calendar_days: int = Field(default=400, ge=30)
    exchange: str = "US"


class ScreeningConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    rules: RuleThresholds = Field(default_factory=RuleThresholds)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    finnhub: FinnhubConfig = Field(default_factory=FinnhubConfig)
