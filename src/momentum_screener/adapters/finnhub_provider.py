"""
Finnhub Provider - Live Market Data over the Finnhub REST API.

Implements PriceDataProvider, FundamentalsProvider and SymbolSource on top
of a shared FinnhubClient.

Endpoints:
    - /stock/symbol:   universe of US tickers
    - /stock/candle:   daily OHLCV (resolution "D")
    - /stock/profile2: company name, industry, market cap (in millions)
    - /stock/metric:   beta (metric=all)

Design Notes:
    - API key and base URL come from FinnhubConfig, never from the environment
    - Every request is paced by a shared RateLimiter
    - Per-symbol calls are never retried and share no failure state; errors
      surface as ProviderUnavailable so the pipeline rejects that symbol only
    - Symbol listing is retried, since a run cannot start without it
"""

from __future__ import annotations

import logging
import math
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, List, Optional

import requests
from pydantic import ValidationError

from momentum_screener.config.models import FinnhubConfig
from momentum_screener.domain.entities import Fundamentals
from momentum_screener.domain.value_objects import PriceBar, PriceSeries
from momentum_screener.resilience.error_handler import (
    ErrorHandler,
    ProviderUnavailable,
    RateLimiter,
)

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60
COMMON_STOCK_TYPES = ("Common Stock", "COMMON_STOCK")


class FinnhubClient:
    """Thin, rate-limited JSON client for the Finnhub API."""

    def __init__(
        self,
        config: FinnhubConfig,
        session: Optional[requests.Session] = None,
        rate_limiter: Optional[RateLimiter] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            config: Finnhub connection settings (must carry an API key)
            session: HTTP session, created if omitted
            rate_limiter: Request pacing, built from config if omitted
            error_handler: Retry policy for the symbol listing

        Raises:
            ValueError: If config has no API key
        """
        if not config.api_key:
            raise ValueError("FinnhubConfig.api_key is required")
        self.config = config
        self._session = session or requests.Session()
        self._rate_limiter = rate_limiter or RateLimiter(config.requests_per_minute)
        self.error_handler = error_handler or ErrorHandler()

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET an endpoint and decode its JSON body.

        Raises:
            ProviderUnavailable: On network, HTTP status or decode failure
        """
        url = f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"
        query = dict(params or {})
        query["token"] = self.config.api_key

        self._rate_limiter.acquire()
        try:
            response = self._session.get(
                url, params=query, timeout=self.config.timeout_seconds
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            # RequestException covers HTTPError, Timeout and ConnectionError
            raise ProviderUnavailable(f"GET {path} failed: {e}") from e
        except ValueError as e:
            raise ProviderUnavailable(f"GET {path} returned invalid JSON: {e}") from e

    def close(self) -> None:
        self._session.close()


class FinnhubMarketDataProvider:
    """Price history and fundamentals from Finnhub."""

    def __init__(
        self,
        client: FinnhubClient,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize provider.

        Args:
            client: Shared Finnhub client
            clock: Returns the current UNIX time (injectable for tests)
        """
        self.client = client
        self._clock = clock

    def get_history(self, symbol: str) -> Optional[PriceSeries]:
        """Load daily candles covering the configured calendar window."""
        to_ts = int(self._clock())
        from_ts = to_ts - self.client.config.history_calendar_days * SECONDS_PER_DAY
        payload = self.client.get_json(
            "/stock/candle",
            {"symbol": symbol, "resolution": "D", "from": from_ts, "to": to_ts},
        )
        return parse_candles(symbol, payload)

    def get_profile(self, symbol: str) -> Optional[Fundamentals]:
        """Load company profile plus beta."""
        profile = self.client.get_json("/stock/profile2", {"symbol": symbol})
        if not isinstance(profile, dict) or not profile:
            logger.debug(f"No profile for {symbol}")
            return None

        metrics = self.client.get_json(
            "/stock/metric", {"symbol": symbol, "metric": "all"}
        )
        return parse_fundamentals(symbol, profile, metrics)


class FinnhubSymbolSource:
    """US common stocks listed by Finnhub."""

    def __init__(self, client: FinnhubClient, exchange: Optional[str] = None) -> None:
        self.client = client
        self.exchange = exchange or client.config.exchange

    def list_symbols(self) -> Iterator[str]:
        """
        Yield common-stock tickers without share-class suffixes.

        Each call re-queries the listing.

        Raises:
            RetryExhausted: If the listing cannot be fetched
        """
        listing = self.client.error_handler.retry(
            lambda: self.client.get_json("/stock/symbol", {"exchange": self.exchange}),
            operation_name="list_symbols",
        )
        if not isinstance(listing, list):
            raise ProviderUnavailable("symbol listing is not a list")

        for entry in listing:
            if not isinstance(entry, dict) or entry.get("type") not in COMMON_STOCK_TYPES:
                continue
            ticker = entry.get("symbol")
            if ticker and "." not in ticker:
                yield ticker


def parse_candles(symbol: str, payload: Any) -> Optional[PriceSeries]:
    """
    Convert a /stock/candle payload into a PriceSeries.

    Returns:
        PriceSeries, or None when Finnhub reports no data

    Raises:
        ProviderUnavailable: If the payload is malformed
    """
    if not isinstance(payload, dict) or payload.get("s") != "ok":
        return None

    try:
        columns: List[List[Any]] = [payload[k] for k in ("t", "o", "h", "l", "c", "v")]
        lengths = {len(col) for col in columns}
    except (KeyError, TypeError) as e:
        raise ProviderUnavailable(f"malformed candle payload for {symbol}: {e}") from e
    if len(lengths) != 1:
        raise ProviderUnavailable(f"candle arrays for {symbol} differ in length")

    try:
        bars = tuple(
            PriceBar(
                date=datetime.fromtimestamp(t, tz=timezone.utc).date(),
                open=o,
                high=h,
                low=lo,
                close=c,
                volume=int(v),
            )
            for t, o, h, lo, c, v in zip(*columns)
        )
        return PriceSeries(symbol=symbol, bars=bars)
    except (ValidationError, TypeError, ValueError, OverflowError) as e:
        raise ProviderUnavailable(f"invalid candles for {symbol}: {e}") from e


def parse_fundamentals(
    symbol: str,
    profile: Dict[str, Any],
    metrics: Any,
) -> Fundamentals:
    """
    Build Fundamentals from /stock/profile2 and /stock/metric payloads.

    Missing or non-numeric values stay None.
    """
    market_cap_millions = _as_float(profile.get("marketCapitalization"))
    beta = None
    if isinstance(metrics, dict) and isinstance(metrics.get("metric"), dict):
        beta = _as_float(metrics["metric"].get("beta"))

    return Fundamentals(
        symbol=symbol,
        company_name=profile.get("name") or None,
        # Finnhub reports 0 when the market cap is unknown
        market_cap=market_cap_millions * 1e6 if market_cap_millions else None,
        beta=beta,
        sector=profile.get("finnhubIndustry") or None,
    )


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)
