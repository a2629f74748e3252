"""
Mock Market Data Provider.

A fake data provider for development and testing. Generates
deterministic price histories and fundamentals for a fixed set of
symbols, and implements all three provider protocols.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Dict, Iterator, List, Optional

from momentum_screener.domain.entities import Fundamentals
from momentum_screener.domain.value_objects import PriceBar, PriceSeries
from momentum_screener.resilience.error_handler import ProviderUnavailable


class MockMarketDataProvider:
    """Fake price, fundamentals and symbol provider."""

    # (symbol, name, sector, market_cap, beta, pattern)
    MOCK_STOCKS = [
        ("AAPL", "Apple Inc", "Technology", 3.4e12, 1.24, "random"),
        ("MSFT", "Microsoft Corporation", "Technology", 3.1e12, 0.90, "random"),
        ("NVDA", "NVIDIA Corporation", "Semiconductors", 3.3e12, 1.68, "random"),
        ("AMD", "Advanced Micro Devices Inc", "Semiconductors", 2.0e11, 1.70, "random"),
        ("TSLA", "Tesla Inc", "Automobiles", 1.3e12, 2.30, "random"),
        ("PLTR", "Palantir Technologies Inc", "Technology", 1.7e11, 2.60, "random"),
        ("JPM", "JPMorgan Chase & Co", "Financials", 6.7e11, 1.10, "random"),
        ("KO", "Coca-Cola Co", "Consumer Staples", 2.7e11, 0.60, "random"),
        # Steady high-momentum uptrend (passes every gate)
        ("ROCKET", "Rocket Growth Corp", "Technology", 5.0e9, 1.60, "momentum"),
        # Price below the penny-stock floor
        ("PENNY", "Penny Mining Ltd", "Materials", 4.0e8, 1.90, "penny"),
        # Market cap below the floor
        ("MICRO", "Micro Devices Inc", "Technology", 2.0e8, 1.50, "momentum"),
        # Beta unknown
        ("NOBETA", "No Beta Holdings", "Financials", 9.0e8, None, "momentum"),
        # Too little history
        ("NEWIPO", "Fresh Listing Inc", "Healthcare", 1.2e9, 1.40, "short"),
        # Provider fails for this symbol
        ("GHOST", "Ghost Data Corp", "Industrials", 1.0e9, 1.30, "fail"),
    ]

    def __init__(
        self,
        seed: int = 42,
        history_bars: int = 260,
        end_date: date = date(2024, 12, 31),
    ) -> None:
        """
        Initialize mock provider with random seed.

        Args:
            seed: Random seed for reproducibility
            history_bars: Bars generated per symbol (except short histories)
            end_date: Date of the most recent bar
        """
        self._seed = seed
        self._rng = random.Random(seed)
        self._history_bars = history_bars
        self._end_date = end_date
        self._profiles = self._generate_profiles()
        self._histories = self._generate_histories()

    def list_symbols(self) -> Iterator[str]:
        """Yield every mock symbol; each call restarts."""
        for row in self.MOCK_STOCKS:
            yield row[0]

    def get_history(self, symbol: str) -> Optional[PriceSeries]:
        """Get the mock price history for a symbol."""
        if self._pattern(symbol) == "fail":
            raise ProviderUnavailable(f"mock outage for {symbol}")
        return self._histories.get(symbol)

    def get_profile(self, symbol: str) -> Optional[Fundamentals]:
        """Get mock fundamentals for a symbol."""
        return self._profiles.get(symbol)

    def _pattern(self, symbol: str) -> Optional[str]:
        for row in self.MOCK_STOCKS:
            if row[0] == symbol:
                return row[5]
        return None

    def _generate_profiles(self) -> Dict[str, Fundamentals]:
        """Generate mock fundamentals."""
        return {
            symbol: Fundamentals(
                symbol=symbol,
                company_name=name,
                market_cap=market_cap,
                beta=beta,
                sector=sector,
            )
            for symbol, name, sector, market_cap, beta, _ in self.MOCK_STOCKS
        }

    def _generate_histories(self) -> Dict[str, PriceSeries]:
        """Generate mock price histories."""
        result = {}
        for symbol, _, _, _, _, pattern in self.MOCK_STOCKS:
            if pattern == "fail":
                continue
            if pattern == "momentum":
                closes = self._momentum_closes(self._history_bars)
            elif pattern == "penny":
                closes = self._random_walk(self._history_bars, 0.5, 0.0, 0.03, 0.1, 0.95)
            elif pattern == "short":
                closes = self._random_walk(100, 20.0, 0.004, 0.04)
            else:
                start = self._rng.uniform(20, 400)
                drift = self._rng.uniform(-0.001, 0.004)
                closes = self._random_walk(self._history_bars, start, drift, 0.025)
            result[symbol] = self._to_series(symbol, closes)
        return result

    @staticmethod
    def _momentum_closes(bars: int) -> List[float]:
        """Alternating +9% / -5% days: a steep trend that never gets overbought."""
        closes = [5.0]
        for i in range(1, bars):
            factor = 1.09 if i % 2 else 0.95
            closes.append(closes[-1] * factor)
        return closes

    def _random_walk(
        self,
        bars: int,
        start: float,
        drift: float,
        volatility: float,
        floor: float = 0.5,
        ceiling: Optional[float] = None,
    ) -> List[float]:
        closes = []
        price = start
        for _ in range(bars):
            price *= 1 + self._rng.gauss(drift, volatility)
            price = max(price, floor)
            if ceiling is not None:
                price = min(price, ceiling)
            closes.append(price)
        return closes

    def _to_series(self, symbol: str, closes: List[float]) -> PriceSeries:
        """Wrap closes into weekday bars ending at end_date."""
        dates = self._trading_days(len(closes))
        bars = []
        previous = closes[0]
        for day, close in zip(dates, closes):
            bars.append(
                PriceBar(
                    date=day,
                    open=round(previous, 4),
                    high=round(max(previous, close) * 1.04, 4),
                    low=round(min(previous, close) * 0.97, 4),
                    close=round(close, 4),
                    volume=self._rng.randint(500_000, 5_000_000),
                )
            )
            previous = close
        return PriceSeries(symbol=symbol, bars=tuple(bars))

    def _trading_days(self, count: int) -> List[date]:
        """The `count` most recent weekdays up to end_date, oldest first."""
        days: List[date] = []
        current = self._end_date
        while len(days) < count:
            if current.weekday() < 5:
                days.append(current)
            current -= timedelta(days=1)
        days.reverse()
        return days
