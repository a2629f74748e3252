"""
Provider Protocols.

Defines the abstract interfaces for data access. All data sources
(live HTTP, mock) must implement these protocols to be used with the
screening pipeline.

The providers are responsible for:
    - Enumerating ticker symbols (pagination hidden from the core)
    - Loading one symbol's daily price history
    - Loading one symbol's company fundamentals

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Per-symbol calls so one failure affects one symbol only
    - Failures are signalled by returning None or raising ProviderUnavailable
    - Credentials and endpoints are constructor arguments, never globals
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from momentum_screener.domain.entities import Fundamentals
    from momentum_screener.domain.value_objects import PriceSeries


@runtime_checkable
class PriceDataProvider(Protocol):
    """Abstract interface for daily price history."""

    def get_history(self, symbol: str) -> Optional[PriceSeries]:
        """
        Load chronologically ordered daily bars for a symbol.

        Args:
            symbol: Ticker symbol

        Returns:
            PriceSeries covering at least the trailing ~6 months,
            or None if the provider has no data for the symbol

        Raises:
            ProviderUnavailable: If the data source call fails
        """
        ...


@runtime_checkable
class FundamentalsProvider(Protocol):
    """Abstract interface for company fundamentals."""

    def get_profile(self, symbol: str) -> Optional[Fundamentals]:
        """
        Load company fundamentals for a symbol.

        Args:
            symbol: Ticker symbol

        Returns:
            Fundamentals with unknown fields left as None,
            or None if the symbol is unknown

        Raises:
            ProviderUnavailable: If the data source call fails
        """
        ...


@runtime_checkable
class SymbolSource(Protocol):
    """Abstract interface for the universe of ticker symbols."""

    def list_symbols(self) -> Iterator[str]:
        """
        Produce ticker symbols lazily.

        The sequence is finite, and each call starts a fresh iteration.
        """
        ...


class StaticSymbolSource:
    """SymbolSource over a fixed list of tickers."""

    def __init__(self, symbols: Iterable[str]) -> None:
        self._symbols = list(symbols)

    def list_symbols(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)
