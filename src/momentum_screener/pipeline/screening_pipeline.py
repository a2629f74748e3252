"""
Screening Pipeline - Main Orchestrator.

The ScreeningPipeline coordinates a screening run: for every symbol,
independently and concurrently, it acquires price history and
fundamentals, applies the rule chain and records the outcome. Outcomes
are then aggregated into the two output buckets.

A failure while acquiring one symbol's data rejects that symbol with
"data unavailable"; it never aborts the run.
"""

from __future__ import annotations

import logging
import time
import uuid
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from itertools import islice
from typing import Iterable, List, Optional, Union

import momentum_screener
from momentum_screener.config.models import ScreeningConfig
from momentum_screener.domain.entities import (
    RejectionReason,
    ScreenCategory,
    ScreenOutcome,
    ScreeningReport,
)
from momentum_screener.interfaces.audit_logger import AuditLogger
from momentum_screener.interfaces.metrics_collector import MetricsCollector
from momentum_screener.interfaces.providers import (
    FundamentalsProvider,
    PriceDataProvider,
    SymbolSource,
)
from momentum_screener.pipeline.aggregator import ResultAggregator
from momentum_screener.pipeline.evaluation_context import EvaluationContext
from momentum_screener.resilience.error_handler import ProviderUnavailable
from momentum_screener.rules.chain import ScreeningRules

logger = logging.getLogger(__name__)


class ScreeningPipeline:
    """Main orchestrator for the screening workflow."""

    def __init__(
        self,
        price_provider: PriceDataProvider,
        fundamentals_provider: FundamentalsProvider,
        rules: ScreeningRules,
        config: ScreeningConfig,
        audit_logger: AuditLogger,
        metrics_collector: MetricsCollector,
        aggregator: Optional[ResultAggregator] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            price_provider: Source of daily price history
            fundamentals_provider: Source of company fundamentals
            rules: Ordered rule chain
            config: Screening configuration
            audit_logger: For audit trail
            metrics_collector: For performance metrics
            aggregator: Bucket builder (default honours config.pipeline.sort_by_symbol)
        """
        self.price_provider = price_provider
        self.fundamentals_provider = fundamentals_provider
        self.rules = rules
        self.config = config
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.aggregator = aggregator or ResultAggregator(
            sort_by_symbol=config.pipeline.sort_by_symbol
        )

    def screen(self, symbols: Union[SymbolSource, Iterable[str]]) -> ScreeningReport:
        """
        Execute a screening run.

        Args:
            symbols: A SymbolSource or any iterable of tickers

        Returns:
            ScreeningReport with the two candidate buckets
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)

        self.metrics_collector.clear()
        batch = self._select_symbols(symbols)
        self.audit_logger.log_run_start(len(batch))
        self.metrics_collector.record_count("symbols_requested_total", len(batch))

        outcomes = self._evaluate_all(batch)

        unavailable = sum(
            1 for o in outcomes if o.rejection_reason == RejectionReason.DATA_UNAVAILABLE
        )
        if outcomes and unavailable == len(outcomes):
            self.audit_logger.log_anomaly(
                f"No data for any of {len(outcomes)} symbols",
                severity="WARNING",
                context={"symbols": len(outcomes)},
            )

        total_duration = time.perf_counter() - start_time
        self.metrics_collector.record_timing("screening_total_seconds", total_duration)

        report = self.aggregator.aggregate(
            outcomes,
            metrics=self.metrics_collector.get_metrics(),
            metadata=self._build_metadata(correlation_id, total_duration),
        )

        self.audit_logger.log_run_end(
            len(report.top_tier_stocks),
            len(report.emerging_momentum_stocks),
            total_duration,
        )
        return report

    def evaluate_symbol(self, symbol: str) -> ScreenOutcome:
        """
        Acquire data for one symbol and classify it. Never raises.

        Args:
            symbol: Ticker symbol

        Returns:
            ScreenOutcome for the symbol
        """
        start = time.perf_counter()
        outcome = self._classify(symbol)

        self.metrics_collector.record_timing(
            "symbol_evaluation_seconds", time.perf_counter() - start
        )
        self.metrics_collector.record_count(
            "symbols_classified_total", 1, {"category": outcome.category.value}
        )
        if outcome.rejection_reason is not None:
            self.metrics_collector.record_count(
                "symbols_rejected_total", 1, {"reason": outcome.rejection_reason.value}
            )
            self.audit_logger.log_symbol_rejected(
                symbol, outcome.rejection_reason.value, outcome.rejection_detail or ""
            )
        return outcome

    def _classify(self, symbol: str) -> ScreenOutcome:
        """Acquire data, apply the history floor and run the rules."""
        try:
            series = self.price_provider.get_history(symbol)
            if series is None:
                return self._unavailable(symbol, "no price history")

            min_bars = self.config.pipeline.min_history_bars
            if len(series) < min_bars:
                return self._unavailable(
                    symbol, f"{len(series)} bars < required {min_bars}"
                )

            fundamentals = self.fundamentals_provider.get_profile(symbol)
            if fundamentals is None:
                return self._unavailable(symbol, "no fundamentals")

        except ProviderUnavailable as e:
            logger.warning(f"Data unavailable for {symbol}: {e}")
            return self._unavailable(symbol, str(e))
        except Exception as e:
            # Providers outside this package may raise anything
            logger.warning(f"Provider error for {symbol}: {type(e).__name__}: {e}")
            return self._unavailable(symbol, f"{type(e).__name__}: {e}")

        context = EvaluationContext.from_series(series, fundamentals)
        decision = self.rules.evaluate(context)

        return ScreenOutcome(
            symbol=symbol,
            fundamentals=fundamentals,
            indicators=context.indicators if context.indicators_loaded else None,
            price=context.price,
            category=decision.category,
            rejection_reason=decision.reason,
            rejection_detail=decision.detail or None,
        )

    def _unavailable(self, symbol: str, detail: str) -> ScreenOutcome:
        return ScreenOutcome(
            symbol=symbol,
            category=ScreenCategory.REJECTED,
            rejection_reason=RejectionReason.DATA_UNAVAILABLE,
            rejection_detail=detail,
        )

    def _select_symbols(self, symbols: Union[SymbolSource, Iterable[str]]) -> List[str]:
        """Materialise the batch: de-duplicated, capped at symbol_limit."""
        if isinstance(symbols, str):
            raise TypeError("symbols must be an iterable of tickers, not a string")
        if isinstance(symbols, SymbolSource):
            symbols = symbols.list_symbols()

        seen = dict.fromkeys(s.strip().upper() for s in symbols if s and s.strip())
        limit = self.config.pipeline.symbol_limit
        return list(islice(seen, limit))

    def _evaluate_all(self, batch: List[str]) -> List[ScreenOutcome]:
        """Fan out one evaluation per symbol, fan in all outcomes."""
        if not batch:
            return []

        workers = min(self.config.pipeline.max_workers, len(batch))
        outcomes: List[ScreenOutcome] = []
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="screen"
        ) as executor:
            futures = [executor.submit(self.evaluate_symbol, s) for s in batch]
            for future in as_completed(futures):
                outcomes.append(future.result())
        return outcomes

    def _build_metadata(self, correlation_id: str, duration: float) -> dict:
        """Build result metadata."""
        return {
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": momentum_screener.__version__,
        }
