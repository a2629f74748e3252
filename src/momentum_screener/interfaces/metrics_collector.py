"""
Metrics Collector Protocol.

Defines the abstract interface for performance metrics collection.
The metrics collector tracks run and per-symbol timings, rejection
counts per stage and bucket sizes.

Design Notes:
    - Non-blocking metric recording
    - Thread-safe: workers record concurrently
    - Tag/label support for dimensionality
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any, Dict, Optional


@runtime_checkable
class MetricsCollector(Protocol):
    """Abstract interface for metrics collection."""

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric (e.g. "symbol_evaluation_seconds")."""
        ...

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric (e.g. "symbols_rejected_total")."""
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a gauge metric (current value)."""
        ...

    def get_metrics(self) -> Dict[str, Any]:
        """Get a summary of all collected metrics."""
        ...

    def clear(self) -> None:
        """Drop everything recorded so far (called at the start of each run)."""
        ...
