"""
Audit Logger Protocol.

Defines the abstract interface for audit logging. The audit logger
tracks every classification decision of a screening run for debugging
and for explaining why a symbol did not make either list.

The audit logger is responsible for:
    - Logging run start/end events
    - Logging individual symbol rejections
    - Logging anomalies and warnings
    - Maintaining correlation across a screening run

Design Notes:
    - Correlation ID propagation for tracing
    - No side effects on screening logic
    - Must tolerate calls from several worker threads
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any, Dict, Optional


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_run_start(
        self,
        symbol_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the start of a screening run.

        Args:
            symbol_count: Number of symbols to evaluate
            metadata: Optional additional context
        """
        ...

    def log_run_end(
        self,
        top_tier_count: int,
        emerging_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the end of a screening run.

        Args:
            top_tier_count: Number of top tier candidates
            emerging_count: Number of emerging candidates
            duration_seconds: Time taken for the run
            metadata: Optional additional context
        """
        ...

    def log_symbol_rejected(
        self,
        symbol: str,
        reason: str,
        detail: str,
    ) -> None:
        """
        Log that a symbol was rejected.

        Args:
            symbol: The rejected symbol
            reason: Which stage rejected it
            detail: Human-readable explanation
        """
        ...

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an anomaly or warning.

        Args:
            message: Description of the anomaly
            severity: INFO, WARNING, or CRITICAL
            context: Optional additional context
        """
        ...
