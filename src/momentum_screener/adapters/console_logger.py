"""
Console Audit Logger.

A simple audit logger that outputs to the console.
"""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from typing import Any, Dict, Optional, TextIO


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True, stream: Optional[TextIO] = None) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log every rejection. If False, only run summaries.
            stream: Output stream (default: stdout at the time of logging)
        """
        self._verbose = verbose
        self._stream = stream
        self._correlation_id: Optional[str] = None
        self._lock = threading.Lock()

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_run_start(
        self,
        symbol_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the start of a screening run."""
        self._log("INFO", f"Screening {symbol_count} symbols")

    def log_run_end(
        self,
        top_tier_count: int,
        emerging_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the end of a screening run."""
        self._log(
            "INFO",
            f"Screening complete: {top_tier_count} top tier, "
            f"{emerging_count} emerging ({duration_seconds:.3f}s)",
        )

    def log_symbol_rejected(
        self,
        symbol: str,
        reason: str,
        detail: str,
    ) -> None:
        """Log that a symbol was rejected."""
        if self._verbose:
            suffix = f": {detail}" if detail else ""
            self._log("DEBUG", f"{symbol} rejected by {reason}{suffix}")

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly or warning."""
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        """Internal logging method."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        with self._lock:
            print(
                f"[{timestamp}] [{corr_id}] [{level:5}] {message}",
                file=self._stream or sys.stdout,
            )
