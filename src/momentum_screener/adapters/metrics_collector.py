"""
In-Memory Metrics Collector.

Stores metrics in memory and summarises them per name. Worker threads
record concurrently, so every access holds the lock.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


def _metric_key(name: str, tags: Optional[Dict[str, str]]) -> str:
    """Flatten name and tags into one key, e.g. "rejected{reason=overbought gate}"."""
    if not tags:
        return name
    labels = ",".join(f"{k}={v}" for k, v in sorted(tags.items()))
    return f"{name}{{{labels}}}"


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics collector."""

    def __init__(self) -> None:
        self._entries: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        self._record(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a gauge metric."""
        self._record(name, "gauge", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summarise collected metrics.

        Counts are summed; timings report count/total/max; gauges report
        their last value.
        """
        with self._lock:
            summary: Dict[str, Any] = {}
            for key, entries in self._entries.items():
                values = [e["value"] for e in entries]
                kind = entries[-1]["type"]
                if kind == "count":
                    summary[key] = sum(values)
                elif kind == "timing":
                    summary[key] = {
                        "count": len(values),
                        "total": sum(values),
                        "max": max(values),
                    }
                else:
                    summary[key] = values[-1]
            return summary

    def clear(self) -> None:
        """Clear all metrics."""
        with self._lock:
            self._entries.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: Any,
        tags: Optional[Dict[str, str]],
    ) -> None:
        """Internal recording method."""
        key = _metric_key(name, tags)
        with self._lock:
            self._entries.setdefault(key, []).append(
                {
                    "type": metric_type,
                    "value": value,
                    "timestamp": datetime.now().isoformat(),
                }
            )
