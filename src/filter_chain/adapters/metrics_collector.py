"""
In-Memory Metrics Collector.

Keeps link timings, row counts and recompute counts in memory.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "gauge", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric name: count, total, last."""
        with self._lock:
            return {
                name: {
                    "count": len(entries),
                    "total": sum(e["value"] for e in entries),
                    "last": entries[-1]["value"],
                }
                for name, entries in self._metrics.items()
                if entries
            }

    def values(self, name: str, **tags: str) -> List[Any]:
        """
        Raw values recorded under ``name`` whose tags include ``tags``.

        Example:
            >>> collector.values("link_recomputes_total", link="TERRITORY")
        """
        with self._lock:
            return [
                e["value"]
                for e in self._metrics.get(name, [])
                if all(e["tags"].get(k) == v for k, v in tags.items())
            ]

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: Any,
        tags: Optional[Dict[str, str]],
    ) -> None:
        with self._lock:
            self._metrics.setdefault(name, []).append(
                {
                    "type": metric_type,
                    "value": value,
                    "tags": tags or {},
                    "timestamp": datetime.now().isoformat(),
                }
            )
