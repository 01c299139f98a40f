"""
Audit Logger Protocol.

Tracks every chain evaluation: which links ran, how many rows went in and
out, and which link was left waiting for a parameter.

Design Notes:
    - Structured logging (JSON format recommended)
    - Correlation ID propagation for tracing
    - No side effects on filtering logic
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the start of a chain link evaluation.

        Args:
            stage_name: Name of the link
            input_count: Number of rows entering the link
            metadata: Optional additional context
        """
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the end of a chain link evaluation.

        Args:
            stage_name: Name of the link
            output_count: Number of rows that matched
            duration_seconds: Time taken
            metadata: Optional additional context
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
