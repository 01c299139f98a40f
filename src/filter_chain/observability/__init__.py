"""
Observability Package - Structured Logging, Metrics, Tracing.

    - ObservabilityManager: structlog logging with correlation IDs, plus
      in-memory event and metric recording

Design Principles:
    - Structured logging via structlog
    - Correlation ID propagation for end-to-end tracing of a session
"""

from filter_chain.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)

__all__ = ["ObservabilityManager", "get_correlation_id", "set_correlation_id"]
