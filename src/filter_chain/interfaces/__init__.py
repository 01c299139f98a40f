"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for the
host collaborators and observability ports. High-level modules depend on
these abstractions, not on concrete implementations.

Protocols:
    - ParameterSource: Read + subscribe access to current parameter values
    - DatasetProducer: Anything a filter link can pull a dataset from
    - AuditLogger: Logging abstraction for the evaluation audit trail
    - MetricsCollector: Performance metrics abstraction
"""

from filter_chain.interfaces.audit_logger import AuditLogger
from filter_chain.interfaces.dataset_producer import DatasetProducer
from filter_chain.interfaces.metrics_collector import MetricsCollector
from filter_chain.interfaces.parameter_source import (
    ChangeCallback,
    ParameterSource,
    Unsubscribe,
)

__all__ = [
    "AuditLogger",
    "ChangeCallback",
    "DatasetProducer",
    "MetricsCollector",
    "ParameterSource",
    "Unsubscribe",
]
