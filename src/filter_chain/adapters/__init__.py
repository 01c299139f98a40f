"""
Adapters Layer - Concrete Infrastructure Implementations.

Adapters:
    - InMemoryMetricsCollector: MetricsCollector kept in memory
    - RenderSink: Pull-based consumer standing in for the host renderer
"""

from filter_chain.adapters.metrics_collector import InMemoryMetricsCollector
from filter_chain.adapters.render_sink import RenderSink

__all__ = ["InMemoryMetricsCollector", "RenderSink"]
