"""
Filter Chain - Dependent, Parameter-Driven Filters over Tabular Data.

Each filter link keeps the upstream rows whose value in one column equals
the current value of one parameter. Links chain: the output of one is the
input of the next. A link recomputes lazily, and only after its own
parameter or its upstream link changed.

Main Components:
    - domain: Dataset, NotReady / BadReference, evaluation records
    - interfaces: Protocols for parameter sources, producers, audit, metrics
    - reactive: Minimal parameter store and lazy computation base
    - chain: DependentFilter, FilterChain, Session
    - adapters: Render sink and in-memory metrics
    - config: Pydantic models and YAML loader
    - validation: Setup-time chain validation
    - observability: structlog-based audit logging

Example:
    >>> from filter_chain import Dataset, Session
    >>> data = Dataset.from_records([
    ...     {"TERRITORY": "EMEA", "CUSTOMER": "Acme"},
    ...     {"TERRITORY": "NA", "CUSTOMER": "Globex"},
    ... ])
    >>> with Session(data) as session:
    ...     chain = session.declare_chain("orders", columns=["TERRITORY"])
    ...     session.set_parameter("TERRITORY", "EMEA")
    ...     chain.compute().to_records()
    [{'TERRITORY': 'EMEA', 'CUSTOMER': 'Acme'}]

"""

import logging

__version__ = "0.1.0"

from filter_chain.adapters import InMemoryMetricsCollector, RenderSink
from filter_chain.chain import DependentFilter, FilterChain, Session
from filter_chain.config import ConfigLoader, SessionConfig, load_config
from filter_chain.domain import (
    BadReference,
    ChainResult,
    Dataset,
    FilterChainError,
    LinkResult,
    LinkStatus,
    NotReady,
)
from filter_chain.reactive import ParameterStore


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure stdlib logging for the package's module loggers.

    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import filter_chain
        >>> filter_chain.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("filter_chain").setLevel(level)


__all__ = [
    "BadReference",
    "ChainResult",
    "ConfigLoader",
    "Dataset",
    "DependentFilter",
    "FilterChain",
    "FilterChainError",
    "InMemoryMetricsCollector",
    "LinkResult",
    "LinkStatus",
    "NotReady",
    "ParameterStore",
    "RenderSink",
    "Session",
    "SessionConfig",
    "configure_logging",
    "load_config",
]
