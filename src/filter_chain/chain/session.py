"""
Session - Lifetime Owner of Parameters and Chains.

A session is opened for one dataset. Chains are declared once at setup and
live until the session closes; closing disposes every link so later
parameter changes reach nothing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from filter_chain.adapters.render_sink import RenderSink
from filter_chain.chain.filter_chain import FilterChain
from filter_chain.config.models import ChainConfig, LinkConfig, SessionConfig
from filter_chain.domain.dataset import Dataset
from filter_chain.domain.value_objects import ChainResult
from filter_chain.interfaces.metrics_collector import MetricsCollector
from filter_chain.observability.observability_manager import ObservabilityManager
from filter_chain.reactive.store import ParameterStore
from filter_chain.validation.chain_validator import ChainValidator

logger = logging.getLogger(__name__)


class Session:
    """Owns the parameter store and the chains declared for a dataset."""

    def __init__(
        self,
        dataset: Dataset,
        parameters: Optional[Mapping[str, Any]] = None,
        config: Optional[SessionConfig] = None,
        observability: Optional[ObservabilityManager] = None,
        metrics_collector: Optional[MetricsCollector] = None,
        validator: Optional[ChainValidator] = None,
    ) -> None:
        """
        Open a session.

        Args:
            dataset: Source rows for every chain in the session
            parameters: Initial parameter values (override config.parameters)
            config: Session configuration; chains listed there are declared now
            observability: Audit logger (built from config.logging if omitted)
            metrics_collector: Metrics sink (defaults to the observability manager)
            validator: Chain declaration validator

        Raises:
            BadReference: If a configured chain references an unknown column
        """
        self.config = config or SessionConfig()
        self.dataset = dataset
        self.observability = observability or ObservabilityManager(
            use_json=self.config.logging.json_output,
            log_level=logging.getLevelName(self.config.logging.level),
        )
        self.metrics_collector = metrics_collector or self.observability
        self.validator = validator or ChainValidator()

        initial = dict(self.config.parameters)
        initial.update(parameters or {})
        self._parameters = ParameterStore(initial)
        self._chains: Dict[str, FilterChain] = {}
        self._closed = False

        self.correlation_id = self.observability.generate_correlation_id()
        self.observability.log_event(
            "session_opened",
            {"rows": len(dataset), "columns": list(dataset.columns)},
        )

        for chain_config in self.config.chains:
            self.declare_chain_from_config(chain_config)

    @property
    def parameters(self) -> ParameterStore:
        return self._parameters

    @property
    def chains(self) -> Dict[str, FilterChain]:
        return dict(self._chains)

    @property
    def closed(self) -> bool:
        return self._closed

    def declare_chain(
        self,
        name: str,
        columns: Iterable[str] = (),
        links: Iterable[LinkConfig] = (),
    ) -> FilterChain:
        """
        Declare a chain by column names and/or explicit link configs.

        ``links`` come first, then one link per entry of ``columns`` whose
        parameter key equals the column name.
        """
        link_configs = list(links) + [LinkConfig(column=c) for c in columns]
        return self.declare_chain_from_config(ChainConfig(name=name, links=link_configs))

    def declare_chain_from_config(self, chain_config: ChainConfig) -> FilterChain:
        """
        Validate and build a chain.

        Raises:
            RuntimeError: If the session is closed
            ValueError: If a chain with this name already exists
            ChainConfigError: If the chain has no links
            BadReference: If any link references an unknown column
        """
        self._ensure_open()
        self._bind_correlation_id()
        if chain_config.name in self._chains:
            raise ValueError(f"chain '{chain_config.name}' already declared")

        self.validator.validate(chain_config, self.dataset.columns)

        chain = FilterChain(
            self.dataset,
            self._parameters,
            name=chain_config.name,
            audit_logger=self.observability,
            metrics_collector=self.metrics_collector,
        )
        for link in chain_config.links:
            chain.add(link.column, parameter_key=link.parameter, name=link.name)

        self._chains[chain_config.name] = chain
        self.observability.log_event(
            "chain_declared",
            {"chain": chain_config.name, "links": [l.link_name for l in chain_config.links]},
        )
        return chain

    def chain(self, name: str) -> FilterChain:
        try:
            return self._chains[name]
        except KeyError:
            raise KeyError(f"no chain named '{name}' in this session") from None

    def set_parameter(self, key: str, value: Any) -> bool:
        self._ensure_open()
        return self._parameters.set(key, value)

    def unset_parameter(self, key: str) -> bool:
        self._ensure_open()
        return self._parameters.unset(key)

    def evaluate(self, name: str) -> ChainResult:
        """Evaluate a chain under this session's correlation id."""
        self._ensure_open()
        return self.chain(name).evaluate(correlation_id=self.correlation_id)

    def render_sink(self, name: str) -> RenderSink:
        """A render sink pulling the output of chain ``name``."""
        self._ensure_open()
        return RenderSink(self.chain(name), name=name)

    def close(self) -> None:
        """Dispose every chain. Safe to call twice."""
        if self._closed:
            return
        for chain in self._chains.values():
            chain.dispose()
        self._closed = True
        self._bind_correlation_id()
        self.observability.log_event("session_closed", {"chains": list(self._chains)})

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("session is closed")

    def _bind_correlation_id(self) -> None:
        # another session may have bound its own id since ours was generated
        self.observability.set_correlation_id(self.correlation_id)
