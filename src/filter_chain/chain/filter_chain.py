"""
Filter Chain - Ordered Sequence of Dependent Filters.

The FilterChain builds links so that each link reads the previous one, and
coordinates a traced evaluation of the whole chain for audit purposes.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from filter_chain.chain.dependent_filter import DependentFilter
from filter_chain.domain.dataset import Dataset
from filter_chain.domain.errors import NotReady
from filter_chain.domain.value_objects import ChainResult, LinkResult, LinkStatus
from filter_chain.interfaces.audit_logger import AuditLogger
from filter_chain.interfaces.metrics_collector import MetricsCollector
from filter_chain.interfaces.parameter_source import ParameterSource
from filter_chain.reactive.computation import StaticSource

logger = logging.getLogger(__name__)


class FilterChain:
    """Builder and orchestrator for a chain of dependent filters."""

    def __init__(
        self,
        dataset: Dataset,
        parameter_source: ParameterSource,
        name: str = "chain",
        audit_logger: Optional[AuditLogger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        """
        Initialize an empty chain over ``dataset``.

        Args:
            dataset: Source rows for the first link
            parameter_source: Parameter values for every link
            name: Chain name for logs and results
            audit_logger: Receives stage events during evaluate() (optional)
            metrics_collector: Receives timings and counts (optional)
        """
        self.name = name
        self.dataset = dataset
        self.parameter_source = parameter_source
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self._head = StaticSource(dataset, name=f"{name}.dataset")
        self._links: List[DependentFilter] = []
        self._by_name: Dict[str, DependentFilter] = {}

    def add(
        self,
        column_key: str,
        parameter_key: Optional[str] = None,
        name: Optional[str] = None,
    ) -> DependentFilter:
        """
        Append a link filtering on ``column_key``.

        Args:
            column_key: Column to compare
            parameter_key: Parameter to read (defaults to column_key)
            name: Unique link name (defaults to column_key)

        Returns:
            The new link

        Raises:
            BadReference: If column_key is not a dataset column
            ValueError: If the link name is already used in this chain
        """
        link_name = name or column_key
        if link_name in self._by_name:
            raise ValueError(f"link '{link_name}' already exists in chain '{self.name}'")

        upstream = self._links[-1] if self._links else self._head
        link = DependentFilter(
            upstream,
            self.parameter_source,
            column_key,
            parameter_key=parameter_key,
            name=link_name,
        )
        self._links.append(link)
        self._by_name[link_name] = link
        logger.debug(
            f"Chain {self.name}: added link {link_name} "
            f"({column_key} <- {link.parameter_key})"
        )
        return link

    @property
    def links(self) -> Tuple[DependentFilter, ...]:
        return tuple(self._links)

    @property
    def last(self) -> Optional[DependentFilter]:
        return self._links[-1] if self._links else None

    def __len__(self) -> int:
        return len(self._links)

    def __getitem__(self, name: str) -> DependentFilter:
        return self._by_name[name]

    def compute(self) -> Dataset:
        """
        Latest output of the final link.

        Raises:
            NotReady: If any link's parameter is unset
        """
        if not self._links:
            return self.dataset
        return self._links[-1].compute()

    def evaluate(self, correlation_id: Optional[str] = None) -> ChainResult:
        """
        Pull every link in order and record what happened.

        Stops at the first link that is not ready; it and all later links
        are reported as NOT_READY and the result carries no output.

        Args:
            correlation_id: Trace id (a new one is generated when omitted)

        Returns:
            ChainResult with per-link audit trail
        """
        start_time = time.perf_counter()
        correlation_id = correlation_id or str(uuid.uuid4())
        if self.audit_logger:
            self.audit_logger.set_correlation_id(correlation_id)

        link_results: List[LinkResult] = []
        current: Optional[Dataset] = self.dataset

        for link in self._links:
            if current is None:
                link_results.append(self._not_ready_result(link))
                continue
            link_result, current = self._execute_link(link, len(current))
            link_results.append(link_result)

        total_duration = time.perf_counter() - start_time
        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "chain_evaluation_seconds", total_duration, {"chain": self.name}
            )

        status = LinkStatus.READY if current is not None else LinkStatus.NOT_READY
        return ChainResult(
            chain_name=self.name,
            correlation_id=correlation_id,
            status=status,
            links=link_results,
            output=current.to_records() if current is not None else None,
            metadata={
                "correlation_id": correlation_id,
                "timestamp": datetime.now().isoformat(),
                "duration_seconds": total_duration,
                "link_count": len(self._links),
            },
        )

    def dispose(self) -> None:
        """Release every subscription held by the chain."""
        for link in reversed(self._links):
            link.dispose()
        self._head.dispose()
        logger.debug(f"Chain {self.name} disposed")

    def _execute_link(
        self,
        link: DependentFilter,
        input_count: int,
    ) -> Tuple[LinkResult, Optional[Dataset]]:
        """Pull a single link, logging and timing it."""
        was_stale = link.is_stale
        stage_start = time.perf_counter()
        if self.audit_logger:
            self.audit_logger.log_stage_start(link.name, input_count)

        try:
            output = link.compute()
        except NotReady as exc:
            if self.audit_logger:
                self.audit_logger.log_stage_end(
                    link.name,
                    0,
                    time.perf_counter() - stage_start,
                    metadata={"status": LinkStatus.NOT_READY.value},
                )
                self.audit_logger.log_anomaly(
                    f"{link.name} waiting for parameter '{exc.parameter_key}'",
                    severity="INFO",
                    context={"chain": self.name, "link": link.name},
                )
            return self._not_ready_result(link), None

        stage_duration = time.perf_counter() - stage_start
        if self.audit_logger:
            self.audit_logger.log_stage_end(
                link.name,
                len(output),
                stage_duration,
                metadata={"recomputed": was_stale},
            )

        if self.metrics_collector:
            tags = {"chain": self.name, "link": link.name}
            self.metrics_collector.record_timing("link_duration_seconds", stage_duration, tags)
            self.metrics_collector.record_count(
                "rows_filtered_total", input_count - len(output), tags
            )
            if was_stale:
                self.metrics_collector.record_count("link_recomputes_total", 1, tags)

        link_result = LinkResult(
            link_name=link.name,
            column_key=link.column_key,
            parameter_key=link.parameter_key,
            parameter_value=link.current_parameter(),
            status=LinkStatus.READY,
            input_count=input_count,
            output_count=len(output),
            duration_seconds=stage_duration,
            recomputed=was_stale,
        )
        return link_result, output

    @staticmethod
    def _not_ready_result(link: DependentFilter) -> LinkResult:
        return LinkResult(
            link_name=link.name,
            column_key=link.column_key,
            parameter_key=link.parameter_key,
            parameter_value=link.current_parameter(),
            status=LinkStatus.NOT_READY,
        )
