"""
Unit Tests for FilterChain.

Test Aspects Covered:
    ✅ Business Logic: Link wiring, traced evaluation, audit trail
    ✅ Error Handling: Duplicate names, NotReady stops the trail
    ✅ Observability: Audit events and metrics recorded
"""

from __future__ import annotations

import pytest

from filter_chain.adapters.metrics_collector import InMemoryMetricsCollector
from filter_chain.chain.filter_chain import FilterChain
from filter_chain.domain.dataset import Dataset
from filter_chain.domain.errors import BadReference, NotReady
from filter_chain.domain.value_objects import LinkStatus
from filter_chain.observability.observability_manager import ObservabilityManager
from filter_chain.reactive.store import ParameterStore


@pytest.fixture
def chain(
    orders_dataset: Dataset,
    parameter_store: ParameterStore,
    observability: ObservabilityManager,
    metrics_collector: InMemoryMetricsCollector,
) -> FilterChain:
    """Chain TERRITORY -> CUSTOMER -> STATUS."""
    chain = FilterChain(
        orders_dataset,
        parameter_store,
        name="orders",
        audit_logger=observability,
        metrics_collector=metrics_collector,
    )
    chain.add("TERRITORY")
    chain.add("CUSTOMER", parameter_key="customer")
    chain.add("STATUS")
    return chain


class TestFilterChainBuilding:
    """Test cases for declaring links."""

    def test_links_read_previous_link(self, chain: FilterChain) -> None:
        """
        SCENARIO: Three links added
        EXPECTED: Each link's upstream is the previous link
        """
        links = chain.links

        assert len(chain) == 3
        assert links[1].upstream is links[0]
        assert links[2].upstream is links[1]
        assert chain.last is links[2]
        assert chain["CUSTOMER"].parameter_key == "customer"

    def test_duplicate_link_name_rejected(self, chain: FilterChain) -> None:
        """
        SCENARIO: Add a second link named TERRITORY
        EXPECTED: ValueError
        """
        with pytest.raises(ValueError, match="already exists"):
            chain.add("TERRITORY")

    def test_same_column_twice_with_distinct_names(self, chain: FilterChain) -> None:
        """
        SCENARIO: Same column, different link name
        EXPECTED: Accepted
        """
        link = chain.add("TERRITORY", parameter_key="territory2", name="territory_again")
        assert chain.last is link

    def test_bad_reference_at_add(self, chain: FilterChain) -> None:
        """
        SCENARIO: Add a link on REGION
        EXPECTED: BadReference; chain unchanged
        """
        with pytest.raises(BadReference):
            chain.add("REGION")
        assert len(chain) == 3

    def test_empty_chain_computes_dataset(
        self, orders_dataset: Dataset, parameter_store: ParameterStore
    ) -> None:
        """
        SCENARIO: Chain without links
        EXPECTED: compute returns the dataset itself
        """
        chain = FilterChain(orders_dataset, parameter_store)
        assert chain.compute() is orders_dataset


class TestFilterChainCompute:
    """Test cases for compute()."""

    def test_compute_applies_all_links(
        self, chain: FilterChain, parameter_store: ParameterStore
    ) -> None:
        """
        SCENARIO: All three parameters set
        EXPECTED: Conjunctive filter result
        """
        # Arrange
        parameter_store.update(
            {"TERRITORY": "EMEA", "customer": "Acme", "STATUS": "Shipped"}
        )

        # Act
        result = chain.compute()

        # Assert
        assert [r["QTY"] for r in result.iter_rows()] == [10, 3]

    def test_compute_not_ready(
        self, chain: FilterChain, parameter_store: ParameterStore
    ) -> None:
        """
        SCENARIO: Middle parameter missing
        EXPECTED: NotReady for "customer"
        """
        parameter_store.update({"TERRITORY": "EMEA", "STATUS": "Shipped"})

        with pytest.raises(NotReady) as exc_info:
            chain.compute()
        assert exc_info.value.parameter_key == "customer"


class TestFilterChainEvaluate:
    """Test cases for evaluate()."""

    def test_ready_evaluation(
        self,
        chain: FilterChain,
        parameter_store: ParameterStore,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        """
        SCENARIO: All parameters set
        EXPECTED: READY result with per-link counts and metrics
        """
        # Arrange
        parameter_store.update(
            {"TERRITORY": "EMEA", "customer": "Acme", "STATUS": "On Hold"}
        )

        # Act
        result = chain.evaluate(correlation_id="corr-1")

        # Assert
        assert result.is_ready
        assert result.correlation_id == "corr-1"
        assert result.output == [
            {"TERRITORY": "EMEA", "CUSTOMER": "Acme", "STATUS": "On Hold", "QTY": 2}
        ]
        counts = [(l.input_count, l.output_count) for l in result.links]
        assert counts == [(7, 4), (4, 3), (3, 1)]
        assert all(l.recomputed for l in result.links)
        assert result.links[0].reduction_ratio == pytest.approx(3 / 7)
        assert metrics_collector.values("link_recomputes_total", chain="orders") == [1, 1, 1]
        assert "chain_evaluation_seconds" in metrics_collector.get_metrics()

    def test_second_evaluation_reuses_cache(
        self, chain: FilterChain, parameter_store: ParameterStore
    ) -> None:
        """
        SCENARIO: Evaluate twice without changes
        EXPECTED: Identical output, nothing recomputed the second time
        """
        parameter_store.update(
            {"TERRITORY": "EMEA", "customer": "Acme", "STATUS": "Shipped"}
        )

        first = chain.evaluate()
        second = chain.evaluate()

        assert first.output == second.output
        assert not any(l.recomputed for l in second.links)

    def test_downstream_change_recomputes_only_downstream(
        self, chain: FilterChain, parameter_store: ParameterStore
    ) -> None:
        """
        SCENARIO: Change only the last link's parameter
        EXPECTED: Only the last link recomputes
        """
        parameter_store.update(
            {"TERRITORY": "EMEA", "customer": "Acme", "STATUS": "Shipped"}
        )
        chain.evaluate()

        parameter_store.set("STATUS", "On Hold")
        result = chain.evaluate()

        assert [l.recomputed for l in result.links] == [False, False, True]

    def test_upstream_change_invalidates_downstream(
        self, chain: FilterChain, parameter_store: ParameterStore
    ) -> None:
        """
        SCENARIO: Change the first link's parameter
        EXPECTED: Every link recomputes
        """
        parameter_store.update(
            {"TERRITORY": "EMEA", "customer": "Acme", "STATUS": "Shipped"}
        )
        chain.evaluate()

        parameter_store.set("TERRITORY", "NA")
        result = chain.evaluate()

        assert [l.recomputed for l in result.links] == [True, True, True]
        assert result.output == []

    def test_not_ready_stops_trail(
        self,
        chain: FilterChain,
        parameter_store: ParameterStore,
        observability: ObservabilityManager,
    ) -> None:
        """
        SCENARIO: Middle parameter unset
        EXPECTED: First link READY, rest NOT_READY, no output
        """
        # Arrange
        parameter_store.update({"TERRITORY": "EMEA", "STATUS": "Shipped"})

        # Act
        result = chain.evaluate()

        # Assert
        assert not result.is_ready
        assert result.output is None
        assert [l.status for l in result.links] == [
            LinkStatus.READY,
            LinkStatus.NOT_READY,
            LinkStatus.NOT_READY,
        ]
        assert result.waiting_on == "customer"
        assert result.links[2].parameter_value == "Shipped"
        anomalies = observability.get_events("anomaly")
        assert anomalies and anomalies[-1]["link"] == "CUSTOMER"

    def test_not_ready_stage_is_closed(
        self,
        chain: FilterChain,
        parameter_store: ParameterStore,
        observability: ObservabilityManager,
    ) -> None:
        """
        SCENARIO: Second link waits for its parameter
        EXPECTED: Every stage_start has a stage_end; the waiting one says NOT_READY
        """
        # Arrange
        parameter_store.set("TERRITORY", "EMEA")

        # Act
        chain.evaluate()

        # Assert
        starts = [e["stage_name"] for e in observability.get_events("stage_start")]
        ends = observability.get_events("stage_end")
        assert starts == ["TERRITORY", "CUSTOMER"]
        assert [e["stage_name"] for e in ends] == starts
        assert ends[1]["status"] == "NOT_READY"
        assert ends[1]["output_count"] == 0

    def test_audit_events_logged(
        self,
        chain: FilterChain,
        parameter_store: ParameterStore,
        observability: ObservabilityManager,
    ) -> None:
        """
        SCENARIO: Ready evaluation with an audit logger
        EXPECTED: One stage_start and stage_end per link
        """
        parameter_store.update(
            {"TERRITORY": "NA", "customer": "Globex", "STATUS": "Shipped"}
        )

        chain.evaluate()

        assert len(observability.get_events("stage_start")) == 3
        ends = observability.get_events("stage_end")
        assert [e["stage_name"] for e in ends] == ["TERRITORY", "CUSTOMER", "STATUS"]

    def test_dispose_releases_subscriptions(
        self, chain: FilterChain, parameter_store: ParameterStore
    ) -> None:
        """
        SCENARIO: Dispose the chain
        EXPECTED: No subscribers remain on the store
        """
        chain.dispose()

        for key in ("TERRITORY", "customer", "STATUS"):
            assert parameter_store.subscriber_count(key) == 0
        assert all(link.is_disposed for link in chain.links)
