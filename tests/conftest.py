"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pytest

from filter_chain.adapters.metrics_collector import InMemoryMetricsCollector
from filter_chain.domain.dataset import Dataset
from filter_chain.observability.observability_manager import ObservabilityManager
from filter_chain.reactive.store import ParameterStore


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def territory_dataset() -> Dataset:
    """The two-row territory/customer dataset."""
    return Dataset.from_records(
        [
            {"TERRITORY": "EMEA", "CUSTOMER": "Acme"},
            {"TERRITORY": "NA", "CUSTOMER": "Globex"},
        ]
    )


@pytest.fixture
def order_records() -> List[Dict[str, Any]]:
    """Orders across territories, customers and statuses."""
    return [
        {"TERRITORY": "EMEA", "CUSTOMER": "Acme", "STATUS": "Shipped", "QTY": 10},
        {"TERRITORY": "NA", "CUSTOMER": "Globex", "STATUS": "Shipped", "QTY": 4},
        {"TERRITORY": "EMEA", "CUSTOMER": "Initech", "STATUS": "On Hold", "QTY": 7},
        {"TERRITORY": "EMEA", "CUSTOMER": "Acme", "STATUS": "On Hold", "QTY": 2},
        {"TERRITORY": "APAC", "CUSTOMER": "Umbrella", "STATUS": "Shipped", "QTY": 9},
        {"TERRITORY": "NA", "CUSTOMER": "Acme", "STATUS": "Cancelled", "QTY": 1},
        {"TERRITORY": "EMEA", "CUSTOMER": "Acme", "STATUS": "Shipped", "QTY": 3},
    ]


@pytest.fixture
def orders_dataset(order_records: List[Dict[str, Any]]) -> Dataset:
    """Orders as a Dataset."""
    return Dataset.from_records(order_records)


@pytest.fixture
def parameter_store() -> ParameterStore:
    """Empty parameter store."""
    return ParameterStore()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def observability() -> ObservabilityManager:
    """Observability manager with console rendering."""
    return ObservabilityManager(use_json=False, log_level=logging.DEBUG)
