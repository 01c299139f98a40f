"""
Domain Layer - Datasets, Errors and Evaluation Records.

Modules:
    - dataset: Immutable tabular Dataset and the exact-match predicate
    - errors: NotReady / BadReference error kinds
    - value_objects: LinkResult / ChainResult audit records
"""

from filter_chain.domain.dataset import Dataset, Record, Row, values_match
from filter_chain.domain.errors import (
    BadReference,
    ChainConfigError,
    FilterChainError,
    NotReady,
)
from filter_chain.domain.value_objects import ChainResult, LinkResult, LinkStatus

__all__ = [
    "Dataset",
    "Record",
    "Row",
    "values_match",
    "BadReference",
    "ChainConfigError",
    "FilterChainError",
    "NotReady",
    "ChainResult",
    "LinkResult",
    "LinkStatus",
]
