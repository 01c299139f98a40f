"""
Dependent Filter - One Link of a Filter Chain.

Given an upstream dataset (raw or produced by another link), a parameter
source and a column name, yields the upstream rows whose value in that
column equals the current parameter value.

Behaviour:
    1. The column reference is checked against the upstream columns at
       construction; an unknown column raises BadReference immediately.
    2. An unset parameter raises NotReady, which is distinct from a result
       with zero matching rows.
    3. The link recomputes only after its parameter changes or its
       upstream link is invalidated.

The column name is used strictly as a mapping key into rows and into the
parameter source.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple, Union

from filter_chain.domain.dataset import Dataset
from filter_chain.domain.errors import BadReference, NotReady
from filter_chain.interfaces.dataset_producer import DatasetProducer
from filter_chain.interfaces.parameter_source import ParameterSource
from filter_chain.reactive.computation import Computation, StaticSource

logger = logging.getLogger(__name__)


class DependentFilter(Computation[Dataset]):
    """Filter upstream rows by equality with a live parameter value."""

    def __init__(
        self,
        upstream: Union[Dataset, DatasetProducer],
        parameter_source: ParameterSource,
        column_key: str,
        parameter_key: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Declare the link and subscribe to its inputs.

        Args:
            upstream: Raw dataset or the previous link in a chain
            parameter_source: Where the current parameter value is read from
            column_key: Column compared against the parameter value
            parameter_key: Parameter to read (defaults to column_key)
            name: Link name for logs (defaults to "<column_key>_filter")

        Raises:
            ValueError: If column_key is empty
            BadReference: If column_key is not an upstream column
        """
        if not isinstance(column_key, str) or not column_key:
            raise ValueError(f"column_key must be a non-empty string, got {column_key!r}")

        super().__init__(name or f"{column_key}_filter")

        if isinstance(upstream, Dataset):
            upstream = StaticSource(upstream)
        if column_key not in upstream.columns:
            raise BadReference(column_key, upstream.columns)

        self._upstream = upstream
        self._source = parameter_source
        self._column_key = column_key
        self._parameter_key = parameter_key or column_key

        self._track(parameter_source.subscribe(self._parameter_key, self._on_parameter_change))
        self._track(upstream.add_observer(self.invalidate))

    @property
    def upstream(self) -> DatasetProducer:
        return self._upstream

    @property
    def column_key(self) -> str:
        return self._column_key

    @property
    def parameter_key(self) -> str:
        return self._parameter_key

    @property
    def columns(self) -> Tuple[str, ...]:
        """Filtering keeps every column, so these are the upstream columns."""
        return self._upstream.columns

    def current_parameter(self) -> Optional[Any]:
        return self._source.get(self._parameter_key)

    def _on_parameter_change(self, key: str, value: Any) -> None:
        self.invalidate()

    def _evaluate(self) -> Dataset:
        value = self._source.get(self._parameter_key)
        if value is None:
            raise NotReady(self._parameter_key, self.name)

        dataset = self._upstream.compute()
        result = dataset.filter_equal(self._column_key, value)

        logger.debug(
            f"{self.name}: {self._column_key}=={value!r} kept "
            f"{len(result)}/{len(dataset)} rows"
        )
        return result
