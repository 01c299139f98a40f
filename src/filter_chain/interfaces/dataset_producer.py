"""
Dataset Producer Protocol.

Anything a filter link can read from: a wrapped raw dataset or another
link. Producers publish their column set up front so a downstream link can
check its column reference at setup time, before any data is computed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from filter_chain.domain.dataset import Dataset


@runtime_checkable
class DatasetProducer(Protocol):
    """Pull-based source of a dataset."""

    @property
    def name(self) -> str:
        """Name used in logs and audit records."""
        ...

    @property
    def columns(self) -> Tuple[str, ...]:
        """Columns every produced dataset will carry."""
        ...

    def compute(self) -> "Dataset":
        """
        Return the latest dataset.

        Raises:
            NotReady: If a parameter this producer depends on is unset
        """
        ...

    def add_observer(self, observer: Callable[[], None]) -> Callable[[], None]:
        """
        Register a callback fired when this producer becomes stale.

        Returns:
            Callable that removes the observer
        """
        ...
