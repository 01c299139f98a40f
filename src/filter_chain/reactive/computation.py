"""
Derived Computations - Lazy, Invalidation-Driven Values.

A Computation caches its last successful output. Any declared input that
changes marks it stale; staleness propagates to downstream observers
immediately, but the value itself is only recomputed on the next
compute() call.

Lifecycle:
    - Declared once at setup time (subscriptions made in the constructor)
    - Lives for the session
    - dispose() drops every subscription; the computation becomes inert
"""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Dict, Generic, List, Tuple, TypeVar

from filter_chain.domain.dataset import Dataset
from filter_chain.interfaces.parameter_source import Unsubscribe

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class Computation(Generic[T]):
    """Base class for lazily recomputed, invalidation-driven values."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._stale = True
        self._cached: object = _UNSET
        self._observers: Dict[int, Callable[[], None]] = {}
        self._observer_ids = itertools.count(1)
        self._sources: List[Unsubscribe] = []
        self._disposed = False
        self.recompute_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_stale(self) -> bool:
        return self._stale

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def compute(self) -> T:
        """
        Return the current value, recomputing only if stale.

        A NotReady raised by the evaluation is not cached: the computation
        stays stale and tries again on the next call.

        Raises:
            NotReady: If a required input is unset
            RuntimeError: If the computation has been disposed
        """
        if self._disposed:
            raise RuntimeError(f"computation '{self._name}' has been disposed")

        if not self._stale:
            return self._cached  # type: ignore[return-value]

        self.recompute_count += 1
        value = self._evaluate()
        self._cached = value
        self._stale = False
        return value

    def invalidate(self) -> None:
        """Mark stale and propagate to observers that are still fresh."""
        if self._stale:
            return
        self._stale = True
        logger.debug(f"{self._name} invalidated")
        for observer in list(self._observers.values()):
            observer()

    def add_observer(self, observer: Callable[[], None]) -> Unsubscribe:
        """Register ``observer`` to be called whenever this becomes stale."""
        token = next(self._observer_ids)
        self._observers[token] = observer

        def remove() -> None:
            self._observers.pop(token, None)

        return remove

    def observer_count(self) -> int:
        return len(self._observers)

    def dispose(self) -> None:
        """Disconnect from every source and observer."""
        if self._disposed:
            return
        for unsubscribe in self._sources:
            unsubscribe()
        self._sources.clear()
        self._observers.clear()
        self._cached = _UNSET
        self._stale = True
        self._disposed = True
        logger.debug(f"{self._name} disposed")

    def _track(self, unsubscribe: Unsubscribe) -> None:
        """Keep a subscription handle so dispose() can release it."""
        self._sources.append(unsubscribe)

    def _evaluate(self) -> T:
        raise NotImplementedError

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else "stale" if self._stale else "fresh"
        return f"{type(self).__name__}({self._name!r}, {state})"


class StaticSource(Computation[Dataset]):
    """Wraps a raw dataset so it can head a chain. Never becomes stale."""

    def __init__(self, dataset: Dataset, name: str = "dataset") -> None:
        super().__init__(name)
        self._dataset = dataset

    @property
    def columns(self) -> Tuple[str, ...]:
        return self._dataset.columns

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def _evaluate(self) -> Dataset:
        return self._dataset
