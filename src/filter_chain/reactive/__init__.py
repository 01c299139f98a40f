"""
Reactive Package - Minimal Host Stand-ins.

Just enough of a reactive host to drive filter chains in-process:
    - ParameterStore: string-keyed value store with change notification
    - Computation: lazy value that recomputes after being marked stale
    - StaticSource: raw dataset wrapped as a never-stale computation

There is no scheduler and no automatic dependency discovery; every
dependency is declared explicitly when a computation is built.
"""

from filter_chain.reactive.computation import Computation, StaticSource
from filter_chain.reactive.store import ParameterStore

__all__ = ["Computation", "ParameterStore", "StaticSource"]
