"""
Render Sink.

Stand-in for the host rendering layer: pulls the latest output of a
computation whenever the UI region needs redrawing. While a parameter is
unset the region shows nothing; it never crashes on NotReady.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

from filter_chain.domain.dataset import Dataset
from filter_chain.domain.errors import NotReady

logger = logging.getLogger(__name__)


class _Computes(Protocol):
    def compute(self) -> Dataset:
        ...


class RenderSink:
    """Consumes a computation's latest dataset as plain records."""

    def __init__(self, computation: _Computes, name: str = "table") -> None:
        """
        Args:
            computation: A DependentFilter, FilterChain or other producer
            name: Region name for logs
        """
        self.computation = computation
        self.name = name
        self.render_count = 0
        self._last_rendered: Optional[List[Dict[str, Any]]] = None

    @property
    def last_rendered(self) -> Optional[List[Dict[str, Any]]]:
        """Records from the most recent render, None while waiting."""
        return self._last_rendered

    @property
    def is_waiting(self) -> bool:
        return self.render_count > 0 and self._last_rendered is None

    def render(self) -> Optional[List[Dict[str, Any]]]:
        """
        Pull the latest output.

        Returns:
            Records to display, or None while waiting for input

        Raises:
            BadReference: Configuration errors are never swallowed
        """
        self.render_count += 1
        try:
            dataset = self.computation.compute()
        except NotReady as exc:
            logger.debug(f"{self.name}: waiting for parameter '{exc.parameter_key}'")
            self._last_rendered = None
            return None

        self._last_rendered = dataset.to_records()
        return self._last_rendered
