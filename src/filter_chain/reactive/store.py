"""
Parameter Store - Reactive Value Store Keyed by String.

In-process stand-in for the host UI layer's store of current selections.
Implements the ParameterSource protocol.

Design Notes:
    - None means unset; setting a key to None unsets it
    - Subscribers are notified synchronously, in subscription order
    - Only effective changes notify (same value again is a no-op)
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, List, Mapping, Optional

from filter_chain.domain.dataset import values_match
from filter_chain.interfaces.parameter_source import ChangeCallback, Unsubscribe

logger = logging.getLogger(__name__)


class ParameterStore:
    """Mutable mapping of parameter key -> current value, with change hooks."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        """
        Initialize store.

        Args:
            initial: Optional initial values (None values are skipped)
        """
        self._values: Dict[str, Any] = {}
        self._subscribers: Dict[str, Dict[int, ChangeCallback]] = {}
        self._ids = itertools.count(1)
        for key, value in (initial or {}).items():
            self._check_key(key)
            if value is not None:
                self._values[key] = value

    def get(self, key: str) -> Optional[Any]:
        return self._values.get(key)

    def is_set(self, key: str) -> bool:
        return key in self._values

    def set(self, key: str, value: Any) -> bool:
        """
        Set a parameter value.

        Args:
            key: Parameter identifier
            value: New value; None unsets the parameter

        Returns:
            True if the stored value changed
        """
        if value is None:
            return self.unset(key)
        self._check_key(key)

        if key in self._values and values_match(self._values[key], value):
            return False

        self._values[key] = value
        logger.debug(f"Parameter {key!r} set to {value!r}")
        self._notify(key, value)
        return True

    def unset(self, key: str) -> bool:
        """
        Remove a parameter value.

        Returns:
            True if the parameter was set before
        """
        if key not in self._values:
            return False
        del self._values[key]
        logger.debug(f"Parameter {key!r} unset")
        self._notify(key, None)
        return True

    def update(self, values: Mapping[str, Any]) -> List[str]:
        """
        Apply several changes, notifying per key.

        Returns:
            Keys whose value actually changed
        """
        return [key for key, value in values.items() if self.set(key, value)]

    def snapshot(self) -> Dict[str, Any]:
        """Copy of all currently set parameters."""
        return dict(self._values)

    def subscribe(self, key: str, callback: ChangeCallback) -> Unsubscribe:
        """Register ``callback`` for changes of ``key``."""
        self._check_key(key)
        token = next(self._ids)
        self._subscribers.setdefault(key, {})[token] = callback

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(key)
            if callbacks is not None:
                callbacks.pop(token, None)
                if not callbacks:
                    del self._subscribers[key]

        return unsubscribe

    def subscriber_count(self, key: str) -> int:
        return len(self._subscribers.get(key, {}))

    def _notify(self, key: str, value: Any) -> None:
        for callback in list(self._subscribers.get(key, {}).values()):
            callback(key, value)

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError(f"parameter key must be a non-empty string, got {key!r}")
