"""
Parameter Source Protocol.

Defines the read side of the host's reactive-value store. A filter link
reads its parameter through this interface and subscribes to changes of
that one key so it can mark itself stale.

Design Notes:
    - ``None`` means absent or unset; there is no separate sentinel
    - Subscriptions are per key and return an unsubscribe callable
    - Read-only from the chain's perspective
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

# Called with (key, new_value) after a parameter changes
ChangeCallback = Callable[[str, Any], None]

# Removes a subscription; safe to call more than once
Unsubscribe = Callable[[], None]


@runtime_checkable
class ParameterSource(Protocol):
    """Capability to read current parameter values by key."""

    def get(self, key: str) -> Optional[Any]:
        """
        Return the current value of ``key``.

        Args:
            key: Parameter identifier

        Returns:
            Current value, or None when the parameter is unset
        """
        ...

    def subscribe(self, key: str, callback: ChangeCallback) -> Unsubscribe:
        """
        Register ``callback`` for changes of ``key``.

        Args:
            key: Parameter identifier
            callback: Invoked synchronously after every effective change

        Returns:
            Callable that removes the subscription
        """
        ...
