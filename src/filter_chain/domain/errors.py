"""
Domain Errors.

Two error kinds cover every failure of a filter chain:

    - NotReady: a required parameter is currently unset. Recoverable; the
      consumer simply shows nothing until the parameter is supplied.
    - BadReference: a column name does not exist in the dataset. This is a
      configuration error and is raised at setup time.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple


class FilterChainError(Exception):
    """Base class for all filter chain errors."""
    pass


class NotReady(FilterChainError):
    """Raised when a computation cannot proceed because a parameter is unset."""

    def __init__(self, parameter_key: str, link_name: Optional[str] = None) -> None:
        self.parameter_key = parameter_key
        self.link_name = link_name
        where = f" (link '{link_name}')" if link_name else ""
        super().__init__(f"parameter '{parameter_key}' is not set{where}")


class BadReference(FilterChainError):
    """Raised when one or more column references are absent from a dataset."""

    def __init__(
        self,
        column_keys: Iterable[str],
        available_columns: Sequence[str] = (),
    ) -> None:
        if isinstance(column_keys, str):
            column_keys = [column_keys]
        self.column_keys: Tuple[str, ...] = tuple(column_keys)
        self.available_columns: Tuple[str, ...] = tuple(available_columns)
        missing = ", ".join(repr(c) for c in self.column_keys)
        available = ", ".join(self.available_columns) or "<none>"
        super().__init__(
            f"unknown column(s) {missing}; available columns: {available}"
        )

    @property
    def column_key(self) -> str:
        """First offending column (the only one for single-link checks)."""
        return self.column_keys[0]


class ChainConfigError(FilterChainError):
    """Raised when a chain declaration is structurally invalid."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
