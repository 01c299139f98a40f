"""
Tabular Dataset.

An immutable, ordered sequence of rows. Each row is a read-only mapping of
column names to scalar values. Filtering never mutates a dataset; it produces
a new one that shares the surviving rows in their original order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, model_validator

from filter_chain.domain.errors import BadReference

# Row: column name -> value (read-only once inside a Dataset)
Row = Mapping[str, Any]
Record = Dict[str, Any]


def values_match(left: Any, right: Any) -> bool:
    """
    Exact equality used by every filter.

    Plain ``==`` except that booleans only ever equal booleans, so a
    parameter of ``True`` never selects rows holding ``1``.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


class Dataset(BaseModel):
    """Immutable tabular dataset with an explicit column set."""

    columns: Tuple[str, ...] = Field(
        default=(), description="Ordered column names"
    )
    rows: Tuple[Record, ...] = Field(default=(), description="Rows in source order")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _infer_columns(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("columns"):
            seen: Dict[str, None] = {}
            for row in data.get("rows") or ():
                for key in row:
                    seen.setdefault(key, None)
            data = {**data, "columns": tuple(seen)}
        return data

    @model_validator(mode="after")
    def _check_rows(self) -> "Dataset":
        if len(set(self.columns)) != len(self.columns):
            raise ValueError(f"duplicate column names in {self.columns}")
        known = set(self.columns)
        for index, row in enumerate(self.rows):
            unknown = [key for key in row if key not in known]
            if unknown:
                raise ValueError(f"row {index} has unknown columns {unknown}")
        object.__setattr__(
            self, "rows", tuple(MappingProxyType(dict(row)) for row in self.rows)
        )
        return self

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Optional[Sequence[str]] = None,
    ) -> "Dataset":
        """
        Build a dataset from plain mappings.

        Args:
            records: Row mappings, in order
            columns: Column names; inferred from the records when omitted

        Returns:
            Validated Dataset
        """
        return cls(
            columns=tuple(columns) if columns else (),
            rows=tuple(dict(r) for r in records),
        )

    def __len__(self) -> int:
        return len(self.rows)

    def has_column(self, name: str) -> bool:
        return name in self.columns

    def require_column(self, name: str) -> None:
        """Raise BadReference unless ``name`` is one of our columns."""
        if not self.has_column(name):
            raise BadReference(name, self.columns)

    def iter_rows(self) -> Iterator[Row]:
        return iter(self.rows)

    def to_records(self) -> List[Record]:
        """Plain dict copies of every row."""
        return [dict(row) for row in self.rows]

    def filter_equal(self, column: str, value: Any) -> "Dataset":
        """
        Keep rows whose ``column`` value exactly equals ``value``.

        Args:
            column: Column to compare
            value: Value to match (see values_match)

        Returns:
            New Dataset with the same columns and the matching rows in order

        Raises:
            BadReference: If column is not part of this dataset
        """
        self.require_column(column)
        kept = tuple(
            row for row in self.rows if values_match(row.get(column), value)
        )
        # rows were validated on the way in
        return Dataset.model_construct(columns=self.columns, rows=kept)
