"""
Value Objects for Domain Layer.

Immutable records describing one evaluation of a filter chain. They form
the audit trail returned by FilterChain.evaluate().
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Plain-record rendering of a dataset
RecordList = List[Dict[str, Any]]


class LinkStatus(str, Enum):
    """Outcome of pulling a single chain link."""

    READY = "READY"
    NOT_READY = "NOT_READY"


class LinkResult(BaseModel):
    """Result of pulling one link during an evaluation."""

    link_name: str
    column_key: str
    parameter_key: str
    parameter_value: Any = None
    status: LinkStatus
    input_count: Optional[int] = Field(
        default=None, ge=0, description="Rows received from upstream"
    )
    output_count: Optional[int] = Field(
        default=None, ge=0, description="Rows that matched the parameter"
    )
    duration_seconds: float = Field(default=0.0, ge=0)
    recomputed: bool = Field(
        default=False, description="False when the cached output was reused"
    )

    model_config = {"frozen": True}

    @property
    def reduction_ratio(self) -> float:
        """Share of input rows removed (0.0 = none removed, 1.0 = all)."""
        if not self.input_count or self.output_count is None:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)


class ChainResult(BaseModel):
    """Complete result of evaluating a chain."""

    chain_name: str
    correlation_id: str
    status: LinkStatus
    links: List[LinkResult] = Field(default_factory=list)
    output: Optional[RecordList] = Field(
        default=None, description="Final rows, None while not ready"
    )
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def is_ready(self) -> bool:
        return self.status is LinkStatus.READY

    @property
    def waiting_on(self) -> Optional[str]:
        """Parameter key of the first link that was not ready."""
        for link in self.links:
            if link.status is LinkStatus.NOT_READY:
                return link.parameter_key
        return None
