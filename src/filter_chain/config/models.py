"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LoggingConfig(BaseModel):
    """Logging settings for a session."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_output: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class LinkConfig(BaseModel):
    """One dependent filter link."""

    column: str = Field(..., min_length=1, description="Column to compare")
    parameter: Optional[str] = Field(
        default=None, min_length=1, description="Parameter key (defaults to column)"
    )
    name: Optional[str] = Field(
        default=None, min_length=1, description="Link name (defaults to column)"
    )

    @property
    def link_name(self) -> str:
        return self.name or self.column

    @property
    def parameter_key(self) -> str:
        return self.parameter or self.column


class ChainConfig(BaseModel):
    """A named chain of links, applied in order."""

    name: str = Field(..., min_length=1)
    links: List[LinkConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_link_names(self) -> "ChainConfig":
        names = [link.link_name for link in self.links]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate link names in chain '{self.name}': {duplicates}")
        return self


class SessionConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    chains: List[ChainConfig] = Field(default_factory=list)
    parameters: Dict[str, Any] = Field(
        default_factory=dict, description="Initial parameter values"
    )

    @model_validator(mode="after")
    def _unique_chain_names(self) -> "SessionConfig":
        names = [chain.name for chain in self.chains]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate chain names: {duplicates}")
        return self
