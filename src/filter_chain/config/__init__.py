"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - SessionConfig: Root configuration object
    - LoggingConfig: Log level and renderer
    - ChainConfig: Named chain and its ordered links
    - LinkConfig: Column / parameter pair for one link

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles merged over a base file
"""

from filter_chain.config.loader import ConfigLoader, load_config, merge_config_dicts
from filter_chain.config.models import (
    ChainConfig,
    LinkConfig,
    LoggingConfig,
    SessionConfig,
)

__all__ = [
    "ChainConfig",
    "ConfigLoader",
    "LinkConfig",
    "LoggingConfig",
    "SessionConfig",
    "load_config",
    "merge_config_dicts",
]
