"""
Validation Package - Setup-Time Checks.

This package provides validation for:
    - ChainValidator: Validate chain declarations against dataset columns

Design Principles:
    - Fail fast at setup, before any subscription is made
    - Clear, actionable error messages
"""

from filter_chain.validation.chain_validator import ChainValidator

__all__ = ["ChainValidator"]
