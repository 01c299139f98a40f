"""
Chain Validator - Validate Chain Declarations Before Building.

Checks a chain declaration against the dataset columns before any link is
built or subscribed, and reports every bad column reference at once.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from filter_chain.config.models import ChainConfig
from filter_chain.domain.errors import BadReference, ChainConfigError

logger = logging.getLogger(__name__)


class ChainValidator:
    """
    Validates chain declarations.

    Validates:
        - The chain has at least one link
        - Every link column exists in the dataset
    """

    def __init__(self, allow_empty: bool = False) -> None:
        """
        Initialize validator.

        Args:
            allow_empty: Accept chains without links (pass-through chains)
        """
        self.allow_empty = allow_empty

    def validate(self, chain: ChainConfig, columns: Sequence[str]) -> None:
        """
        Validate a chain declaration.

        Args:
            chain: The chain declaration
            columns: Columns of the dataset the chain will read

        Raises:
            ChainConfigError: If the chain has no links
            BadReference: If any link references an unknown column
        """
        if not chain.links and not self.allow_empty:
            logger.error(f"Chain validation failed: '{chain.name}' has no links")
            raise ChainConfigError(f"chain '{chain.name}' has no links", field="links")

        known = set(columns)
        missing: List[str] = []
        for link in chain.links:
            if link.column not in known and link.column not in missing:
                missing.append(link.column)

        if missing:
            logger.error(
                f"Chain validation failed: '{chain.name}' references unknown "
                f"columns {missing}"
            )
            raise BadReference(missing, columns)
