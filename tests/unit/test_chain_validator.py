"""
Unit Tests for ChainValidator.

Test Aspects Covered:
    ✅ Business Logic: Valid chains pass
    ✅ Error Handling: All unknown columns reported at once, empty chains
"""

from __future__ import annotations

import pytest

from filter_chain.config.models import ChainConfig, LinkConfig
from filter_chain.domain.errors import BadReference, ChainConfigError
from filter_chain.validation.chain_validator import ChainValidator

COLUMNS = ("TERRITORY", "CUSTOMER", "STATUS")


class TestChainValidator:
    """Test cases for ChainValidator."""

    def test_valid_chain_passes(self) -> None:
        """
        SCENARIO: Every link column exists
        EXPECTED: No exception
        """
        chain = ChainConfig(
            name="ok",
            links=[LinkConfig(column="TERRITORY"), LinkConfig(column="STATUS")],
        )

        ChainValidator().validate(chain, COLUMNS)

    def test_reports_every_unknown_column(self) -> None:
        """
        SCENARIO: Two unknown columns, one of them used twice
        EXPECTED: Single BadReference listing both once
        """
        # Arrange
        chain = ChainConfig(
            name="bad",
            links=[
                LinkConfig(column="REGION"),
                LinkConfig(column="TERRITORY"),
                LinkConfig(column="YEAR"),
                LinkConfig(column="REGION", name="region_again"),
            ],
        )

        # Act
        with pytest.raises(BadReference) as exc_info:
            ChainValidator().validate(chain, COLUMNS)

        # Assert
        assert exc_info.value.column_keys == ("REGION", "YEAR")
        assert "REGION" in str(exc_info.value)

    def test_empty_chain_rejected(self) -> None:
        """
        SCENARIO: Chain without links
        EXPECTED: ChainConfigError on field "links"
        """
        with pytest.raises(ChainConfigError) as exc_info:
            ChainValidator().validate(ChainConfig(name="empty"), COLUMNS)

        assert exc_info.value.field == "links"

    def test_empty_chain_allowed_when_configured(self) -> None:
        """
        SCENARIO: allow_empty=True
        EXPECTED: Empty chain accepted
        """
        ChainValidator(allow_empty=True).validate(ChainConfig(name="empty"), COLUMNS)
