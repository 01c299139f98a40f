"""
Test Suite for Filter Chain.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Session-level and chain property tests
    - fixtures/: Shared test data and configurations

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/filter_chain           # With coverage
"""
