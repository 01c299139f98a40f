"""
Integration Tests - End-to-End Session Tests.

These tests verify that parameter store, chains, render sinks and
observability work together over the whole session lifecycle.

Test Files:
    - test_session.py: Session lifecycle and configured chains
    - test_chain_properties.py: Soundness, idempotence, composition
"""
