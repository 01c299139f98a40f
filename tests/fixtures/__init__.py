"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample session configuration
    - profiles/: Profiles merged over sample_config.yaml

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""
