"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_dataset.py: Dataset construction and exact-match filtering
    - test_parameter_store.py: Parameter store and change notification
    - test_computation.py: Lazy recompute and invalidation
    - test_dependent_filter.py: Single filter link
    - test_filter_chain.py: Chain building and traced evaluation
    - test_render_sink.py: Rendering NotReady as "no output"
    - test_config_loader.py: Configuration loading/validation
    - test_chain_validator.py: Setup-time chain validation
    - test_observability_manager.py: structlog events and metrics
    - test_metrics_collector.py: In-memory metrics
"""
