"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_indicators.py: Indicator engine formulas
    - test_domain.py: Value objects and entities
    - test_rule_stages.py: Gate and classifier boundaries
    - test_screening_rules.py: Rule chain ordering and scenarios
    - test_evaluation_context.py: Lazy indicator loading
    - test_config_loader.py: Configuration loading/validation
    - test_error_handler.py: Retry and rate limiter
    - test_finnhub_provider.py: Finnhub adapter with a mocked session
    - test_result_aggregator.py: Bucket building
    - test_metrics_collector.py: Metric summaries
"""
