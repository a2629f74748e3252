"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that all components work together correctly.
Integration tests use the MockMarketDataProvider to avoid external
dependencies while testing the full workflow.

Test Files:
    - test_screening_pipeline.py: Full screening workflow
    - test_cli.py: Command-line entry point
"""
