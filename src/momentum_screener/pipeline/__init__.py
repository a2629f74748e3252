"""
Pipeline Package - Orchestration and Aggregation.

Components:
    - ScreeningPipeline: Per-symbol fan-out/fan-in orchestrator
    - EvaluationContext: Per-symbol data container with lazy indicators
    - ResultAggregator: Partitions outcomes into the output buckets

The pipeline is responsible for:
    - Acquiring price history and fundamentals per symbol
    - Rejecting symbols whose data is unavailable or too short
    - Applying the rule chain
    - Collecting metrics and audit trail
    - Generating the final ScreeningReport

Design Principles:
    - All dependencies injected via constructor
    - Per-symbol isolation: one failure never aborts the run
"""

from momentum_screener.pipeline.aggregator import ResultAggregator
from momentum_screener.pipeline.evaluation_context import EvaluationContext
from momentum_screener.pipeline.screening_pipeline import ScreeningPipeline

__all__ = ["EvaluationContext", "ResultAggregator", "ScreeningPipeline"]
