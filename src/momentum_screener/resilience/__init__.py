"""
Resilience Package - Error Handling and Fault Tolerance.

This package provides resilience patterns for the provider adapters:
    - ProviderUnavailable: Failure signal of every data adapter
    - ErrorHandler: Retry with exponential backoff
    - RateLimiter: Request pacing shared across worker threads

Design Principles:
    - A failed data call degrades one symbol, never the batch
    - Retry only where the caller cannot degrade (symbol listing)
"""

from momentum_screener.resilience.error_handler import (
    ErrorHandler,
    ProviderUnavailable,
    RateLimiter,
    RetryConfig,
    RetryExhausted,
)

__all__ = [
    "ErrorHandler",
    "ProviderUnavailable",
    "RateLimiter",
    "RetryConfig",
    "RetryExhausted",
]
