"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external dependencies. Following the Dependency Inversion Principle, the
pipeline depends on these abstractions, not on concrete implementations.

Protocols:
    - PriceDataProvider: Daily price history per symbol
    - FundamentalsProvider: Company fundamentals per symbol
    - SymbolSource: Lazy, restartable ticker enumeration
    - RuleStage: A gate of the screening rule chain
    - AuditLogger: Logging abstraction for audit trail
    - MetricsCollector: Performance metrics abstraction

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - All methods have clear contracts in docstrings
"""

from momentum_screener.interfaces.audit_logger import AuditLogger
from momentum_screener.interfaces.metrics_collector import MetricsCollector
from momentum_screener.interfaces.providers import (
    FundamentalsProvider,
    PriceDataProvider,
    StaticSymbolSource,
    SymbolSource,
)
from momentum_screener.interfaces.rule_stage import RuleStage

__all__ = [
    "AuditLogger",
    "FundamentalsProvider",
    "MetricsCollector",
    "PriceDataProvider",
    "RuleStage",
    "StaticSymbolSource",
    "SymbolSource",
]
