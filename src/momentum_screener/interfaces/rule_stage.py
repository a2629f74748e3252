"""
Rule Stage Protocol.

Defines the abstract interface for the gates of the screening rule chain.
Each gate checks one aspect of a candidate (price and liquidity, volatility,
trend alignment, overbought) while conforming to a common interface.

A rule stage is responsible for:
    - Deciding pass/fail for a single evaluation context
    - Returning a human-readable detail when it fails
    - Naming the rejection reason recorded when it fails

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Stages are stateless and synchronous (all state via EvaluationContext)
    - Thresholds injected via constructor
    - Missing data fails the stage, never passes it
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from momentum_screener.domain.entities import RejectionReason
    from momentum_screener.pipeline.evaluation_context import EvaluationContext


@runtime_checkable
class RuleStage(Protocol):
    """Abstract interface for a gate in the rule chain."""

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        ...

    @property
    def reason(self) -> RejectionReason:
        """Rejection reason recorded when this stage fails."""
        ...

    def check(self, context: EvaluationContext) -> Tuple[bool, str]:
        """
        Check one candidate.

        Args:
            context: Price, fundamentals and lazily computed indicators

        Returns:
            Tuple of (passed, detail); detail is empty when passed
        """
        ...
