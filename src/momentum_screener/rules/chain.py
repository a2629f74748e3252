"""
Screening Rules - Ordered, Short-Circuiting Rule Chain.

Gates are evaluated top to bottom. The first failing gate ends the
evaluation and its rejection reason is recorded; later gates are never
consulted. Symbols that pass every gate are classified by momentum.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from momentum_screener.config.models import RuleThresholds
from momentum_screener.domain.entities import RuleDecision
from momentum_screener.interfaces.rule_stage import RuleStage
from momentum_screener.rules.stages import (
    MomentumClassifier,
    OverboughtGate,
    PriceLiquidityGate,
    TrendAlignmentGate,
    VolatilityGate,
)

if TYPE_CHECKING:
    from momentum_screener.pipeline.evaluation_context import EvaluationContext

logger = logging.getLogger(__name__)


class ScreeningRules:
    """Ordered gates followed by a momentum classifier."""

    def __init__(
        self,
        gates: Sequence[RuleStage],
        classifier: MomentumClassifier,
    ) -> None:
        """
        Initialize the rule chain.

        Args:
            gates: Gates in evaluation order
            classifier: Final classification stage
        """
        self.gates: List[RuleStage] = list(gates)
        self.classifier = classifier

    @classmethod
    def default(cls, thresholds: Optional[RuleThresholds] = None) -> "ScreeningRules":
        """Build the canonical chain."""
        thresholds = thresholds or RuleThresholds()
        return cls(
            gates=[
                PriceLiquidityGate(thresholds),
                VolatilityGate(thresholds),
                TrendAlignmentGate(),
                OverboughtGate(thresholds),
            ],
            classifier=MomentumClassifier(thresholds),
        )

    @property
    def stage_names(self) -> List[str]:
        return [g.name for g in self.gates] + [self.classifier.name]

    def evaluate(self, context: "EvaluationContext") -> RuleDecision:
        """
        Run the chain for one candidate.

        Args:
            context: Candidate data

        Returns:
            RuleDecision with category, and reason/detail when rejected
        """
        for gate in self.gates:
            passed, detail = gate.check(context)
            if not passed:
                logger.debug(f"{context.symbol} rejected by {gate.name}: {detail}")
                return RuleDecision.reject(gate.reason, detail)

        return self.classifier.classify(context)
