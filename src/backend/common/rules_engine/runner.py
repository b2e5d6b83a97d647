from __future__ import annotations

from typing import Iterable, Optional

from .config import ScoringConfig
from .context import ReceiptContext, ReceiptInput
from .models import ScoreReport
from .registry import registry


class RulesRunner:
    def __init__(self, rules: Optional[Iterable] = None):
        self._rules = list(rules) if rules is not None else registry.create_all()

    def run(
        self,
        receipt: ReceiptInput,
        *,
        config: Optional[ScoringConfig] = None,
        rule_ids: Optional[set[str]] = None,
    ) -> ScoreReport:
        # Parsing happens before any rule runs, so a bad field never yields a partial score.
        ctx = ReceiptContext.from_receipt(receipt, config)
        return self.run_context(ctx, rule_ids=rule_ids)

    def run_context(self, ctx: ReceiptContext, *, rule_ids: Optional[set[str]] = None) -> ScoreReport:
        results = []
        for rule in self._rules:
            if rule_ids is not None and rule.rule_id not in rule_ids:
                continue
            results.append(rule.evaluate(ctx))

        return ScoreReport(
            points=sum(res.points for res in results),
            results=results,
        )


def evaluate(receipt: ReceiptInput, *, config: Optional[ScoringConfig] = None) -> int:
    """Score a receipt. Raises InvalidReceiptError if any required field is missing or malformed."""
    return RulesRunner().run(receipt, config=config).points
