from __future__ import annotations

from ..config import TotalRoundDollarRuleConfig
from ..context import ReceiptContext, cents_to_decimal
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class TOTAL_ROUND_DOLLAR(Rule):
    rule_id = "TOTAL-ROUND-DOLLAR"
    rule_title = "50 points if the total is a round dollar amount with no cents"
    config_model = TotalRoundDollarRuleConfig

    def evaluate(self, ctx: ReceiptContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, TotalRoundDollarRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        total = cents_to_decimal(ctx.total_cents)
        if ctx.total_cents % 100 == 0:
            points = cfg.points
            summary = f"Total {total} has no cents."
        else:
            points = 0
            summary = f"Total {total} is not a round dollar amount."

        return self.result(
            points,
            summary,
            details=[
                RuleResultDetail(
                    key="total",
                    message="Cents component of the total.",
                    values={"total": str(total), "cents": ctx.total_cents % 100},
                )
            ],
        )
