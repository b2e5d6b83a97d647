from __future__ import annotations

from ..config import TotalQuarterMultipleRuleConfig
from ..context import ReceiptContext, cents_to_decimal
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class TOTAL_QUARTER_MULTIPLE(Rule):
    rule_id = "TOTAL-QUARTER-MULTIPLE"
    rule_title = "25 points if the total is a multiple of 0.25"
    description = "Checked on integer cents so binary floating point never misclassifies a quarter amount."
    config_model = TotalQuarterMultipleRuleConfig

    def evaluate(self, ctx: ReceiptContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, TotalQuarterMultipleRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        total = cents_to_decimal(ctx.total_cents)
        step = cents_to_decimal(cfg.multiple_cents)
        remainder = ctx.total_cents % cfg.multiple_cents
        if remainder == 0:
            points = cfg.points
            summary = f"Total {total} is a multiple of {step}."
        else:
            points = 0
            summary = f"Total {total} is not a multiple of {step}."

        return self.result(
            points,
            summary,
            details=[
                RuleResultDetail(
                    key="total",
                    message="Remainder of the total divided by the step, in cents.",
                    values={"total": str(total), "step": str(step), "remainder_cents": remainder},
                )
            ],
        )
