from __future__ import annotations

from ..config import PurchaseDayOddRuleConfig
from ..context import ReceiptContext
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class PURCHASE_DAY_ODD(Rule):
    rule_id = "PURCHASE-DAY-ODD"
    rule_title = "6 points if the day in the purchase date is odd"
    config_model = PurchaseDayOddRuleConfig

    def evaluate(self, ctx: ReceiptContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, PurchaseDayOddRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        day = ctx.purchase_date.day
        odd = day % 2 == 1
        return self.result(
            cfg.points if odd else 0,
            f"Purchase day {day} is {'odd' if odd else 'even'}.",
            details=[
                RuleResultDetail(
                    key="purchaseDate",
                    message="Day of month of the purchase.",
                    values={"purchase_date": ctx.purchase_date.isoformat(), "day": day},
                )
            ],
        )
