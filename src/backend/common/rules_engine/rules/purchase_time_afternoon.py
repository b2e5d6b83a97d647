from __future__ import annotations

from ..config import PurchaseTimeAfternoonRuleConfig
from ..context import ReceiptContext
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class PURCHASE_TIME_AFTERNOON(Rule):
    rule_id = "PURCHASE-TIME-AFTERNOON"
    rule_title = "10 points if the time of purchase is after 2:00pm and before 4:00pm"
    description = (
        "Scored on the purchase hour only. The default window [14, 15) matches 14:00-14:59, "
        "which is how existing scores were computed; widen window_end_hour to 16 for the full window."
    )
    config_model = PurchaseTimeAfternoonRuleConfig

    def evaluate(self, ctx: ReceiptContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, PurchaseTimeAfternoonRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        hour = ctx.purchase_time.hour
        in_window = cfg.window_start_hour <= hour < cfg.window_end_hour
        window = f"{cfg.window_start_hour:02d}:00-{cfg.window_end_hour:02d}:00"
        if in_window:
            summary = f"Purchase time {ctx.purchase_time:%H:%M} falls in the {window} window."
        else:
            summary = f"Purchase time {ctx.purchase_time:%H:%M} is outside the {window} window."

        return self.result(
            cfg.points if in_window else 0,
            summary,
            details=[
                RuleResultDetail(
                    key="purchaseTime",
                    message="Purchase hour compared to the scoring window.",
                    values={
                        "purchase_time": ctx.purchase_time.strftime("%H:%M"),
                        "window_start_hour": cfg.window_start_hour,
                        "window_end_hour": cfg.window_end_hour,
                    },
                )
            ],
        )
