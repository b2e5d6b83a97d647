from __future__ import annotations

from ..config import RetailerAlphanumericRuleConfig
from ..context import ReceiptContext
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


def count_alphanumeric(text: str) -> int:
    # ASCII only: accented letters and non-Latin digits score nothing.
    return sum(1 for ch in text if ch.isascii() and ch.isalnum())


@register_rule
class RETAILER_ALPHANUMERIC(Rule):
    rule_id = "RETAILER-ALPHANUMERIC"
    rule_title = "One point for every alphanumeric character in the retailer name"
    description = "Spaces and punctuation in the retailer name contribute nothing."
    config_model = RetailerAlphanumericRuleConfig

    def evaluate(self, ctx: ReceiptContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, RetailerAlphanumericRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        count = count_alphanumeric(ctx.retailer)
        points = count * cfg.points_per_character
        return self.result(
            points,
            f"Retailer name has {count} alphanumeric characters.",
            details=[
                RuleResultDetail(
                    key="retailer",
                    message="Alphanumeric characters counted in retailer name.",
                    values={"retailer": ctx.retailer, "alphanumeric_count": count},
                )
            ],
        )
