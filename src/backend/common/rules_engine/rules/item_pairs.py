from __future__ import annotations

from ..config import ItemPairsRuleConfig
from ..context import ReceiptContext
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ITEM_PAIRS(Rule):
    rule_id = "ITEM-PAIRS"
    rule_title = "5 points for every two items on the receipt"
    config_model = ItemPairsRuleConfig

    def evaluate(self, ctx: ReceiptContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, ItemPairsRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        item_count = len(ctx.items)
        groups = item_count // cfg.group_size
        return self.result(
            groups * cfg.points_per_group,
            f"{item_count} items make {groups} complete groups of {cfg.group_size}.",
            details=[
                RuleResultDetail(
                    key="items",
                    message="Complete item groups counted.",
                    values={"item_count": item_count, "groups": groups},
                )
            ],
        )
