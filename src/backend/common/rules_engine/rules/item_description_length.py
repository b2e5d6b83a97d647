from __future__ import annotations

from ..config import ItemDescriptionLengthRuleConfig
from ..context import ReceiptContext, cents_to_decimal, ceil_points
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ITEM_DESCRIPTION_LENGTH(Rule):
    rule_id = "ITEM-DESCRIPTION-LENGTH"
    rule_title = "Price-based points for items whose trimmed description length is a multiple of 3"
    description = (
        "For each qualifying item, multiply the price by 0.2 and round up to the nearest integer. "
        "The product is computed in Decimal, never float."
    )
    config_model = ItemDescriptionLengthRuleConfig

    def evaluate(self, ctx: ReceiptContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, ItemDescriptionLengthRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        points = 0
        details = []
        for idx, item in enumerate(ctx.items):
            length = len(item.trimmed_description)
            if length % cfg.length_multiple != 0:
                continue
            if length == 0 and not cfg.score_empty_description:
                continue

            price = cents_to_decimal(item.price_cents)
            item_points = ceil_points(price * cfg.price_multiplier)
            points += item_points
            details.append(
                RuleResultDetail(
                    key=f"items.{idx}",
                    message="Description length qualifies; price scored.",
                    values={
                        "description": item.trimmed_description,
                        "length": length,
                        "price": str(price),
                        "points": item_points,
                    },
                )
            )

        return self.result(
            points,
            f"{len(details)} of {len(ctx.items)} items have a qualifying description length.",
            details=details,
        )
