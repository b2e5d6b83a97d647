from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T", bound=BaseModel)


class RuleConfigBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = True


class RetailerAlphanumericRuleConfig(RuleConfigBase):
    points_per_character: int = 1


class TotalRoundDollarRuleConfig(RuleConfigBase):
    points: int = 50


class TotalQuarterMultipleRuleConfig(RuleConfigBase):
    points: int = 25
    multiple_cents: int = Field(default=25, gt=0)


class ItemPairsRuleConfig(RuleConfigBase):
    points_per_group: int = 5
    group_size: int = Field(default=2, gt=0)


class ItemDescriptionLengthRuleConfig(RuleConfigBase):
    length_multiple: int = Field(default=3, gt=0)
    price_multiplier: Decimal = Decimal("0.2")
    # A blank description has trimmed length 0, which is a multiple of anything.
    score_empty_description: bool = True


class PurchaseDayOddRuleConfig(RuleConfigBase):
    points: int = 6


class PurchaseTimeAfternoonRuleConfig(RuleConfigBase):
    points: int = 10
    # Half-open hour window [start, end). The default only matches the 14:xx hour.
    window_start_hour: int = Field(default=14, ge=0, le=23)
    window_end_hour: int = Field(default=15, ge=1, le=24)

    @model_validator(mode="after")
    def _check_window(self) -> "PurchaseTimeAfternoonRuleConfig":
        if self.window_end_hour <= self.window_start_hour:
            raise ValueError("window_end_hour must be greater than window_start_hour")
        return self


class ScoringConfig(BaseModel):
    """Per-deployment overrides for the scoring rules.

    Rules pull their typed config via `get_rule_config`; a rule with no entry
    runs with its model's defaults.
    """

    rules: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_rule_config(
        self,
        rule_id: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if rule_id not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.rules.get(rule_id, {})
        return model.model_validate(raw)


def load_scoring_config(path: str | Path) -> ScoringConfig:
    """Read a ScoringConfig from a YAML (or JSON) file."""
    with Path(path).open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    if raw is None:
        return ScoringConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Scoring config must be a mapping: {path}")
    return ScoringConfig.model_validate(raw)
