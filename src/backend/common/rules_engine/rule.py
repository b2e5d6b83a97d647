from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Type

from pydantic import BaseModel

from .context import ReceiptContext
from .models import RuleResult


class Rule(ABC):
    rule_id: str
    rule_title: str
    description: str = ""
    config_model: Type[BaseModel]

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    @abstractmethod
    def evaluate(self, ctx: ReceiptContext) -> RuleResult:  # pragma: no cover
        raise NotImplementedError

    def result(self, points: int, summary: str, **kwargs) -> RuleResult:
        return RuleResult(
            rule_id=self.rule_id,
            rule_title=self.rule_title,
            points=points,
            summary=summary,
            **kwargs,
        )

    def disabled(self) -> RuleResult:
        return self.result(0, "Rule disabled by scoring configuration.")
