from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Tuple, Type

from pydantic import BaseModel, ValidationError

from .config import ScoringConfig
from .rule import Rule


class RuleRegistry:
    def __init__(self):
        self._rules: Dict[str, Type[Rule]] = {}

    def register(self, rule_cls: Type[Rule]) -> None:
        rule_id = getattr(rule_cls, "rule_id", None)
        if not rule_id:
            raise ValueError("Rule class missing rule_id")
        config_model = getattr(rule_cls, "config_model", None)
        if not (isinstance(config_model, type) and issubclass(config_model, BaseModel)):
            raise ValueError(f"Rule {rule_id} must define config_model as a pydantic model")
        if rule_id in self._rules:
            raise ValueError(f"Duplicate rule_id registered: {rule_id}")
        self._rules[rule_id] = rule_cls

    def create_all(self) -> list[Rule]:
        return [cls() for cls in self._rules.values()]

    def get(self, rule_id: str) -> Type[Rule]:
        return self._rules[rule_id]

    def ids(self) -> Iterable[str]:
        return self._rules.keys()

    def items(self) -> Iterator[Tuple[str, Type[Rule]]]:
        return iter(self._rules.items())

    def default_config(self, rule_id: str) -> Dict[str, Any]:
        return self.get(rule_id).config_model().model_dump(mode="json")

    def validate_config(self, config: ScoringConfig) -> ScoringConfig:
        """Check every rule entry up front, so a bad scoring config fails at load time, not per receipt."""
        for rule_id, raw in config.rules.items():
            if rule_id not in self._rules:
                known = ", ".join(sorted(self._rules))
                raise ValueError(f"Unknown rule id in scoring config: {rule_id!r} (known: {known})")
            try:
                self._rules[rule_id].config_model.model_validate(raw)
            except ValidationError as exc:
                raise ValueError(f"Invalid scoring config for {rule_id}: {exc}") from exc
        return config


registry = RuleRegistry()


def register_rule(rule_cls: Type[Rule]) -> Type[Rule]:
    registry.register(rule_cls)
    return rule_cls
