"""Describe the registered scoring rules: what each awards and how it can be configured.

`python -m common.rules_engine.catalog [--config scoring.yaml]` prints one entry
per rule, including the settings that would actually apply under that config.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel

from .config import ScoringConfig, load_scoring_config
from .registry import registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    rule_id: str
    rule_title: str
    description: str = ""
    module: str

    config_model: str
    config_schema: Dict[str, Any]
    default_config: Dict[str, Any]
    effective_config: Dict[str, Any]
    overridden: bool = False


def build_catalog(config: Optional[ScoringConfig] = None) -> List[RuleCatalogEntry]:
    config = registry.validate_config(config or ScoringConfig())
    entries: List[RuleCatalogEntry] = []
    for rule_id, rule_cls in registry.items():
        cfg_model = rule_cls.config_model
        effective = config.get_rule_config(rule_id, cfg_model)
        entries.append(
            RuleCatalogEntry(
                rule_id=rule_id,
                rule_title=rule_cls.rule_title,
                description=rule_cls.description,
                module=f"{rule_cls.__module__}.{rule_cls.__name__}",
                config_model=cfg_model.__name__,
                config_schema=cfg_model.model_json_schema(),
                default_config=registry.default_config(rule_id),
                effective_config=effective.model_dump(mode="json"),
                overridden=rule_id in config.rules,
            )
        )

    entries.sort(key=lambda e: e.rule_id)
    return entries


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="List the receipt scoring rules and their settings.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    parser.add_argument("--config", default=None, help="Scoring config (YAML or JSON) to resolve settings against.")
    parser.add_argument("--no-schema", action="store_true", help="Omit the JSON schema of each rule's config.")
    args = parser.parse_args(argv)

    config = load_scoring_config(args.config) if args.config else None
    exclude = {"config_schema"} if args.no_schema else None
    catalog = [e.model_dump(exclude=exclude) for e in build_catalog(config)]
    if args.format == "json":
        print(json.dumps(catalog, indent=2, sort_keys=True))
    else:
        print(yaml.safe_dump(catalog, sort_keys=True))


if __name__ == "__main__":
    main()
