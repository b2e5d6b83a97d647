from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _load_json(path: Path):
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def _format_breakdown(report) -> list[str]:
    lines = []
    for res in report.results:
        lines.append(f"  {res.rule_id:<26} {res.points:>5}  {res.summary}")
    lines.append(f"  {'TOTAL':<26} {report.points:>5}")
    return lines


def score_files(paths: list[Path], *, config_path: Optional[Path] = None, breakdown: bool = False) -> tuple[list[str], int]:
    """Score each receipt file; returns the output lines and the number of invalid receipts."""
    _ensure_backend_on_path()
    from common.rules_engine import InvalidReceiptError, RulesRunner, ScoringConfig, load_scoring_config, registry

    config = registry.validate_config(load_scoring_config(config_path) if config_path else ScoringConfig())
    runner = RulesRunner()
    lines: list[str] = []
    failures = 0
    for path in paths:
        try:
            report = runner.run(_load_json(path), config=config)
        except OSError as exc:
            failures += 1
            lines.append(f"{path}: unreadable ({exc.strerror or exc})")
            continue
        except json.JSONDecodeError as exc:
            failures += 1
            lines.append(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})")
            continue
        except InvalidReceiptError as exc:
            failures += 1
            lines.append(f"{path}: invalid receipt ({exc})")
            continue

        lines.append(f"{path}: {report.points}")
        if breakdown:
            lines.extend(_format_breakdown(report))
    return lines, failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score receipt JSON files with the loyalty points rules.")
    parser.add_argument("receipts", nargs="+", type=Path, help="Receipt JSON file(s).")
    parser.add_argument("--breakdown", action="store_true", help="Print each rule's contribution.")
    parser.add_argument("--config", type=Path, default=None, help="Scoring config (YAML or JSON).")
    args = parser.parse_args(argv)

    lines, failures = score_files(args.receipts, config_path=args.config, breakdown=args.breakdown)
    for line in lines:
        print(line)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
