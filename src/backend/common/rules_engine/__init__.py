"""Receipt points rules engine.

This package intentionally contains only domain logic:
- Rule inputs are a parsed receipt + scoring config.
- No HTTP, storage, or logging lives here; scoring is a pure function of its input.
"""

from .config import ScoringConfig, load_scoring_config
from .context import ReceiptContext
from .errors import InvalidReceiptError
from .models import Item, Receipt, RuleResult, ScoreReport
from .registry import registry
from .runner import RulesRunner, evaluate

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
