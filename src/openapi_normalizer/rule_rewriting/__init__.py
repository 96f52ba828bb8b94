"""Rule rewriting exports."""

from .rule_applier import apply_rules
from .rule_models import REMOVE_KEY, RewriteRule
from .standard_rules import DEFAULT_STATUS_DESCRIPTIONS, STANDARD_RULES, build_standard_rules

__all__ = [
    "DEFAULT_STATUS_DESCRIPTIONS",
    "REMOVE_KEY",
    "RewriteRule",
    "STANDARD_RULES",
    "apply_rules",
    "build_standard_rules",
]
