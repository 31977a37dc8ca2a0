"""Bundled rule sets."""

from verdict_rules.rulesets.registry import (
  RuleSetRegistry,
  get_ruleset,
  list_rulesets,
  register_ruleset,
)

__all__ = [
  "RuleSetRegistry",
  "get_ruleset",
  "list_rulesets",
  "register_ruleset",
]
