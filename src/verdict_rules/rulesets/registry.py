"""Registration and discovery of bundled rule sets."""

from typing import Callable

from verdict_rules.engine import Engine
from verdict_rules.errors import RuleSetNotFoundError

RuleSetFactory = Callable[[Engine], Engine]

_rulesets: dict[str, RuleSetFactory] = {}


def register_ruleset(name: str, factory: RuleSetFactory) -> None:
  """Register a rule set factory.

  Args:
    name: Unique rule set name (e.g., 'credit').
    factory: Callable that adds the rule set's rules to an Engine and
             returns it.
  """
  _rulesets[name] = factory


def get_ruleset(name: str) -> RuleSetFactory:
  """Get a rule set factory by name."""
  if name not in _rulesets:
    available = ", ".join(sorted(_rulesets)) or "none"
    raise RuleSetNotFoundError(
      f"Rule set '{name}' not found. Available: {available}"
    )
  return _rulesets[name]


def list_rulesets() -> list[str]:
  """List registered rule set names."""
  return sorted(_rulesets)


class RuleSetRegistry:
  """Registry for lazy rule set loading."""

  @staticmethod
  def load_all() -> None:
    """Load bundled rule set modules to trigger registration."""
    from verdict_rules.rulesets import credit, eligibility, purchase  # noqa: F401
