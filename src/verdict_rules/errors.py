"""Error types raised by the rule engine."""


class VerdictRulesError(Exception):
  """Base class for all verdict-rules errors."""


class MissingCondition(VerdictRulesError, ValueError):
  """Rule created without a condition."""


class MissingAction(VerdictRulesError, ValueError):
  """Rule created without an action."""


class InvalidConditionType(VerdictRulesError, TypeError):
  """Condition is not callable with a single context argument."""


class InvalidPriorityType(VerdictRulesError, TypeError):
  """Priority is not a real number."""


class ConditionRequired(VerdictRulesError, ValueError):
  """RuleBuilder.build() called before a condition was set."""


class ActionRequired(VerdictRulesError, ValueError):
  """RuleBuilder.build() called before an action was set."""


class BlockRequired(VerdictRulesError, TypeError):
  """DSL method called without a callable block."""


class ImmutableContextViolation(VerdictRulesError, TypeError):
  """Attempt to mutate a frozen evaluation context."""


class EngineSealedError(VerdictRulesError, RuntimeError):
  """Rule registration attempted on a sealed engine."""


class RuleSetNotFoundError(VerdictRulesError):
  """Requested bundled rule set not found."""
