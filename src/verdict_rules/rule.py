"""Rule abstraction: a condition, an action and a priority."""

import inspect
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Mapping

from verdict_rules.errors import (
  InvalidConditionType,
  InvalidPriorityType,
  MissingAction,
  MissingCondition,
)

Condition = Callable[[Mapping[str, Any]], Any]


def _accepts_single_argument(condition: Callable) -> bool:
  """Check that `condition` can be called with one positional argument."""
  try:
    signature = inspect.signature(condition)
  except (TypeError, ValueError):
    # Some builtins expose no signature; trust callable() for those.
    return True

  try:
    signature.bind(None)
  except TypeError:
    return False
  return True


@dataclass(frozen=True, eq=False)
class Rule:
  """A single condition → action rule.

  The condition receives the engine's frozen context and its return value
  is interpreted for truthiness. The action is returned untouched when the
  condition holds; it may be any value except None, which is reserved to
  signal "no match". Higher priorities are evaluated first and may be
  negative.

  Rules compare by identity and hold no reference to an engine, so the
  same instance can be registered on several engines.

  Example:
    rule = Rule(
      condition=lambda ctx: ctx["age"] >= 18,
      action="approve",
      priority=10,
    )
    rule.evaluate({"age": 25})  # "approve"
  """

  condition: Condition
  action: Any
  priority: Real = 0
  name: str | None = None

  def __post_init__(self) -> None:
    if self.condition is None:
      raise MissingCondition("condition is required")
    if self.action is None:
      raise MissingAction("action is required")
    if not callable(self.condition) or not _accepts_single_argument(self.condition):
      raise InvalidConditionType(
        "condition must be a callable accepting a single context argument"
      )
    if (
      isinstance(self.priority, bool)
      or not isinstance(self.priority, Real)
      or (isinstance(self.priority, float) and math.isnan(self.priority))
    ):
      raise InvalidPriorityType(
        f"priority must be a number, got {self.priority!r}"
      )

  def evaluate(self, context: Mapping[str, Any]) -> Any:
    """Return the action if the condition holds for `context`, else None."""
    if self.matches(context):
      return self.action
    return None

  def matches(self, context: Mapping[str, Any]) -> bool:
    """Return whether the condition holds for `context`."""
    return bool(self.condition(context))

  def __repr__(self) -> str:
    label = f" name={self.name!r}" if self.name else ""
    return f"<Rule{label} priority={self.priority!r} action={self.action!r}>"
