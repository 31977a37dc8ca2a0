"""Fluent builder behind the Engine.rule DSL."""

from typing import Any

from verdict_rules.errors import ActionRequired, BlockRequired, ConditionRequired
from verdict_rules.rule import Condition, Rule


class RuleBuilder:
  """Collects a condition and an action, then produces a validated Rule.

  The builder is handed to the block passed to `Engine.rule`:

    def adults(rule: RuleBuilder) -> None:
      rule.when_condition(lambda ctx: ctx["age"] >= 18)
      rule.then_action("approve")

    engine.rule(adults, priority=10)

  `when_condition` returns its argument, so it also works as a decorator:

    def adults(rule: RuleBuilder) -> None:
      @rule.when_condition
      def is_adult(ctx):
        return ctx["age"] >= 18

      rule.then_action("approve")
  """

  def __init__(self, priority: Any = 0, name: str | None = None):
    self.priority = priority
    self.name = name
    self.condition: Condition | None = None
    self.action: Any = None

  def when_condition(self, condition: Condition | None = None) -> Condition:
    """Set the condition evaluated against the engine's context.

    Raises:
      BlockRequired: If no callable is given.
    """
    if condition is None or not callable(condition):
      raise BlockRequired("block required for when_condition")
    self.condition = condition
    return condition

  def then_action(self, value: Any) -> None:
    """Set the action returned when the condition holds.

    Any value is accepted, including falsy ones such as False or 0. Only
    None leaves the action unset.
    """
    self.action = value

  set_condition = when_condition
  set_action = then_action

  def build(self) -> Rule:
    """Create the Rule.

    Raises:
      ConditionRequired: If `when_condition` was never called.
      ActionRequired: If `then_action` was never called with a value.
    """
    if self.condition is None:
      raise ConditionRequired("condition is required (use when_condition)")
    if self.action is None:
      raise ActionRequired("action is required (use then_action)")

    return Rule(
      condition=self.condition,
      action=self.action,
      priority=self.priority,
      name=self.name,
    )
