"""Rule engine: owns a frozen context and evaluates rules by priority."""

import logging
from typing import Any, Callable, Mapping

from verdict_rules.builder import RuleBuilder
from verdict_rules.config.settings import EngineSettings
from verdict_rules.context import FrozenDict, freeze_context
from verdict_rules.errors import BlockRequired, EngineSealedError
from verdict_rules.result import Result
from verdict_rules.rule import Rule

logger = logging.getLogger(__name__)

RuleBlock = Callable[[RuleBuilder], Any]
RulesBlock = Callable[["Engine"], Any]


class Engine:
  """Evaluates rules against a fixed context and returns the first match.

  The context is frozen when the engine is created and belongs to the
  engine; `evaluate` takes no arguments. Rules are kept sorted by
  descending priority, and rules sharing a priority keep the order in
  which they were added.

  Registration and evaluation must not overlap across threads. Once all
  rules are registered, `seal()` makes that explicit; concurrent calls to
  `evaluate` are then safe.

  Example:
    engine = Engine({"age": 25, "verified": True})

    def verified(rule: RuleBuilder) -> None:
      rule.when_condition(lambda ctx: ctx["verified"])
      rule.then_action("approve_verified")

    result = engine.rule(verified, priority=10).evaluate()
    result.value  # "approve_verified"
  """

  def __init__(
    self,
    context: Mapping[str, Any] | None = None,
    settings: EngineSettings | None = None,
  ):
    """Initialize the engine.

    Args:
      context: Values the rules are evaluated against. Deep-copied and
               frozen; later changes to the caller's object are not seen.
      settings: Optional engine settings. Defaults are used if None.
    """
    self._context = freeze_context(context)
    self._rules: list[Rule] = []
    self._settings = settings or EngineSettings()
    self._sealed = False

  @property
  def context(self) -> FrozenDict:
    """The frozen evaluation context."""
    return self._context

  @property
  def rules(self) -> tuple[Rule, ...]:
    """Registered rules in evaluation order (read only)."""
    return tuple(self._rules)

  @property
  def settings(self) -> EngineSettings:
    return self._settings

  @property
  def sealed(self) -> bool:
    return self._sealed

  def add_rule(self, rule: Rule) -> "Engine":
    """Register a rule.

    Returns:
      self, so registrations can be chained.

    Raises:
      EngineSealedError: If the engine has been sealed.
      TypeError: If `rule` is not a Rule.
    """
    self._ensure_open()
    if not isinstance(rule, Rule):
      raise TypeError(f"expected a Rule, got {type(rule).__name__}")

    self._rules.append(rule)
    # list.sort is stable, so equal priorities keep insertion order.
    self._rules.sort(key=lambda r: -r.priority)

    logger.debug(
      "Registered rule %s (priority=%s), %d rule(s) total",
      rule.name or hex(id(rule)),
      rule.priority,
      len(self._rules),
    )
    return self

  def rule(
    self,
    block: RuleBlock | None = None,
    *,
    priority: Any = 0,
    name: str | None = None,
  ) -> "Engine":
    """Define a rule with the builder DSL.

    `block` receives a RuleBuilder and must call `when_condition` and
    `then_action` on it.

    Raises:
      BlockRequired: If no callable block is given.
      ConditionRequired: If the block never set a condition.
      ActionRequired: If the block never set an action.
    """
    if block is None or not callable(block):
      raise BlockRequired("block required for rule")
    self._ensure_open()

    builder = RuleBuilder(priority=priority, name=name)
    block(builder)
    return self.add_rule(builder.build())

  def define_rules(self, block: RulesBlock | None = None) -> "Engine":
    """Define several rules in one block.

    `block` receives this engine and typically calls `rule` on it once per
    rule.

    Raises:
      BlockRequired: If no callable block is given.
    """
    if block is None or not callable(block):
      raise BlockRequired("block required for define_rules")
    self._ensure_open()

    block(self)
    return self

  def seal(self) -> "Engine":
    """Reject any further rule registration."""
    if not self._sealed:
      self._sealed = True
      logger.debug("Engine sealed with %d rule(s)", len(self._rules))
    return self

  def evaluate(self) -> Result:
    """Evaluate rules by priority and return the first match.

    Rules after the first match are not evaluated. Exceptions raised by a
    condition propagate unchanged.

    Returns:
      Result with the matched action and rule, or an empty Result if no
      rule matched.
    """
    if self._settings.auto_seal:
      self.seal()

    logger.debug("Evaluating %d rule(s)", len(self._rules))
    for rule in self._rules:
      action = rule.evaluate(self._context)
      if action is not None:
        logger.debug(
          "Matched rule %s (priority=%s)",
          rule.name or hex(id(rule)),
          rule.priority,
        )
        return Result(value=action, matched_rule=rule)

    logger.debug("No rule matched")
    return Result(value=None, matched_rule=None)

  def _ensure_open(self) -> None:
    if self._sealed:
      raise EngineSealedError("engine is sealed; no more rules can be added")
