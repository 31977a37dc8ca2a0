"""Age and identity verification eligibility."""

from verdict_rules.engine import Engine
from verdict_rules.rule import Rule
from verdict_rules.rulesets.registry import register_ruleset


def install(engine: Engine) -> Engine:
  """Add the eligibility rules to `engine`.

  Expects `age` (int) and `verified` (bool) in the context.
  """
  return (
    engine
    .add_rule(Rule(
      condition=lambda ctx: ctx["age"] < 18,
      action="reject_minor",
      priority=20,
      name="minor",
    ))
    .add_rule(Rule(
      condition=lambda ctx: ctx["age"] >= 18 and ctx.get("verified", False),
      action="approve_verified_adult",
      priority=10,
      name="verified-adult",
    ))
    .add_rule(Rule(
      condition=lambda ctx: ctx["age"] >= 18,
      action="approve_adult",
      name="adult",
    ))
  )


register_ruleset("eligibility", install)
