"""Purchase approval, declared with the builder DSL."""

from verdict_rules.builder import RuleBuilder
from verdict_rules.engine import Engine
from verdict_rules.rulesets.registry import register_ruleset

DOMESTIC_COUNTRY = "BR"
GOLD_AUTO_APPROVE_LIMIT = 10000
INTERNATIONAL_REVIEW_THRESHOLD = 3000


def _too_many_chargebacks(rule: RuleBuilder) -> None:
  rule.when_condition(lambda ctx: ctx.get("previous_chargebacks", 0) > 2)
  rule.then_action({"status": "blocked", "reason": "Too many chargebacks"})


def _gold_customer(rule: RuleBuilder) -> None:
  @rule.when_condition
  def is_gold(ctx):
    return (
      ctx.get("customer_tier") == "gold"
      and ctx.get("amount", 0) <= GOLD_AUTO_APPROVE_LIMIT
    )

  rule.then_action({
    "status": "approved",
    "reason": "Gold customer - auto approved",
    "review_required": False,
  })


def _new_account(rule: RuleBuilder) -> None:
  rule.when_condition(lambda ctx: ctx.get("account_age_days", 0) < 30)
  rule.then_action({
    "status": "pending",
    "reason": "New account - manual review",
    "review_required": True,
  })


def _international_high_value(rule: RuleBuilder) -> None:
  @rule.when_condition
  def is_international_high_value(ctx):
    return (
      ctx.get("shipping_country", DOMESTIC_COUNTRY) != DOMESTIC_COUNTRY
      and ctx.get("amount", 0) > INTERNATIONAL_REVIEW_THRESHOLD
    )

  rule.then_action({
    "status": "pending",
    "reason": "High value international order",
    "review_required": True,
  })


def _fallback(rule: RuleBuilder) -> None:
  # Every evaluation ends in an explicit decision.
  rule.when_condition(lambda _ctx: True)
  rule.then_action({
    "status": "pending",
    "reason": "Default manual review",
    "review_required": True,
  })


def _declare(engine: Engine) -> None:
  engine.rule(_too_many_chargebacks, priority=100, name="chargebacks")
  engine.rule(_gold_customer, priority=50, name="gold-customer")
  engine.rule(_new_account, priority=40, name="new-account")
  engine.rule(_international_high_value, priority=30, name="international-high-value")
  engine.rule(_fallback, priority=0, name="fallback")


def install(engine: Engine) -> Engine:
  """Add the purchase approval rules to `engine`."""
  return engine.define_rules(_declare)


register_ruleset("purchase", install)
