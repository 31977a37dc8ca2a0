"""Credit approval with priority-based overrides.

General approvals sit at low priorities; restrictions and exceptions sit
higher so they win when several rules apply.
"""

from verdict_rules.engine import Engine
from verdict_rules.rule import Rule
from verdict_rules.rulesets.registry import register_ruleset

RULES = (
  Rule(
    condition=lambda ctx: ctx.get("credit_score", 0) >= 700,
    action={"status": "approved", "limit": 5000, "reason": "Good credit score"},
    priority=1,
    name="good-score",
  ),
  Rule(
    condition=lambda ctx: ctx.get("account_age_months", 0) >= 12,
    action={"status": "approved", "limit": 7000, "reason": "Established account"},
    priority=5,
    name="established-account",
  ),
  Rule(
    condition=lambda ctx: not ctx.get("verified_income", False),
    action={"status": "manual_review", "limit": 2000, "reason": "Income not verified"},
    priority=10,
    name="unverified-income",
  ),
  Rule(
    condition=lambda ctx: ctx.get("vip_customer", False),
    action={"status": "approved", "limit": 50000, "reason": "VIP customer"},
    priority=100,
    name="vip",
  ),
)


def install(engine: Engine) -> Engine:
  """Add the credit rules to `engine`.

  The rules are module-level and shared by every engine they are
  installed on.
  """
  for rule in RULES:
    engine.add_rule(rule)
  return engine


register_ruleset("credit", install)
