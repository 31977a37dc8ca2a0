"""Tests for bundled rule sets and their registry."""

import pytest
from verdict_rules.engine import Engine
from verdict_rules.errors import RuleSetNotFoundError
from verdict_rules.rulesets import credit
from verdict_rules.rulesets.registry import (
  RuleSetRegistry,
  get_ruleset,
  list_rulesets,
  register_ruleset,
)


@pytest.fixture(autouse=True)
def _load_bundled() -> None:
  RuleSetRegistry.load_all()


def _evaluate(name: str, context: dict):
  return get_ruleset(name)(Engine(context)).evaluate()


class TestRuleSetRegistry:
  def test_bundled_rulesets_registered(self) -> None:
    names = list_rulesets()

    assert {"credit", "eligibility", "purchase"} <= set(names)
    assert names == sorted(names)

  def test_register_custom_ruleset(self) -> None:
    # Note: This modifies global state, so we use a unique name
    register_ruleset("regtest-empty", lambda engine: engine)

    assert "regtest-empty" in list_rulesets()
    assert get_ruleset("regtest-empty")(Engine()).rules == ()

  def test_unknown_ruleset(self) -> None:
    with pytest.raises(RuleSetNotFoundError, match="Available: .*credit"):
      get_ruleset("does-not-exist")


class TestEligibility:
  def test_minor_rejected(self) -> None:
    assert _evaluate("eligibility", {"age": 16, "verified": True}).value == "reject_minor"

  def test_verified_adult(self) -> None:
    assert _evaluate("eligibility", {"age": 25, "verified": True}).value == "approve_verified_adult"

  def test_unverified_adult(self) -> None:
    result = _evaluate("eligibility", {"age": 25})

    assert result.value == "approve_adult"
    assert result.matched_rule.name == "adult"


class TestCredit:
  @pytest.fixture
  def applicant(self) -> dict:
    return {
      "credit_score": 750,
      "verified_income": False,
      "account_age_months": 24,
      "vip_customer": False,
    }

  def test_unverified_income_restricts(self, applicant: dict) -> None:
    result = _evaluate("credit", applicant)

    assert result.value["status"] == "manual_review"
    assert result.value["limit"] == 2000
    assert result.matched_rule.priority == 10

  def test_vip_overrides_restriction(self, applicant: dict) -> None:
    result = _evaluate("credit", {**applicant, "vip_customer": True})

    assert result.value["status"] == "approved"
    assert result.value["limit"] == 50000

  def test_established_account(self, applicant: dict) -> None:
    result = _evaluate("credit", {**applicant, "verified_income": True})

    assert result.value["limit"] == 7000

  def test_no_rule_matches(self) -> None:
    result = _evaluate("credit", {"credit_score": 500, "verified_income": True})

    assert not result.matched

  def test_rules_shared_across_engines(self, applicant: dict) -> None:
    first = credit.install(Engine(applicant))
    second = credit.install(Engine({**applicant, "vip_customer": True}))

    assert first.rules == second.rules
    assert first.evaluate().matched_rule is not second.evaluate().matched_rule


class TestPurchase:
  @pytest.fixture
  def purchase(self) -> dict:
    return {
      "amount": 5000,
      "customer_tier": "gold",
      "payment_method": "credit_card",
      "account_age_days": 180,
      "previous_chargebacks": 0,
      "shipping_country": "BR",
    }

  def test_gold_customer_auto_approved(self, purchase: dict) -> None:
    result = _evaluate("purchase", purchase)

    assert result.value["status"] == "approved"
    assert result.value["review_required"] is False
    assert result.matched_rule.name == "gold-customer"

  def test_chargebacks_block_everything(self, purchase: dict) -> None:
    result = _evaluate("purchase", {**purchase, "previous_chargebacks": 3})

    assert result.value["status"] == "blocked"

  def test_new_account_needs_review(self, purchase: dict) -> None:
    result = _evaluate("purchase", {**purchase, "customer_tier": "silver", "account_age_days": 10})

    assert result.value["reason"] == "New account - manual review"

  def test_international_high_value(self, purchase: dict) -> None:
    result = _evaluate("purchase", {**purchase, "customer_tier": "silver", "shipping_country": "US"})

    assert result.value["reason"] == "High value international order"

  def test_fallback_always_decides(self) -> None:
    result = _evaluate("purchase", {"account_age_days": 365})

    assert result.matched
    assert result.value["reason"] == "Default manual review"
    assert result.matched_rule.priority == 0

  def test_missing_account_age_counts_as_new(self) -> None:
    result = _evaluate("purchase", {})

    assert result.matched_rule.name == "new-account"

  def test_rules_ordered_by_priority(self, purchase: dict) -> None:
    engine = get_ruleset("purchase")(Engine(purchase))

    assert [r.priority for r in engine.rules] == [100, 50, 40, 30, 0]
