"""Pytest fixtures."""

import pytest
from verdict_rules.engine import Engine
from verdict_rules.rule import Rule


@pytest.fixture
def adult_context() -> dict:
  return {"age": 25, "verified": True}


@pytest.fixture
def minor_context() -> dict:
  return {"age": 16}


@pytest.fixture
def nested_context() -> dict:
  return {
    "user": {"name": "Ana", "roles": ["admin", "editor"]},
    "tags": {"beta", "internal"},
    "limits": (10, 20),
  }


@pytest.fixture
def adult_rule() -> Rule:
  return Rule(condition=lambda ctx: ctx["age"] >= 18, action="approve_adult", priority=1)


@pytest.fixture
def verified_rule() -> Rule:
  return Rule(condition=lambda ctx: ctx["verified"], action="approve_verified", priority=10)


@pytest.fixture
def engine(adult_context: dict) -> Engine:
  return Engine(adult_context)
