"""Priority-ordered rule evaluation engine."""

__version__ = "0.1.0"

from verdict_rules.builder import RuleBuilder
from verdict_rules.config import EngineSettings, load_config
from verdict_rules.context import FrozenDict, FrozenList, freeze, thaw
from verdict_rules.engine import Engine
from verdict_rules.errors import (
  ActionRequired,
  BlockRequired,
  ConditionRequired,
  EngineSealedError,
  ImmutableContextViolation,
  InvalidConditionType,
  InvalidPriorityType,
  MissingAction,
  MissingCondition,
  RuleSetNotFoundError,
  VerdictRulesError,
)
from verdict_rules.result import Result
from verdict_rules.rule import Rule

__all__ = [
  "ActionRequired",
  "BlockRequired",
  "ConditionRequired",
  "Engine",
  "EngineSealedError",
  "EngineSettings",
  "FrozenDict",
  "FrozenList",
  "ImmutableContextViolation",
  "InvalidConditionType",
  "InvalidPriorityType",
  "MissingAction",
  "MissingCondition",
  "Result",
  "Rule",
  "RuleBuilder",
  "RuleSetNotFoundError",
  "VerdictRulesError",
  "__version__",
  "freeze",
  "load_config",
  "thaw",
]
