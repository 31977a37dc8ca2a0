"""Evaluation result."""

from dataclasses import dataclass
from typing import Any

from verdict_rules.rule import Rule


@dataclass(frozen=True, repr=False)
class Result:
  """Outcome of `Engine.evaluate`.

  `value` is the winning rule's action and `matched_rule` the rule itself.
  Both are None when no rule matched. Two results are equal when they
  carry equal values and the same rule instance.
  """

  value: Any = None
  matched_rule: Rule | None = None

  @property
  def matched(self) -> bool:
    """Whether a rule matched."""
    return self.matched_rule is not None

  def to_dict(self) -> dict[str, Any]:
    """Snapshot suitable for logging or serialization."""
    return {
      "value": self.value,
      "matched": self.matched,
      "matched_rule": self.matched_rule,
    }

  def describe(self) -> str:
    """Human-readable one-line description."""
    if not self.matched:
      return f"<Result value={self.value!r} matched=False>"

    rule = self.matched_rule
    label = rule.name or hex(id(rule))
    return (
      f"<Result value={self.value!r} matched=True "
      f"rule={label} priority={rule.priority!r}>"
    )

  __repr__ = describe
