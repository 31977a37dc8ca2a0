"""Output formatting for evaluation results."""

import json
from abc import ABC, abstractmethod
from typing import Any, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table

from verdict_rules.context import thaw
from verdict_rules.result import Result


def _rule_summary(result: Result) -> dict[str, Any] | None:
  if not result.matched:
    return None
  return {
    "name": result.matched_rule.name,
    "priority": result.matched_rule.priority,
  }


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, result: Result, context: Mapping[str, Any] | None = None) -> str:
    """Format an evaluation result for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, result: Result, context: Mapping[str, Any] | None = None) -> str:
    self._print_verdict(result)
    if context:
      self._print_context(context)
    return ""

  def _print_verdict(self, result: Result) -> None:
    self.console.print()
    if not result.matched:
      self.console.print(Panel(
        "[yellow]No rule matched.[/yellow]",
        title="[bold]Verdict[/bold]",
        border_style="yellow",
      ))
      return

    rule = result.matched_rule
    title = f"[bold]Verdict[/bold] (priority {rule.priority})"
    if rule.name:
      title = f"[bold]Verdict[/bold] ({rule.name}, priority {rule.priority})"
    self.console.print(Panel(
      Pretty(thaw(result.value)),
      title=title,
      border_style="green",
    ))

  def _print_context(self, context: Mapping[str, Any]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", width=24)
    table.add_column("Value", min_width=30)

    for key, value in context.items():
      table.add_row(str(key), Pretty(thaw(value)))

    self.console.print()
    self.console.print(table)


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, result: Result, context: Mapping[str, Any] | None = None) -> str:
    data = {
      "value": thaw(result.value),
      "matched": result.matched,
      "rule": _rule_summary(result),
    }
    if context is not None:
      data["context"] = thaw(context)
    return json.dumps(data, indent=2, default=str)


class MarkdownFormatter(OutputFormatter):
  """Markdown output formatter."""

  def format(self, result: Result, context: Mapping[str, Any] | None = None) -> str:
    lines = ["# Verdict", ""]

    if result.matched:
      rule = result.matched_rule
      lines.append(f"**Rule:** {rule.name or 'unnamed'} (priority {rule.priority})")
      lines.extend(["", "## Action", "", "```", repr(thaw(result.value)), "```", ""])
    else:
      lines.extend(["No rule matched.", ""])

    if context:
      lines.extend(["## Context", "", "| Key | Value |", "| --- | --- |"])
      for key, value in context.items():
        lines.append(f"| {key} | {thaw(value)!r} |")
      lines.append("")

    return "\n".join(lines)


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
