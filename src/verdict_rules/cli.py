"""CLI interface using Typer."""

import logging
import os
import traceback
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler

from verdict_rules import __version__
from verdict_rules.config import EngineSettings, LogLevel, load_config
from verdict_rules.engine import Engine
from verdict_rules.errors import VerdictRulesError
from verdict_rules.output import TerminalFormatter, get_formatter
from verdict_rules.rulesets import RuleSetRegistry, get_ruleset, list_rulesets

EXIT_NO_MATCH = 2

app = typer.Typer(
  name="verdict-rules",
  help="Evaluate priority-ordered decision rules against a context",
  no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _is_debug() -> bool:
  return os.environ.get("VERDICT_RULES_DEBUG", "").lower() in ("1", "true", "yes")


def _configure_logging(level: LogLevel) -> None:
  logging.basicConfig(
    level=level.value,
    format="%(message)s",
    handlers=[RichHandler(console=err_console, show_path=False)],
    force=True,
  )


def _load_context(path: Path | None) -> dict:
  """Load an evaluation context from a YAML or JSON file."""
  if path is None:
    return {}
  if not path.exists():
    raise FileNotFoundError(f"Context file not found: {path}")

  with open(path) as f:
    data = yaml.safe_load(f)

  if data is None:
    return {}
  if not isinstance(data, dict):
    raise ValueError(f"Context file must contain a mapping: {path}")
  return data


def version_callback(value: bool) -> None:
  if value:
    console.print(f"verdict-rules {__version__}")
    raise typer.Exit()


@app.callback()
def main(
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Evaluate priority-ordered decision rules against a context."""


@app.command("evaluate")
def evaluate_command(
  ruleset: str = typer.Argument(..., help="Bundled rule set to evaluate (see 'list')"),
  context_file: Path = typer.Option(
    None, "--context", "-x", help="YAML or JSON file with the evaluation context"
  ),
  format_type: str = typer.Option(
    None, "--format", help="Output format: terminal, json, markdown"
  ),
  no_match_ok: bool = typer.Option(
    False, "--no-match-ok", help="Exit 0 even when no rule matches"
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Debug logging and full tracebacks"),
) -> None:
  """Evaluate a bundled rule set and print the verdict."""
  show_traceback = debug or _is_debug()

  try:
    settings = load_config(config)
    _configure_logging(LogLevel.DEBUG if show_traceback else settings.log_level)

    RuleSetRegistry.load_all()
    install = get_ruleset(ruleset)
    engine = install(Engine(_load_context(context_file), settings=settings))
    result = engine.evaluate()

    formatter = get_formatter(format_type or settings.output_format.value)
    if isinstance(formatter, TerminalFormatter):
      formatter.console = console
    output = formatter.format(result, engine.context)
    if output:
      console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)

  except (VerdictRulesError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except Exception as e:
    console.print(f"[red]Error:[/red] {e}")
    if show_traceback:
      console.print("\n[dim]Traceback:[/dim]")
      console.print(traceback.format_exc())
    raise typer.Exit(1) from None

  if not result.matched and not no_match_ok:
    raise typer.Exit(EXIT_NO_MATCH)


@app.command("list")
def list_command() -> None:
  """List bundled rule sets."""
  RuleSetRegistry.load_all()
  for name in list_rulesets():
    console.print(name)


if __name__ == "__main__":
  app()
