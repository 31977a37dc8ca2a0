"""Configuration file loading."""

from pathlib import Path

import yaml

from verdict_rules.config.settings import EngineSettings, LogLevel, OutputFormat

CONFIG_FILENAMES = (
  ".verdict-rules.yaml",
  ".verdict-rules.yml",
  "verdict-rules.yaml",
  "verdict-rules.yml",
)


def find_config_file(config_path: Path | None = None) -> Path | None:
  """Return `config_path` if it exists, else the first config in the cwd."""
  candidates = [config_path] if config_path else []
  candidates += [Path.cwd() / name for name in CONFIG_FILENAMES]
  return next((path for path in candidates if path.is_file()), None)


def load_config(config_path: Path | None = None) -> EngineSettings:
  """Load engine settings, falling back to defaults when no file is found.

  Raises:
    ValueError: If the file does not hold a mapping or has invalid values.
  """
  path = find_config_file(config_path)
  if path is None:
    return EngineSettings()

  data = yaml.safe_load(path.read_text()) or {}
  if not isinstance(data, dict):
    raise ValueError(f"Config file must contain a mapping: {path}")
  return _parse_config(data)


def _parse_config(data: dict) -> EngineSettings:
  """Build settings, accepting enum values in any case."""
  values = dict(data)
  if "log_level" in values:
    values["log_level"] = LogLevel(str(values["log_level"]).upper())
  if "output_format" in values:
    values["output_format"] = OutputFormat(str(values["output_format"]).lower())
  return EngineSettings.model_validate(values)
