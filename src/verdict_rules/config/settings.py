"""Engine and tooling settings."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LogLevel(Enum):
  """Logging verbosity for the CLI."""

  DEBUG = "DEBUG"
  INFO = "INFO"
  WARNING = "WARNING"
  ERROR = "ERROR"


class OutputFormat(Enum):
  """Result output format."""

  TERMINAL = "terminal"
  JSON = "json"
  MARKDOWN = "markdown"


class EngineSettings(BaseModel):
  """Engine configuration."""

  model_config = ConfigDict(use_enum_values=False)

  auto_seal: bool = False
  log_level: LogLevel = LogLevel.WARNING
  output_format: OutputFormat = OutputFormat.TERMINAL
