"""Configuration management."""

from verdict_rules.config.loader import find_config_file, load_config
from verdict_rules.config.settings import EngineSettings, LogLevel, OutputFormat

__all__ = ["EngineSettings", "LogLevel", "OutputFormat", "find_config_file", "load_config"]
