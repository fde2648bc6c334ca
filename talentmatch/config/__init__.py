"""Configuration management for the matching engine."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, parse_config_file
from .models import (
    AppConfig,
    ExtractionConfig,
    InsightConfig,
    KeywordConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    MatchingConfig,
    ScoringConfig,
    SemanticConfig,
    SemanticProvider,
)

__all__ = [
    # Loader functions
    "load_config",
    "parse_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "ExtractionConfig",
    "KeywordConfig",
    "ScoringConfig",
    "SemanticConfig",
    "InsightConfig",
    "MatchingConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    "SemanticProvider",
    # Exceptions
    "ConfigurationError",
]
