"""Environment variable loading and validation."""

import os
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_DATABASE_URL = "sqlite:///./data/talentmatch.db"
DEFAULT_DOCUMENT_ROOT = "./data/documents"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Secrets and deployment-specific settings read from the environment."""

    def __init__(
        self,
        gemini_api_key: Optional[str] = None,
        database_url: Optional[str] = None,
        document_root: Optional[str] = None,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.gemini_api_key = gemini_api_key
        self.database_url = database_url or DEFAULT_DATABASE_URL
        self.document_root = document_root or DEFAULT_DOCUMENT_ROOT
        self.log_level = log_level
        self.environment = environment or "local"


def load_environment_config(require_api_key: bool = True) -> EnvironmentConfig:
    """Load and validate environment variables.

    A ``.env`` file in the working directory is loaded first; variables that
    are already set in the process environment take precedence.

    Environment variables:
    - GEMINI_API_KEY: Semantic provider API key (required when require_api_key)
    - DATABASE_URL: SQLAlchemy URL (default: sqlite:///./data/talentmatch.db)
    - DOCUMENT_ROOT: Directory holding uploaded documents
    - LOG_LEVEL: Override log level
    - ENVIRONMENT: Environment label for log records

    Args:
        require_api_key: Whether a missing GEMINI_API_KEY is an error

    Returns:
        EnvironmentConfig with validated values

    Raises:
        ConfigurationError: If required variables are missing or invalid
    """
    load_dotenv()

    errors = []

    gemini_api_key = os.getenv("GEMINI_API_KEY")
    log_level = os.getenv("LOG_LEVEL")

    if require_api_key and not (gemini_api_key and gemini_api_key.strip()):
        errors.append("Missing required environment variable: GEMINI_API_KEY")

    if log_level and log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and fill in your credentials",
                "Set semantic.enabled: false to run lexical matching without an API key",
            ],
        )

    return EnvironmentConfig(
        gemini_api_key=gemini_api_key.strip() if gemini_api_key else None,
        database_url=os.getenv("DATABASE_URL"),
        document_root=os.getenv("DOCUMENT_ROOT"),
        log_level=log_level.upper() if log_level else None,
        environment=os.getenv("ENVIRONMENT"),
    )
