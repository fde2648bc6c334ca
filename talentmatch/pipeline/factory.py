"""Wiring of a ready-to-use MatchPipeline from configuration."""

from pathlib import Path
from typing import Optional

from talentmatch.config.loader import load_config
from talentmatch.extraction.store import LocalDocumentStore
from talentmatch.logging import get_logger
from talentmatch.logging.config import configure_logging
from talentmatch.persistence.database import init_database
from talentmatch.semantic.factory import get_analyzer

from .runner import MatchPipeline

logger = get_logger(__name__, component="pipeline")


def build_pipeline(config_path: Optional[Path] = None) -> MatchPipeline:
    """
    Load configuration and build a MatchPipeline.

    Steps:
    1. Load YAML config and environment variables (.env included)
    2. Configure logging (LOG_LEVEL wins over logging.level)
    3. Initialize the database
    4. Create the semantic analyzer, unless disabled
    5. Open the local document store

    Args:
        config_path: Optional explicit path to the configuration file

    Returns:
        Configured MatchPipeline

    Raises:
        ConfigurationError: If configuration is invalid
        DatabaseConnectionError: If the database cannot be initialized
        SemanticConfigurationError: If the semantic provider cannot be created
    """
    app_config, env_config = load_config(config_path)

    configure_logging(
        level=env_config.log_level or app_config.logging.level,
        format_type=app_config.logging.format,
        environment=env_config.environment,
    )

    init_database(env_config.database_url)
    analyzer = get_analyzer(app_config.semantic, env_config)
    document_source = LocalDocumentStore(env_config.document_root)

    logger.info(
        "Match pipeline ready",
        extra={
            "event": "pipeline.ready",
            "semantic_enabled": analyzer is not None,
            "semantic_provider": analyzer.name if analyzer is not None else None,
            "extract_on_demand": app_config.matching.extract_on_demand,
        },
    )
    return MatchPipeline(app_config, analyzer=analyzer, document_source=document_source)
